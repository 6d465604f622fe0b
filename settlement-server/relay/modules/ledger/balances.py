"""Credit/debit calls against the LootLocker balances API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from .client import LootLockerClient, response_body
from .exceptions import UpstreamError
from .models import BalanceAdjustment
from .session import SessionManager

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 2


@dataclass(slots=True)
class BalanceUpdater:
    client: LootLockerClient
    sessions: SessionManager

    async def apply(self, adjustment: BalanceAdjustment) -> Any:
        """Send ``adjustment`` and return the LootLocker response body.

        A 401 on the first attempt refreshes the session and resends once;
        anything else that is not a success raises :class:`UpstreamError`.
        """
        token = await self.sessions.get_token()
        attempt = 1
        while True:
            response = await self._send(token, adjustment)
            if response.is_success:
                return response_body(response)

            body = response_body(response)
            if response.status_code == httpx.codes.UNAUTHORIZED and attempt < MAX_ATTEMPTS:
                logger.warning("LootLocker rejected the session token, refreshing and retrying")
                token = await self.sessions.refresh()
                attempt += 1
                continue

            logger.error(
                "LootLocker %s for wallet %s failed: status=%s body=%s",
                adjustment.direction.value,
                adjustment.wallet_id,
                response.status_code,
                body,
            )
            raise UpstreamError(
                f"LootLocker {adjustment.direction.value} request failed",
                status_code=response.status_code,
                body=body,
            )

    async def _send(self, token: str, adjustment: BalanceAdjustment) -> httpx.Response:
        try:
            return await self.client.adjust_balance(token, adjustment)
        except httpx.HTTPError as exc:
            logger.error("LootLocker %s request could not be delivered: %s", adjustment.direction.value, exc)
            raise UpstreamError(f"LootLocker {adjustment.direction.value} request failed") from exc


__all__ = ["BalanceUpdater"]
