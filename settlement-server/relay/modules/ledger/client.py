"""Thin wrapper over the LootLocker server API endpoints the relay uses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from .models import BalanceAdjustment


@dataclass(slots=True)
class LootLockerClient:
    http: httpx.AsyncClient
    api_version: str

    def _headers(self, **extra: str) -> dict[str, str]:
        headers = {"LL-Version": self.api_version, "Content-Type": "application/json"}
        headers.update(extra)
        return headers

    async def start_session(self, server_key: str, game_version: str) -> httpx.Response:
        return await self.http.post(
            "/server/session",
            json={"game_version": game_version},
            headers=self._headers(**{"x-server-key": server_key}),
        )

    async def adjust_balance(self, token: str, adjustment: BalanceAdjustment) -> httpx.Response:
        return await self.http.post(
            f"/server/balances/{adjustment.direction.value}",
            json=adjustment.to_payload(),
            headers=self._headers(**{"x-auth-token": token}),
        )


def response_body(response: httpx.Response) -> Any:
    """Decoded JSON body when there is one, raw text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text


__all__ = ["LootLockerClient", "response_body"]
