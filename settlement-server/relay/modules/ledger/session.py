"""LootLocker server session cache."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from .client import LootLockerClient, response_body
from .exceptions import AuthError

logger = logging.getLogger(__name__)


class SessionManager:
    """Holds the server session token and starts a new session when asked.

    The token is fetched lazily on the first :meth:`get_token` call and then
    served from memory. It is never expired on a timer; callers that get a
    401 from LootLocker call :meth:`refresh` to replace it.
    """

    def __init__(self, client: LootLockerClient, server_key: str, game_version: str) -> None:
        self._client = client
        self._server_key = server_key
        self._game_version = game_version
        self._token: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def token(self) -> Optional[str]:
        return self._token

    async def get_token(self) -> str:
        if self._token is not None:
            return self._token
        async with self._lock:
            # Another request may have finished the first session while we waited.
            if self._token is None:
                self._token = await self._start_session()
            return self._token

    async def refresh(self) -> str:
        """Drop the cached token and start a new session unconditionally."""
        self._token = None
        token = await self._start_session()
        self._token = token
        logger.info("LootLocker server session refreshed")
        return token

    async def _start_session(self) -> str:
        try:
            response = await self._client.start_session(self._server_key, self._game_version)
        except httpx.HTTPError as exc:
            logger.error("Failed to start server session: %s", exc)
            raise AuthError("Could not get server token") from exc

        body = response_body(response)
        if not response.is_success:
            logger.error("Failed to start server session: status=%s body=%s", response.status_code, body)
            raise AuthError("Could not get server token")

        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            logger.error("Server session response carried no token: %s", body)
            raise AuthError("Could not get server token")

        logger.info("LootLocker server session started")
        return token


__all__ = ["SessionManager"]
