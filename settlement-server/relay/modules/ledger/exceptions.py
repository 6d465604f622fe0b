"""LootLocker ledger specific exceptions."""

from __future__ import annotations

from typing import Any, Optional


class LedgerError(Exception):
    """Base class for failures talking to the LootLocker server API."""


class AuthError(LedgerError):
    """Raised when a server session cannot be started."""


class UpstreamError(LedgerError):
    """Raised when a balance call is rejected or cannot be delivered."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (status={self.status_code}, body={self.body!r})"
