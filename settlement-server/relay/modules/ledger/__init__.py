"""LootLocker ledger exports"""

from .balances import BalanceUpdater
from .client import LootLockerClient
from .exceptions import AuthError, LedgerError, UpstreamError
from .models import BalanceAdjustment, Direction
from .session import SessionManager

__all__ = [
    "AuthError",
    "BalanceAdjustment",
    "BalanceUpdater",
    "Direction",
    "LedgerError",
    "LootLockerClient",
    "SessionManager",
    "UpstreamError",
]
