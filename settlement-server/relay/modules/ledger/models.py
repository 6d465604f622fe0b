"""Domain models for ledger operations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class Direction(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"


@dataclass(slots=True, frozen=True)
class BalanceAdjustment:
    wallet_id: str
    currency_id: str
    amount: Decimal
    direction: Direction

    @classmethod
    def from_signed(cls, wallet_id: str, currency_id: str, amount: Union[int, Decimal]) -> "BalanceAdjustment":
        """Split a signed amount into direction and magnitude; zero credits."""
        value = Decimal(amount)
        direction = Direction.CREDIT if value >= 0 else Direction.DEBIT
        return cls(wallet_id=wallet_id, currency_id=currency_id, amount=abs(value), direction=direction)

    def to_payload(self) -> dict[str, str]:
        return {
            "amount": format(self.amount, "f"),
            "wallet_id": self.wallet_id,
            "currency_id": self.currency_id,
        }
