"""Domain models for settlement requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from relay.modules.replay import round_key


class AmountText(Decimal):
    """Decimal that renders as the literal text it was parsed from.

    ``Decimal("1e2")`` prints as ``1E+2``; the client signed ``1e2``.
    """

    def __new__(cls, text: str) -> "AmountText":
        value = super().__new__(cls, text)
        value.text = text
        return value

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"AmountText({self.text!r})"


@dataclass(slots=True, frozen=True)
class SettlementRequest:
    wallet_id: str
    amount: Union[int, Decimal]
    round_id: str
    timestamp: int
    signature: str = field(repr=False)

    @property
    def key(self) -> str:
        return round_key(self.wallet_id, self.round_id)

    def signed_fields(self) -> dict[str, object]:
        return {
            "wallet_id": self.wallet_id,
            "amount": self.amount,
            "round_id": self.round_id,
            "timestamp": self.timestamp,
        }
