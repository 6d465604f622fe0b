"""Settlement domain exports"""

from .exceptions import (
    DuplicateRoundError,
    InvalidRequestError,
    InvalidSignatureError,
    SettlementError,
    StaleRequestError,
    ValidationError,
)
from .models import AmountText, SettlementRequest
from .service import SettlementService

__all__ = [
    "AmountText",
    "DuplicateRoundError",
    "InvalidRequestError",
    "InvalidSignatureError",
    "SettlementError",
    "SettlementRequest",
    "SettlementService",
    "StaleRequestError",
    "ValidationError",
]
