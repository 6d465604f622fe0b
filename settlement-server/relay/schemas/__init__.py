"""Pydantic schemas used across the project."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class CreditCurrencyRequest(BaseModel):
    """Body of ``POST /credit-currency``.

    ``amount`` is a :class:`~decimal.Decimal` so the value keeps the textual
    form the client signed; the router decodes JSON floats as decimals.
    """

    model_config = ConfigDict(extra="ignore")

    wallet_id: StrictStr
    amount: Decimal = Field(allow_inf_nan=False)
    round_id: StrictStr
    timestamp: StrictInt
    signature: StrictStr


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
