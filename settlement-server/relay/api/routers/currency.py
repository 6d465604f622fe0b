"""Currency settlement endpoint called by the game client."""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from relay.api.deps import get_settlement_service
from relay.modules.ledger import LedgerError
from relay.modules.settlements import (
    AmountText,
    InvalidRequestError,
    SettlementError,
    SettlementRequest,
    SettlementService,
)
from relay.schemas import CreditCurrencyRequest, ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

UPSTREAM_FAILURE = "LootLocker API request failed"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def _parse_request(request: Request) -> SettlementRequest:
    raw = await request.body()
    try:
        # The amount keeps the literal text the client wrote and signed.
        data = json.loads(raw, parse_float=AmountText)
        payload = CreditCurrencyRequest.model_validate(data)
    except (ValueError, ValidationError) as exc:
        logger.warning("Rejected malformed settlement body: %s", exc)
        raise InvalidRequestError() from exc

    amount = payload.amount
    received = data["amount"]
    if isinstance(received, AmountText):
        amount = received
    elif isinstance(received, str):
        amount = AmountText(received)
    return SettlementRequest(
        wallet_id=payload.wallet_id,
        amount=amount,
        round_id=payload.round_id,
        timestamp=payload.timestamp,
        signature=payload.signature,
    )


@router.post(
    "/credit-currency",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        408: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Settle a game round against the player's wallet",
)
async def credit_currency(
    request: Request,
    service: SettlementService = Depends(get_settlement_service),
):
    try:
        settlement = await _parse_request(request)
        logger.info(
            "Received settlement: wallet=%s round=%s amount=%s timestamp=%s",
            settlement.wallet_id,
            settlement.round_id,
            settlement.amount,
            settlement.timestamp,
        )
        await service.settle(settlement)
    except SettlementError as exc:
        return _error(exc.status_code, exc.message)
    except LedgerError as exc:
        logger.error("LootLocker API Error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, UPSTREAM_FAILURE)
    return SuccessResponse()
