"""Settlement use case: validate, deduplicate, then move currency."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from relay.core.security import is_fresh, verify_signature
from relay.modules.ledger import BalanceAdjustment, BalanceUpdater
from relay.modules.replay import ReplayGuard

from .exceptions import DuplicateRoundError, InvalidSignatureError, StaleRequestError
from .models import SettlementRequest

logger = logging.getLogger(__name__)


class SettlementService:
    """Runs one settlement through freshness, signature and replay checks.

    The round is committed to the replay guard only after LootLocker accepted
    the adjustment; a failed update releases the reservation so the client
    may retry the same round.
    """

    def __init__(
        self,
        *,
        balances: BalanceUpdater,
        replay_guard: ReplayGuard,
        hmac_secret: str,
        currency_id: str,
        freshness_window_seconds: int = 30,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._balances = balances
        self._replay_guard = replay_guard
        self._hmac_secret = hmac_secret
        self._currency_id = currency_id
        self._window = freshness_window_seconds
        self._clock = clock

    async def settle(self, request: SettlementRequest) -> Any:
        if not is_fresh(request.timestamp, self._clock(), self._window):
            logger.warning(
                "Rejected round %s for wallet %s: stale timestamp %s",
                request.round_id,
                request.wallet_id,
                request.timestamp,
            )
            raise StaleRequestError()

        if not verify_signature(request.signed_fields(), request.signature, self._hmac_secret):
            logger.warning("Rejected round %s for wallet %s: invalid signature", request.round_id, request.wallet_id)
            raise InvalidSignatureError()

        key = request.key
        if not self._replay_guard.reserve(key):
            logger.warning("Rejected round %s for wallet %s: already processed", request.round_id, request.wallet_id)
            raise DuplicateRoundError()

        adjustment = BalanceAdjustment.from_signed(request.wallet_id, self._currency_id, request.amount)
        try:
            result = await self._balances.apply(adjustment)
        except BaseException:
            self._replay_guard.release(key)
            raise

        self._replay_guard.commit(key)
        logger.info(
            "Settled round %s for wallet %s: %s %s",
            request.round_id,
            request.wallet_id,
            adjustment.direction.value,
            adjustment.amount,
        )
        return result


__all__ = ["SettlementService"]
