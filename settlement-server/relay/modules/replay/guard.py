"""In-memory registry of settled rounds."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Optional, Set

logger = logging.getLogger(__name__)


def round_key(wallet_id: str, round_id: str) -> str:
    return f"{wallet_id}:{round_id}"


class ReplayGuard:
    """Tracks ``wallet:round`` keys so each round settles at most once.

    Committed keys are kept for the process lifetime unless a retention is
    given, in which case keys older than the retention are dropped lazily.
    In-flight keys are held separately by :meth:`reserve` so that concurrent
    requests for the same round cannot both reach the ledger.
    """

    def __init__(
        self,
        retention_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._committed: Dict[str, float] = {}
        self._pending: Set[str] = set()
        self._retention = retention_seconds
        self._clock = clock

    def has(self, key: str) -> bool:
        self._evict_expired()
        return key in self._committed

    def commit(self, key: str) -> None:
        self._pending.discard(key)
        self._committed.setdefault(key, self._clock())

    def reserve(self, key: str) -> bool:
        """Mark ``key`` as in flight; False if it is already committed or reserved."""
        if self.has(key) or key in self._pending:
            return False
        self._pending.add(key)
        return True

    def release(self, key: str) -> None:
        self._pending.discard(key)

    def __len__(self) -> int:
        return len(self._committed)

    def _evict_expired(self) -> None:
        if self._retention is None or not self._committed:
            return
        cutoff = self._clock() - self._retention
        # Commit order is insertion order, so the oldest keys come first.
        expired = []
        for key, committed_at in self._committed.items():
            if committed_at >= cutoff:
                break
            expired.append(key)
        for key in expired:
            del self._committed[key]
        if expired:
            logger.debug("Evicted %s settled rounds past retention", len(expired))
