"""Request signing and freshness checks for inbound settlements."""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Mapping

SIGNED_FIELDS = ("wallet_id", "amount", "round_id", "timestamp")

def canonical_string(payload: Mapping[str, Any]) -> str:
    """Join wallet, amount, round and timestamp with ``:`` in that order.

    Values are rendered with ``str`` as received; numbers are not normalised,
    so the caller must hand in the amount in the textual form the client sent.
    """
    return ":".join(str(payload[name]) for name in SIGNED_FIELDS)


def compute_signature(payload: Mapping[str, Any], secret: str) -> str:
    """Lowercase hex HMAC-SHA256 of the canonical string keyed by ``secret``."""
    digest = hmac.new(
        secret.encode("utf-8"),
        canonical_string(payload).encode("utf-8"),
        hashlib.sha256,
    )
    return digest.hexdigest()


def verify_signature(payload: Mapping[str, Any], signature: str, secret: str) -> bool:
    if not secret or not isinstance(signature, str):
        return False
    expected = compute_signature(payload, secret)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))


def is_fresh(timestamp: int, now: float, window_seconds: int) -> bool:
    """True when ``timestamp`` lies within ``window_seconds`` of ``now`` either way."""
    return abs(int(now) - timestamp) <= window_seconds


__all__ = ["canonical_string", "compute_signature", "verify_signature", "is_fresh"]
