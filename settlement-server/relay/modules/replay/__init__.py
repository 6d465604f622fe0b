"""Replay protection exports"""

from .guard import ReplayGuard, round_key

__all__ = [
    "ReplayGuard",
    "round_key",
]
