"""Feature modules of the relay."""

from . import ledger, replay, settlements

__all__ = [
    "ledger",
    "replay",
    "settlements",
]
