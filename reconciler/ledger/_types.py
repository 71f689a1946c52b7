"""
Ledger types — core data structures.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto


# ═══════════════════════════════════════════════════════════════════════════════
# Recording Outcome
# ═══════════════════════════════════════════════════════════════════════════════


class Recording(Enum):
    """
    Result of recording an event id.

    FIRST_TIME: id was new, continue processing.
    DUPLICATE:  id already present (redelivery): acknowledge and stop.
                This is the idempotency signal, not an error.
    """

    FIRST_TIME = auto()
    DUPLICATE = auto()


FIRST_TIME = Recording.FIRST_TIME
DUPLICATE = Recording.DUPLICATE


# ═══════════════════════════════════════════════════════════════════════════════
# Processed Event — Stored Entry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ProcessedEvent:
    """An entry of the append-only ledger."""

    event_id: str
    received_at: datetime


__all__ = (
    "Recording",
    "FIRST_TIME",
    "DUPLICATE",
    "ProcessedEvent",
)
