"""
Ledger — idempotency across at-least-once webhook redelivery.

    from reconciler import ledger as L

    ledger = L.MemoryLedger()
    match await ledger.record(event_id, received_at):
        case Ok(L.FIRST_TIME): ...   # process
        case Ok(L.DUPLICATE): ...    # acknowledge, stop
        case Error(err): ...         # acknowledge, flag "not confirmed"

Append-only: entries are never updated or pruned here.
"""

from reconciler.ledger._types import (
    Recording,
    FIRST_TIME,
    DUPLICATE,
    ProcessedEvent,
)
from reconciler.ledger._store import (
    Ledger,
    FunctionalLedger,
    ledger_from,
    MemoryLedger,
)
from reconciler.ledger._sqlalchemy import SQLAlchemyLedger

__all__ = (
    # Types
    "Recording",
    "FIRST_TIME",
    "DUPLICATE",
    "ProcessedEvent",
    # Store
    "Ledger",
    "FunctionalLedger",
    "ledger_from",
    "MemoryLedger",
    # SQLAlchemy
    "SQLAlchemyLedger",
)
