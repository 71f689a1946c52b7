"""
Event ledger — typed storage protocol.

All methods return Result for explicit error handling.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from kungfu import Result, Ok

from reconciler._types import StoreError, utc_now
from reconciler.ledger._types import Recording, ProcessedEvent


# ═══════════════════════════════════════════════════════════════════════════════
# Ledger Protocol — Result-based
# ═══════════════════════════════════════════════════════════════════════════════


class Ledger(Protocol):
    """
    Append-only event ledger protocol.

    Implementations must be atomic: two concurrent record() calls for the same
    id yield exactly one FIRST_TIME. A unique constraint is the usual way.

    Example — custom implementation:

        class RedisLedger:
            async def record(self, event_id, received_at):
                try:
                    added = await self.client.set(f"evt:{event_id}", 1, nx=True)
                    return Ok(FIRST_TIME if added else DUPLICATE)
                except RedisError as e:
                    return Error(StoreError("Failed to record", e))
    """

    async def record(
        self,
        event_id: str,
        received_at: datetime,
    ) -> Result[Recording, StoreError]:
        """
        Insert event_id.

        Returns Ok(FIRST_TIME) if inserted, Ok(DUPLICATE) if already present,
        Error(StoreError) for any other storage failure.
        """
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Ledger Builder
# ═══════════════════════════════════════════════════════════════════════════════

type RecordFn = Callable[[str, datetime], Awaitable[Result[Recording, StoreError]]]


@dataclass(frozen=True)
class FunctionalLedger:
    """
    Ledger built from a function.

    Example:
        ledger = ledger_from(record=my_repo.insert_event)
    """

    _record: RecordFn

    async def record(
        self,
        event_id: str,
        received_at: datetime,
    ) -> Result[Recording, StoreError]:
        return await self._record(event_id, received_at)


def ledger_from(record: RecordFn) -> FunctionalLedger:
    """Create Ledger from a record function."""
    return FunctionalLedger(_record=record)


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Ledger — For Testing
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryLedger:
    """
    In-memory event ledger.

    Note: single process only; entries do not survive a restart.
    """

    def __init__(self) -> None:
        self._events: dict[str, ProcessedEvent] = {}
        self._lock = asyncio.Lock()

    async def record(
        self,
        event_id: str,
        received_at: datetime | None = None,
    ) -> Result[Recording, StoreError]:
        async with self._lock:
            if event_id in self._events:
                return Ok(Recording.DUPLICATE)
            self._events[event_id] = ProcessedEvent(
                event_id=event_id,
                received_at=received_at or utc_now(),
            )
            return Ok(Recording.FIRST_TIME)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> tuple[ProcessedEvent, ...]:
        return tuple(self._events.values())


__all__ = (
    "Ledger",
    "FunctionalLedger",
    "ledger_from",
    "MemoryLedger",
)
