"""
SQLAlchemy integration — event ledger over the `payment_events` table.

Usage:
    session_factory, engine = await create_database(url)
    ledger = SQLAlchemyLedger(session_factory)

    match await ledger.record("evt_123", utc_now()):
        case Ok(FIRST_TIME): ...
        case Ok(DUPLICATE): ...
        case Error(err): ...
"""

from datetime import datetime
from typing import Any, cast

from sqlalchemy import insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kungfu import Result, Ok, Error

from reconciler._types import StoreError
from reconciler.db import PaymentEventTable
from reconciler.ledger._types import Recording


def _insert_ignoring_duplicates(dialect: str, values: dict[str, Any]) -> Any | None:
    """INSERT ... ON CONFLICT DO NOTHING where the dialect supports it."""
    match dialect:
        case "postgresql":
            return (
                pg_insert(PaymentEventTable)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["event_id"])
            )
        case "sqlite":
            return (
                sqlite_insert(PaymentEventTable)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["event_id"])
            )
        case _:
            return None


class SQLAlchemyLedger:
    """
    Event ledger backed by a unique-constrained table.

    Note: On PostgreSQL and SQLite a conflicting insert is a no-op and
    rowcount == 0 means DUPLICATE. Other dialects use a plain INSERT where
    IntegrityError on the primary key means DUPLICATE.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def record(
        self,
        event_id: str,
        received_at: datetime,
    ) -> Result[Recording, StoreError]:
        values = {"event_id": event_id, "received_at": received_at}
        try:
            async with self._session_factory() as session:
                dialect = session.bind.dialect.name if session.bind else ""
                stmt = _insert_ignoring_duplicates(dialect, values)

                if stmt is None:
                    try:
                        await session.execute(insert(PaymentEventTable).values(**values))
                        await session.commit()
                    except IntegrityError:
                        await session.rollback()
                        return Ok(Recording.DUPLICATE)
                    return Ok(Recording.FIRST_TIME)

                cursor = cast(CursorResult[Any], await session.execute(stmt))
                await session.commit()

                if cursor.rowcount > 0:
                    return Ok(Recording.FIRST_TIME)
                return Ok(Recording.DUPLICATE)

        except Exception as e:
            return Error(StoreError(f"Failed to record event: {e}", e))


__all__ = ("SQLAlchemyLedger",)
