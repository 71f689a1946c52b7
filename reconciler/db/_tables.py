"""
Database layer — SQLAlchemy tables shared with the rest of the application.

Note: `order_enrollments` rows are inserted by the checkout service;
this package only reads them and flips `status` out of pending.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# ═══════════════════════════════════════════════════════════════════════════════
# Base
# ═══════════════════════════════════════════════════════════════════════════════


class Base(DeclarativeBase):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Orders Table
# ═══════════════════════════════════════════════════════════════════════════════


class OrderTable(Base):
    """One checkout attempt, tracked through pending → paid | failed."""

    __tablename__ = "order_enrollments"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # Gateway identity
    order_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    gateway: Mapped[str] = mapped_column(String(32), nullable=False)

    # Money (minor units)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    # Lifecycle
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")
    payment_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    paid_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Purchase context (owned by checkout)
    user_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    course_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Processed Events Table
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentEventTable(Base):
    """Append-only ledger of processed webhook event ids."""

    __tablename__ = "payment_events"

    event_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    received_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


# ═══════════════════════════════════════════════════════════════════════════════
# Database Setup
# ═══════════════════════════════════════════════════════════════════════════════


def open_database(
    url: str,
) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """Engine + session factory. No I/O until first use."""
    engine = create_async_engine(url, echo=False)
    return async_sessionmaker(engine, expire_on_commit=False), engine


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables. Existing ones are left alone."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def create_database(
    url: str = "sqlite+aiosqlite:///:memory:",
) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """Create tables and return (session_factory, engine)."""
    session_factory, engine = open_database(url)
    await create_tables(engine)
    return session_factory, engine
