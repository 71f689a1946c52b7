"""
DB — SQLAlchemy tables and session factory.

    from reconciler.db import create_database

    session_factory, engine = await create_database("postgresql+asyncpg://...")
"""

from reconciler.db._tables import (
    Base,
    OrderTable,
    PaymentEventTable,
    open_database,
    create_tables,
    create_database,
)

__all__ = (
    "Base",
    "OrderTable",
    "PaymentEventTable",
    "open_database",
    "create_tables",
    "create_database",
)
