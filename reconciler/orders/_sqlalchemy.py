"""
SQLAlchemy integration — order repository over `order_enrollments`.

Usage:
    orders = SQLAlchemyOrders(session_factory)

    match await orders.find("order_ABC", "razorpay"):
        case Ok(Order() as order): ...
        case Ok(None): ...          # no local order
        case Error(err): ...

    changed = await orders.transition(order.id, OrderStatus.PAID, payment_id="pay_1", at=now)
"""

from datetime import datetime
from typing import Any, cast

from sqlalchemy import select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kungfu import Result, Ok, Error

from reconciler._types import StoreError
from reconciler.db import OrderTable
from reconciler.orders._types import Order, OrderStatus


class SQLAlchemyOrders:
    """Order repository with compare-and-set status updates."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find(
        self,
        order_id: str,
        gateway: str,
    ) -> Result[Order | None, StoreError]:
        try:
            async with self._session_factory() as session:
                stmt = (
                    select(OrderTable)
                    .where(OrderTable.order_id == order_id)
                    .where(OrderTable.gateway == gateway)
                    .limit(1)
                )
                row = (await session.execute(stmt)).scalar_one_or_none()

                if row is None:
                    return Ok(None)
                return Ok(self._to_order(row))

        except Exception as e:
            return Error(StoreError(f"Failed to find order: {e}", e))

    async def transition(
        self,
        id: str,
        target: OrderStatus,
        *,
        payment_id: str | None,
        at: datetime,
    ) -> Result[bool, StoreError]:
        if target is OrderStatus.PENDING:
            return Error(StoreError("Cannot transition to pending"))

        values: dict[str, Any] = {"status": target.value, "updated_at": at}
        if target is OrderStatus.PAID:
            values["payment_id"] = payment_id
            values["paid_at"] = at

        try:
            async with self._session_factory() as session:
                stmt = (
                    update(OrderTable)
                    .where(OrderTable.id == id)
                    .where(OrderTable.status == OrderStatus.PENDING.value)
                    .values(**values)
                )
                cursor = cast(CursorResult[Any], await session.execute(stmt))
                await session.commit()
                return Ok(cursor.rowcount > 0)

        except Exception as e:
            return Error(StoreError(f"Failed to update order: {e}", e))

    def _to_order(self, row: OrderTable) -> Order:
        return Order(
            id=row.id,
            order_id=row.order_id,
            gateway=row.gateway,
            amount=row.amount,
            currency=row.currency,
            status=OrderStatus(row.status),
            payment_id=row.payment_id,
            paid_at=row.paid_at,
            updated_at=row.updated_at,
        )


__all__ = ("SQLAlchemyOrders",)
