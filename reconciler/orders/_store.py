"""
Order repository — typed storage protocol.

The only write is a compare-and-set out of PENDING.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol

from kungfu import Result, Ok, Error

from reconciler._types import StoreError
from reconciler.orders._types import Order, OrderStatus


# ═══════════════════════════════════════════════════════════════════════════════
# Repository Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class OrderRepository(Protocol):
    """
    Order repository protocol.

    Note: transition() must be a single conditional write
    (UPDATE ... WHERE id = :id AND status = 'pending'). Two racing deliveries
    then produce exactly one Ok(True); the loser gets Ok(False).
    """

    async def find(
        self,
        order_id: str,
        gateway: str,
    ) -> Result[Order | None, StoreError]:
        """Find the order for a gateway order id. Never matches across gateways."""
        ...

    async def transition(
        self,
        id: str,
        target: OrderStatus,
        *,
        payment_id: str | None,
        at: datetime,
    ) -> Result[bool, StoreError]:
        """
        Move order `id` from PENDING to target.

        PAID sets payment_id and paid_at; FAILED leaves both untouched.
        Returns Ok(True) if a row changed, Ok(False) if it was no longer pending.
        """
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Repository Builder
# ═══════════════════════════════════════════════════════════════════════════════

type FindFn = Callable[[str, str], Awaitable[Result[Order | None, StoreError]]]
type TransitionFn = Callable[..., Awaitable[Result[bool, StoreError]]]


@dataclass(frozen=True)
class FunctionalOrders:
    """
    Repository built from functions.

    Example:
        orders = orders_from(
            find=my_repo.find_order,
            transition=my_repo.cas_status,
        )
    """

    _find: FindFn
    _transition: TransitionFn

    async def find(
        self,
        order_id: str,
        gateway: str,
    ) -> Result[Order | None, StoreError]:
        return await self._find(order_id, gateway)

    async def transition(
        self,
        id: str,
        target: OrderStatus,
        *,
        payment_id: str | None,
        at: datetime,
    ) -> Result[bool, StoreError]:
        return await self._transition(id, target, payment_id=payment_id, at=at)


def orders_from(find: FindFn, transition: TransitionFn) -> FunctionalOrders:
    """Create OrderRepository from functions."""
    return FunctionalOrders(_find=find, _transition=transition)


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Repository — For Testing
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryOrders:
    """
    In-memory order repository.

    Note: single process only. The lock makes transition() a real
    compare-and-set for concurrent coroutines.
    """

    def __init__(self, *orders: Order) -> None:
        self._orders: dict[str, Order] = {o.id: o for o in orders}
        self._lock = asyncio.Lock()

    def add(self, order: Order) -> None:
        """Seed an order (stands in for the checkout service)."""
        self._orders[order.id] = order

    def get(self, id: str) -> Order:
        return self._orders[id]

    async def find(
        self,
        order_id: str,
        gateway: str,
    ) -> Result[Order | None, StoreError]:
        async with self._lock:
            for order in self._orders.values():
                if order.order_id == order_id and order.gateway == gateway:
                    return Ok(order)
            return Ok(None)

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

        async with self._lock:
            current = self._orders.get(id)
            if current is None or current.status is not OrderStatus.PENDING:
                return Ok(False)

            if target is OrderStatus.PAID:
                updated = replace(
                    current,
                    status=target,
                    payment_id=payment_id,
                    paid_at=at,
                    updated_at=at,
                )
            else:
                updated = replace(current, status=target, updated_at=at)

            self._orders[id] = updated
            return Ok(True)


__all__ = (
    "OrderRepository",
    "FunctionalOrders",
    "orders_from",
    "MemoryOrders",
)
