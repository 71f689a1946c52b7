"""
Orders — match local orders and move them out of pending, once.

    from reconciler import orders as O

    repo = O.SQLAlchemyOrders(session_factory)
    match await repo.find(gateway_order_id, "razorpay"):
        case Ok(O.Order() as order) if order.is_pending: ...

Lifecycle:

    PENDING ──► PAID
       │
       └────► FAILED
"""

from reconciler.orders._types import (
    OrderStatus,
    Order,
)
from reconciler.orders._store import (
    OrderRepository,
    FunctionalOrders,
    orders_from,
    MemoryOrders,
)
from reconciler.orders._sqlalchemy import SQLAlchemyOrders

__all__ = (
    # Types
    "OrderStatus",
    "Order",
    # Repository
    "OrderRepository",
    "FunctionalOrders",
    "orders_from",
    "MemoryOrders",
    # SQLAlchemy
    "SQLAlchemyOrders",
)
