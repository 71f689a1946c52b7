"""
Order types — the locally persisted checkout attempt.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OrderStatus(Enum):
    """
    Order lifecycle.

        PENDING → PAID   (terminal)
                → FAILED (terminal)

    Note: no transition out of PAID or FAILED is ever permitted.
    """

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not OrderStatus.PENDING


@dataclass(frozen=True, slots=True)
class Order:
    """
    Snapshot of an `order_enrollments` row.

    id:       local primary key
    order_id: gateway-issued order id
    amount:   minor units (paise, cents)
    """

    id: str
    order_id: str
    gateway: str
    amount: int
    currency: str
    status: OrderStatus
    payment_id: str | None = None
    paid_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is OrderStatus.PENDING


__all__ = (
    "OrderStatus",
    "Order",
)
