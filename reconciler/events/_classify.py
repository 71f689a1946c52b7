"""
Event classifier — envelope → business event.

Only three gateway events drive order state. Everything else is Ignored:
acting on unmodeled events (refunds, disputes, authorizations) risks
incorrect transitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from reconciler.events._schema import (
    Envelope,
    PaymentCapturedEnvelope,
    OrderPaidEnvelope,
    PaymentFailedEnvelope,
    UnrecognizedEnvelope,
    PaymentEntity,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Event Kind
# ═══════════════════════════════════════════════════════════════════════════════


class EventKind(Enum):
    CAPTURED = "captured"
    ORDER_PAID = "order_paid"
    FAILED = "failed"
    IGNORED = "ignored"


CAPTURED_STATUS = "captured"


# ═══════════════════════════════════════════════════════════════════════════════
# Business Events
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PaymentCaptured:
    """Funds collected for a payment. Candidate for pending → paid."""

    kind: ClassVar[EventKind] = EventKind.CAPTURED

    event_id: str
    gateway_order_id: str | None
    payment_id: str | None
    amount: int | None
    currency: str | None
    status: str | None
    captured: bool

    @property
    def is_captured(self) -> bool:
        """Payment status literally 'captured' AND captured flag set."""
        return self.status == CAPTURED_STATUS and self.captured is True


@dataclass(frozen=True, slots=True)
class OrderPaid:
    """
    Order completed on the gateway side.

    Note: names no payment; payment_id is resolved by the guard.
    """

    kind: ClassVar[EventKind] = EventKind.ORDER_PAID

    event_id: str
    gateway_order_id: str | None
    amount: int | None
    currency: str | None


@dataclass(frozen=True, slots=True)
class PaymentFailed:
    """Payment attempt failed. Only ever drives pending → failed."""

    kind: ClassVar[EventKind] = EventKind.FAILED

    event_id: str
    gateway_order_id: str | None
    payment_id: str | None
    amount: int | None
    currency: str | None
    status: str | None
    captured: bool


@dataclass(frozen=True, slots=True)
class Ignored:
    """Any event type this reconciler does not act on."""

    kind: ClassVar[EventKind] = EventKind.IGNORED

    event_id: str
    event_type: str | None


type WebhookEvent = PaymentCaptured | OrderPaid | PaymentFailed | Ignored
type ActionableEvent = PaymentCaptured | OrderPaid | PaymentFailed


# ═══════════════════════════════════════════════════════════════════════════════
# classify()
# ═══════════════════════════════════════════════════════════════════════════════


def _payment_fields(entity: PaymentEntity | None) -> dict[str, object]:
    if entity is None:
        return {
            "gateway_order_id": None,
            "payment_id": None,
            "amount": None,
            "currency": None,
            "status": None,
            "captured": False,
        }
    return {
        "gateway_order_id": entity.order_id,
        "payment_id": entity.id,
        "amount": entity.amount,
        "currency": entity.currency,
        "status": entity.status,
        "captured": entity.captured,
    }


def classify(envelope: Envelope, event_id: str) -> WebhookEvent:
    """
    Classify a decoded envelope.

    Example:
        match classify(envelope, event_id):
            case PaymentCaptured() as e if e.is_captured: ...
            case OrderPaid() as e: ...
            case PaymentFailed() as e: ...
            case Ignored(): ...
    """
    match envelope:
        case PaymentCapturedEnvelope():
            return PaymentCaptured(event_id=event_id, **_payment_fields(envelope.payment))  # type: ignore[arg-type]
        case PaymentFailedEnvelope():
            return PaymentFailed(event_id=event_id, **_payment_fields(envelope.payment))  # type: ignore[arg-type]
        case OrderPaidEnvelope():
            order = envelope.order
            return OrderPaid(
                event_id=event_id,
                gateway_order_id=order.id if order else None,
                amount=order.amount if order else None,
                currency=order.currency if order else None,
            )
        case UnrecognizedEnvelope():
            return Ignored(event_id=event_id, event_type=envelope.event)
        case _:
            return Ignored(event_id=event_id, event_type=None)


__all__ = (
    "EventKind",
    "CAPTURED_STATUS",
    "PaymentCaptured",
    "OrderPaid",
    "PaymentFailed",
    "Ignored",
    "WebhookEvent",
    "ActionableEvent",
    "classify",
)
