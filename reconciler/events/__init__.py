"""
Events — decode and classify gateway webhooks.

    from reconciler import events as E

    match E.decode(raw_body):
        case Ok(envelope):
            event = E.classify(envelope, envelope.id)
        case Error(err): ...

Classification:

    payment.captured → PaymentCaptured
    order.paid       → OrderPaid
    payment.failed   → PaymentFailed
    (anything else)  → Ignored
"""

from reconciler.events._schema import (
    PAYMENT_CAPTURED,
    ORDER_PAID,
    PAYMENT_FAILED,
    RECOGNIZED_EVENTS,
    PaymentEntity,
    OrderEntity,
    Payload,
    PaymentCapturedEnvelope,
    OrderPaidEnvelope,
    PaymentFailedEnvelope,
    UnrecognizedEnvelope,
    Envelope,
    DecodeError,
    decode,
)
from reconciler.events._classify import (
    EventKind,
    CAPTURED_STATUS,
    PaymentCaptured,
    OrderPaid,
    PaymentFailed,
    Ignored,
    WebhookEvent,
    ActionableEvent,
    classify,
)

__all__ = (
    # Schema
    "PAYMENT_CAPTURED",
    "ORDER_PAID",
    "PAYMENT_FAILED",
    "RECOGNIZED_EVENTS",
    "PaymentEntity",
    "OrderEntity",
    "Payload",
    "PaymentCapturedEnvelope",
    "OrderPaidEnvelope",
    "PaymentFailedEnvelope",
    "UnrecognizedEnvelope",
    "Envelope",
    "DecodeError",
    "decode",
    # Classification
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
