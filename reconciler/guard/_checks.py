"""
Consistency guard — every check a paid-type webhook must pass before an order
may leave PENDING for PAID.

    1. capture state   (payment.captured: status == "captured" and captured flag)
    2. amount          (exact, minor units)
    3. currency        (exact, when the webhook reports one)
    4. payment id      (order.paid: best-effort lookup of the captured payment)
    5. confirmation    (server-to-server, when credentials and a payment id exist)

Any failed check → Rejected: acknowledge, no transition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog
from kungfu import Result, Ok, Error

from reconciler.events import PaymentCaptured, OrderPaid, CAPTURED_STATUS
from reconciler.gateway import Gateway, GatewayError
from reconciler.orders import Order

logger = structlog.get_logger(__name__)

type PaidEvent = PaymentCaptured | OrderPaid


# ═══════════════════════════════════════════════════════════════════════════════
# Verdicts
# ═══════════════════════════════════════════════════════════════════════════════


class Confirmation(Enum):
    CONFIRMED = "confirmed"  # Gateway API agreed with the webhook
    SKIPPED = "skipped"  # No credentials or no payment id (degraded mode)


class RejectReason(Enum):
    NOT_CAPTURED = "not-captured"
    MISMATCH = "mismatch"
    CONFIRM_MISMATCH = "server-confirm-mismatch"
    CONFIRM_INCONCLUSIVE = "server-confirm-inconclusive"


@dataclass(frozen=True, slots=True)
class Approved:
    payment_id: str | None
    confirmation: Confirmation


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: RejectReason
    detail: dict[str, Any] = field(default_factory=dict)


# ═══════════════════════════════════════════════════════════════════════════════
# Individual Checks
# ═══════════════════════════════════════════════════════════════════════════════


def check_capture_state(event: PaidEvent) -> Rejected | None:
    """order.paid implies completion; payment.captured must say so explicitly."""
    match event:
        case PaymentCaptured() if not event.is_captured:
            return Rejected(
                RejectReason.NOT_CAPTURED,
                {"status": event.status, "captured": event.captured},
            )
        case _:
            return None


def check_amount_currency(event: PaidEvent, order: Order) -> Rejected | None:
    """Exact equality. No tolerance, no rounding."""
    amount_ok = event.amount is not None and event.amount == order.amount
    currency_ok = not event.currency or event.currency == order.currency

    if amount_ok and currency_ok:
        return None
    return Rejected(
        RejectReason.MISMATCH,
        {
            "webhook_amount": event.amount,
            "local_amount": order.amount,
            "webhook_currency": event.currency,
            "local_currency": order.currency,
        },
    )


async def resolve_payment_id(event: PaidEvent, gateway: Gateway | None) -> str | None:
    """
    Payment id for bookkeeping.

    Note: order.paid carries no payment; look up the order's captured payment.
    Failure here never blocks — order.paid is authoritative for completion.
    """
    match event:
        case PaymentCaptured():
            return event.payment_id
        case OrderPaid() if gateway is not None and event.gateway_order_id:
            match await gateway.fetch_captured_payment(event.gateway_order_id):
                case Ok(payment) if payment is not None and payment.id:
                    return payment.id
                case Ok(_):
                    logger.info("captured_payment_not_found", order_id=event.gateway_order_id)
                    return None
                case Error(err):
                    logger.warning(
                        "captured_payment_lookup_failed",
                        order_id=event.gateway_order_id,
                        kind=err.kind.name,
                        error=err.message,
                    )
                    return None
        case _:
            return None


def _inconclusive(err: GatewayError) -> Rejected:
    return Rejected(
        RejectReason.CONFIRM_INCONCLUSIVE,
        {"kind": err.kind.name, "error": err.message, "status_code": err.status_code},
    )


async def confirm(
    payment_id: str | None,
    event: PaidEvent,
    gateway: Gateway | None,
) -> Result[Confirmation, Rejected]:
    """
    Independent server-to-server confirmation.

    Status, order id and amount reported by the gateway API must all agree
    with the webhook. An unanswered call (timeout, transport, non-2xx) is
    inconclusive, not a mismatch, but still blocks the transition.
    """
    if gateway is None or not payment_id:
        return Ok(Confirmation.SKIPPED)

    match await gateway.fetch_payment(payment_id):
        case Error(err):
            return Error(_inconclusive(err))
        case Ok(None):
            return Error(Rejected(RejectReason.CONFIRM_INCONCLUSIVE, {"error": "empty response"}))
        case Ok(record):
            agrees = (
                record.status == CAPTURED_STATUS
                and record.order_id == event.gateway_order_id
                and record.amount == event.amount
            )
            if agrees:
                return Ok(Confirmation.CONFIRMED)
            return Error(
                Rejected(
                    RejectReason.CONFIRM_MISMATCH,
                    {
                        "status": record.status,
                        "order_id": record.order_id,
                        "amount": record.amount,
                    },
                )
            )


# ═══════════════════════════════════════════════════════════════════════════════
# inspect() — all checks in order
# ═══════════════════════════════════════════════════════════════════════════════


async def inspect(
    event: PaidEvent,
    order: Order,
    gateway: Gateway | None,
) -> Result[Approved, Rejected]:
    """
    Run the full guard.

    Example:
        match await inspect(event, order, gateway):
            case Ok(approved):
                await orders.transition(order.id, OrderStatus.PAID, payment_id=approved.payment_id, at=now)
            case Error(rejected):
                ...  # acknowledge, no transition
    """
    for check in (check_capture_state(event), check_amount_currency(event, order)):
        if check is not None:
            return Error(check)

    payment_id = await resolve_payment_id(event, gateway)

    match await confirm(payment_id, event, gateway):
        case Ok(confirmation):
            return Ok(Approved(payment_id=payment_id, confirmation=confirmation))
        case Error(rejected):
            return Error(rejected)


__all__ = (
    "PaidEvent",
    "Confirmation",
    "RejectReason",
    "Approved",
    "Rejected",
    "check_capture_state",
    "check_amount_currency",
    "resolve_payment_id",
    "confirm",
    "inspect",
)
