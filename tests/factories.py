"""Payload builders, signed deliveries and test doubles."""

import itertools
import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from kungfu import Result, Ok, Error

from reconciler import pipeline as P
from reconciler.gateway import GatewayError, GatewayPayment
from reconciler.orders import Order, OrderStatus
from reconciler.signature import sign


SECRET = "whsec_test_secret"
GATEWAY = "razorpay"
ORDER_ID = "order_ord_1"
LOCAL_ID = "enr_1"
PAYMENT_ID = "pay_1"
AMOUNT = 14900
CURRENCY = "INR"


# ═══════════════════════════════════════════════════════════════════════════════
# Payload builders
# ═══════════════════════════════════════════════════════════════════════════════


def payment_event(
    event: str,
    *,
    event_id: str = "evt_1",
    order_id: str | None = ORDER_ID,
    payment_id: str = PAYMENT_ID,
    amount: Any = AMOUNT,
    currency: str | None = CURRENCY,
    status: str = "captured",
    captured: Any = True,
) -> dict[str, Any]:
    entity: dict[str, Any] = {
        "id": payment_id,
        "entity": "payment",
        "amount": amount,
        "currency": currency,
        "status": status,
        "captured": captured,
        "method": "upi",
    }
    if order_id is not None:
        entity["order_id"] = order_id
    return {
        "entity": "event",
        "id": event_id,
        "event": event,
        "contains": ["payment"],
        "payload": {"payment": {"entity": entity}},
    }


def captured_event(**kwargs: Any) -> dict[str, Any]:
    return payment_event("payment.captured", **kwargs)


def failed_event(**kwargs: Any) -> dict[str, Any]:
    kwargs.setdefault("status", "failed")
    kwargs.setdefault("captured", False)
    return payment_event("payment.failed", **kwargs)


def order_paid_event(
    *,
    event_id: str = "evt_op_1",
    order_id: str = ORDER_ID,
    amount: Any = AMOUNT,
    currency: str | None = CURRENCY,
) -> dict[str, Any]:
    return {
        "entity": "event",
        "id": event_id,
        "event": "order.paid",
        "contains": ["payment", "order"],
        "payload": {
            "order": {
                "entity": {
                    "id": order_id,
                    "entity": "order",
                    "amount": amount,
                    "currency": currency,
                    "status": "paid",
                }
            }
        },
    }


def unwrap[T](result: Result[T, Any]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(err):
            raise AssertionError(f"expected Ok, got Error({err!r})")


def encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode()


def signed(payload: dict[str, Any] | bytes, secret: str = SECRET) -> P.WebhookDelivery:
    body = payload if isinstance(payload, bytes) else encode(payload)
    return P.WebhookDelivery(body=body, signature=sign(body, secret))


def pending_order(**overrides: Any) -> Order:
    fields: dict[str, Any] = {
        "id": LOCAL_ID,
        "order_id": ORDER_ID,
        "gateway": GATEWAY,
        "amount": AMOUNT,
        "currency": CURRENCY,
        "status": OrderStatus.PENDING,
    }
    fields.update(overrides)
    return Order(**fields)


# ═══════════════════════════════════════════════════════════════════════════════
# Test doubles
# ═══════════════════════════════════════════════════════════════════════════════


class ScriptedGateway:
    """Gateway double answering from fixed results and counting calls."""

    def __init__(
        self,
        payment: Result[GatewayPayment | None, GatewayError] | None = None,
        captured: Result[GatewayPayment | None, GatewayError] | None = None,
    ) -> None:
        self.payment = payment if payment is not None else Ok(gateway_payment())
        self.captured = captured if captured is not None else Ok(gateway_payment())
        self.payment_calls: list[str] = []
        self.captured_calls: list[str] = []

    async def fetch_payment(self, payment_id: str) -> Result[GatewayPayment | None, GatewayError]:
        self.payment_calls.append(payment_id)
        return self.payment

    async def fetch_captured_payment(self, order_id: str) -> Result[GatewayPayment | None, GatewayError]:
        self.captured_calls.append(order_id)
        return self.captured


def gateway_payment(**overrides: Any) -> GatewayPayment:
    fields: dict[str, Any] = {
        "id": PAYMENT_ID,
        "order_id": ORDER_ID,
        "amount": AMOUNT,
        "currency": CURRENCY,
        "status": "captured",
    }
    fields.update(overrides)
    return GatewayPayment(**fields)


def ticking_clock(start: datetime | None = None) -> Callable[[], datetime]:
    """Each call is one second after the previous one."""
    origin = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = itertools.count()
    return lambda: origin + timedelta(seconds=next(counter))
