"""
Pipeline types — what goes into the reconcile graph and what comes out.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from reconciler._types import Clock, utc_now
from reconciler.config import Settings
from reconciler.diagnostics import Diagnostics
from reconciler.gateway import Gateway
from reconciler.ledger import Ledger
from reconciler.orders import OrderRepository


# ═══════════════════════════════════════════════════════════════════════════════
# Input — one webhook delivery
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class WebhookDelivery:
    """
    Raw inbound delivery.

    Note: body is the exact bytes received. The signature covers these bytes;
    a re-serialized body would not verify.
    """

    body: bytes
    signature: str | None


# ═══════════════════════════════════════════════════════════════════════════════
# Output — Acknowledgement
# ═══════════════════════════════════════════════════════════════════════════════


class Reason(Enum):
    """Which path the delivery took. Logged, and asserted on in tests."""

    UNCONFIGURED = "unconfigured"
    INVALID_SIGNATURE = "invalid-signature"
    MALFORMED = "malformed"
    NO_EVENT_ID = "no-event-id"
    DUPLICATE = "duplicate"
    LEDGER_UNCONFIRMED = "ledger-unconfirmed"
    IGNORED = "ignored"
    NO_ORDER_ID = "no-order-id"
    LOOKUP_UNCONFIRMED = "lookup-unconfirmed"
    NO_LOCAL_ORDER = "no-local-order"
    NOT_PENDING = "not-pending"
    NOT_CAPTURED = "not-captured"
    MISMATCH = "mismatch"
    CONFIRM_MISMATCH = "server-confirm-mismatch"
    CONFIRM_INCONCLUSIVE = "server-confirm-inconclusive"
    MARKED_PAID = "marked-paid"
    MARKED_FAILED = "marked-failed"
    ALREADY_HANDLED = "already-handled"
    UPDATE_UNCONFIRMED = "update-unconfirmed"
    HANDLER_ERROR = "handler-error"


@dataclass(frozen=True, slots=True)
class Acknowledgement:
    """
    The response owed to the gateway.

    Once the signature verifies the status is always 200: any 4xx/5xx would
    only trigger redelivery of an event that was already judged.
    """

    status_code: int
    body: Mapping[str, Any]
    reason: Reason

    @classmethod
    def ok(cls, reason: Reason, /, **fields: Any) -> Acknowledgement:
        return cls(200, {"ok": True, **fields}, reason)

    @classmethod
    def noop(cls, reason: Reason) -> Acknowledgement:
        """200 naming the reason nothing happened."""
        return cls.ok(reason, reason=reason.value)

    @classmethod
    def refuse(cls, status_code: int, error: str, reason: Reason) -> Acknowledgement:
        return cls(status_code, {"error": error}, reason)

    @property
    def acknowledged(self) -> bool:
        return self.status_code == 200


# ═══════════════════════════════════════════════════════════════════════════════
# Spec — everything one run needs (injected)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ReconcileSpec:
    """
    Complete input of one reconcile run.

    Note: gateway is None when API credentials are not configured; the guard
    then relies on signature + amount/currency checks only.
    """

    delivery: WebhookDelivery
    settings: Settings
    ledger: Ledger
    orders: OrderRepository
    diagnostics: Diagnostics
    gateway: Gateway | None = None
    clock: Clock = utc_now


__all__ = (
    "WebhookDelivery",
    "Reason",
    "Acknowledgement",
    "ReconcileSpec",
)
