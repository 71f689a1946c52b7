"""
Reconciler builder — fluent API over the reconcile graph.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from reconciler._types import Clock, utc_now
from reconciler.config import Settings
from reconciler.diagnostics import Diagnostics, LogDiagnostics
from reconciler.gateway import Gateway, gateway_from_settings
from reconciler.ledger import Ledger, MemoryLedger
from reconciler.orders import OrderRepository
from reconciler.pipeline._types import WebhookDelivery, Acknowledgement, ReconcileSpec
from reconciler.pipeline._nodes import run_reconcile

logger = structlog.get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Reconciler Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class ReconcilerBuilder:
    """Fluent reconciler builder."""

    _settings: Settings
    _ledger: Ledger | None = None
    _orders: OrderRepository | None = None
    _gateway: Gateway | None = None
    _diagnostics: Diagnostics | None = None
    _clock: Clock = utc_now

    def ledger(self, ledger: Ledger) -> ReconcilerBuilder:
        """Set event ledger."""
        return ReconcilerBuilder(
            self._settings, ledger, self._orders, self._gateway, self._diagnostics, self._clock
        )

    def orders(self, orders: OrderRepository) -> ReconcilerBuilder:
        """Set order repository."""
        return ReconcilerBuilder(
            self._settings, self._ledger, orders, self._gateway, self._diagnostics, self._clock
        )

    def gateway(self, gateway: Gateway) -> ReconcilerBuilder:
        """Set gateway client. Default: built from settings credentials, if any."""
        return ReconcilerBuilder(
            self._settings, self._ledger, self._orders, gateway, self._diagnostics, self._clock
        )

    def diagnostics(self, diagnostics: Diagnostics) -> ReconcilerBuilder:
        """Set diagnostic sink. Default: LogDiagnostics."""
        return ReconcilerBuilder(
            self._settings, self._ledger, self._orders, self._gateway, diagnostics, self._clock
        )

    def clock(self, clock: Clock) -> ReconcilerBuilder:
        """Set time source."""
        return ReconcilerBuilder(
            self._settings, self._ledger, self._orders, self._gateway, self._diagnostics, clock
        )

    def build(self) -> Reconciler:
        """Build executable."""
        if self._orders is None:
            raise ValueError("orders() is required")

        gateway = self._gateway if self._gateway is not None else gateway_from_settings(self._settings)
        if gateway is None:
            logger.warning("gateway_confirmation_disabled", reason="no API credentials")
        if not self._settings.webhook_secret:
            logger.warning("webhook_secret_not_configured")

        return Reconciler(
            settings=self._settings,
            ledger=self._ledger if self._ledger is not None else MemoryLedger(),
            orders=self._orders,
            gateway=gateway,
            diagnostics=self._diagnostics if self._diagnostics is not None else LogDiagnostics(),
            clock=self._clock,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Reconciler
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class Reconciler:
    """
    Webhook reconciler.

    Note: thin wrapper; creates ReconcileSpec per delivery and runs graph.
    Holds no per-delivery state; safe to share across concurrent requests.
    """

    settings: Settings
    ledger: Ledger
    orders: OrderRepository
    gateway: Gateway | None
    diagnostics: Diagnostics
    clock: Clock

    async def handle(self, delivery: WebhookDelivery) -> Acknowledgement:
        """Reconcile one delivery."""
        spec = ReconcileSpec(
            delivery=delivery,
            settings=self.settings,
            ledger=self.ledger,
            orders=self.orders,
            diagnostics=self.diagnostics,
            gateway=self.gateway,
            clock=self.clock,
        )
        return await run_reconcile(spec)

    async def receive(self, body: bytes, signature: str | None) -> Acknowledgement:
        """Shortcut: handle(WebhookDelivery(body, signature))."""
        return await self.handle(WebhookDelivery(body=body, signature=signature))


# ═══════════════════════════════════════════════════════════════════════════════
# reconciler() — Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def reconciler(settings: Settings) -> ReconcilerBuilder:
    """
    Create reconciler builder.

    Example:
        rec = (
            P.reconciler(Settings.from_env())
            .ledger(L.SQLAlchemyLedger(session_factory))
            .orders(O.SQLAlchemyOrders(session_factory))
            .build()
        )

        ack = await rec.receive(raw_body, request.headers.get("x-razorpay-signature"))
    """
    return ReconcilerBuilder(_settings=settings)


__all__ = (
    "ReconcilerBuilder",
    "Reconciler",
    "reconciler",
)
