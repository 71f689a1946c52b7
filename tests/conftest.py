"""Shared fixtures: settings, memory stores, diagnostics, reconcilers."""

from collections.abc import Callable
from typing import Any

import pytest

from factories import SECRET, pending_order, ticking_clock
from reconciler import pipeline as P
from reconciler.config import Settings
from reconciler.diagnostics import MemoryDiagnostics
from reconciler.ledger import MemoryLedger
from reconciler.orders import MemoryOrders


@pytest.fixture()
def settings() -> Settings:
    return Settings(webhook_secret=SECRET)


@pytest.fixture()
def ledger() -> MemoryLedger:
    return MemoryLedger()


@pytest.fixture()
def orders() -> MemoryOrders:
    return MemoryOrders(pending_order())


@pytest.fixture()
def diagnostics() -> MemoryDiagnostics:
    return MemoryDiagnostics()


@pytest.fixture()
def make_reconciler(
    settings: Settings,
    ledger: MemoryLedger,
    orders: MemoryOrders,
    diagnostics: MemoryDiagnostics,
) -> Callable[..., P.Reconciler]:
    """Reconciler over the shared fixtures; pass a gateway to enable confirmation."""

    def _make(gateway: Any = None, **overrides: Any) -> P.Reconciler:
        builder = (
            P.reconciler(overrides.get("settings", settings))
            .ledger(overrides.get("ledger", ledger))
            .orders(overrides.get("orders", orders))
            .diagnostics(overrides.get("diagnostics", diagnostics))
            .clock(ticking_clock())
        )
        if gateway is not None:
            builder = builder.gateway(gateway)
        return builder.build()

    return _make


@pytest.fixture()
def reconciler(make_reconciler: Callable[..., P.Reconciler]) -> P.Reconciler:
    """Degraded mode: no API credentials, no gateway."""
    return make_reconciler()
