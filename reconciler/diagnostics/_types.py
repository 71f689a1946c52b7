"""
Diagnostics — structured events for acknowledged-but-unconfirmed paths.

The webhook always answers 200 once the signature verifies, so these events
are the only signal that something needs operational follow-up.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Protocol

import structlog

from reconciler._types import utc_now

logger = structlog.get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Diagnostic Kind
# ═══════════════════════════════════════════════════════════════════════════════


class DiagnosticKind(Enum):
    """
    LEDGER_UNCONFIRMED:         event id could not be recorded (storage error).
    LOOKUP_UNCONFIRMED:         local order lookup failed (storage error).
    UPDATE_UNCONFIRMED:         conditional status update failed (storage error).
    CONSISTENCY_VIOLATION:      amount / currency / capture state disagrees.
    CONFIRMATION_MISMATCH:      gateway API contradicts the webhook → fraud review.
    CONFIRMATION_INCONCLUSIVE:  gateway API did not answer → manual reconciliation.
    """

    LEDGER_UNCONFIRMED = "ledger_unconfirmed"
    LOOKUP_UNCONFIRMED = "lookup_unconfirmed"
    UPDATE_UNCONFIRMED = "update_unconfirmed"
    CONSISTENCY_VIOLATION = "consistency_violation"
    CONFIRMATION_MISMATCH = "confirmation_mismatch"
    CONFIRMATION_INCONCLUSIVE = "confirmation_inconclusive"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: DiagnosticKind
    event_id: str | None = None
    order_id: str | None = None
    detail: Mapping[str, Any] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=utc_now)


# ═══════════════════════════════════════════════════════════════════════════════
# Sinks
# ═══════════════════════════════════════════════════════════════════════════════


class Diagnostics(Protocol):
    """
    Diagnostic sink protocol.

    Example — metrics sink:

        class StatsdDiagnostics:
            def emit(self, diagnostic: Diagnostic) -> None:
                statsd.incr(f"webhook.{diagnostic.kind.value}")
    """

    def emit(self, diagnostic: Diagnostic) -> None: ...


class LogDiagnostics:
    """Default sink: one structured warning per diagnostic."""

    def emit(self, diagnostic: Diagnostic) -> None:
        logger.warning(
            "webhook_diagnostic",
            diagnostic=diagnostic.kind.value,
            event_id=diagnostic.event_id,
            order_id=diagnostic.order_id,
            occurred_at=diagnostic.occurred_at.isoformat(),
            detail=dict(diagnostic.detail),
        )


class MemoryDiagnostics:
    """Collects diagnostics. For tests and inspection."""

    def __init__(self) -> None:
        self.emitted: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self.emitted.append(diagnostic)

    def kinds(self) -> list[DiagnosticKind]:
        return [d.kind for d in self.emitted]


class FanoutDiagnostics:
    """Forwards every diagnostic to several sinks."""

    def __init__(self, *sinks: Diagnostics) -> None:
        self._sinks = sinks

    def emit(self, diagnostic: Diagnostic) -> None:
        for sink in self._sinks:
            sink.emit(diagnostic)


__all__ = (
    "DiagnosticKind",
    "Diagnostic",
    "Diagnostics",
    "LogDiagnostics",
    "MemoryDiagnostics",
    "FanoutDiagnostics",
)
