"""
Core types for reconciler.

Re-exports from kungfu + shared domain aliases.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

# Re-export from kungfu
from kungfu import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# Domain Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type EventId = str
"""Gateway-issued identifier of a single webhook delivery."""

type GatewayOrderId = str
"""Gateway-issued order identifier (e.g. Razorpay `order_...`)."""

type PaymentId = str
"""Gateway-issued payment identifier (e.g. Razorpay `pay_...`)."""

type MinorUnits = int
"""Money amount in the currency's minor unit (paise, cents). Never a float."""

type Clock = Callable[[], datetime]
"""Source of the current time; injected so tests can pin it."""


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(timezone.utc)


# ═══════════════════════════════════════════════════════════════════════════════
# Store Error
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class StoreError:
    """Storage operation error (ledger or order store)."""

    message: str
    cause: Exception | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Aliases
    "EventId",
    "GatewayOrderId",
    "PaymentId",
    "MinorUnits",
    "Clock",
    "utc_now",
    # Errors
    "StoreError",
)
