"""
reconciler — payment gateway webhook reconciliation.

    from reconciler import pipeline as P    # Reconcile graph + builder
    from reconciler import ledger as L      # Event-id deduplication
    from reconciler import orders as O      # Order matching + state machine
    from reconciler import guard as GD      # Consistency checks
    from reconciler import wire as W        # HTTP exposure
"""

from reconciler import signature
from reconciler import ledger
from reconciler import events
from reconciler import orders
from reconciler import gateway
from reconciler import guard
from reconciler import diagnostics
from reconciler import graph
from reconciler import pipeline
from reconciler.config import Settings
from reconciler._types import (
    Result,
    Ok,
    Error,
    StoreError,
)

__version__ = "0.1.0"

__all__ = (
    "signature",
    "ledger",
    "events",
    "orders",
    "gateway",
    "guard",
    "diagnostics",
    "graph",
    "pipeline",
    "Settings",
    "Result",
    "Ok",
    "Error",
    "StoreError",
)
