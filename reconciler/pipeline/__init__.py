"""
Pipeline — the reconcile graph and its executor.

    from reconciler import pipeline as P

    # Builder API
    rec = (
        P.reconciler(settings)
        .ledger(L.MemoryLedger())
        .orders(O.MemoryOrders(order))
        .build()
    )
    ack = await rec.receive(raw_body, signature)

    # Graph API
    ack = await P.run_reconcile(P.ReconcileSpec(delivery, settings, ledger, orders, diagnostics))

Decision order:

    signature ─► decode ─► ledger ─► classify ─► order lookup ─► guard ─► transition

Every step after the signature acknowledges with 200; only an unconfigured
secret (500) or a bad signature (400) is refused.
"""

from reconciler.pipeline._types import (
    WebhookDelivery,
    Reason,
    Acknowledgement,
    ReconcileSpec,
)
from reconciler.pipeline._nodes import (
    ReconcileOutcome,
    AcknowledgementNode,
    run_reconcile,
)
from reconciler.pipeline._builder import (
    ReconcilerBuilder,
    Reconciler,
    reconciler,
)

__all__ = (
    # Types
    "WebhookDelivery",
    "Reason",
    "Acknowledgement",
    "ReconcileSpec",
    # Graph
    "ReconcileOutcome",
    "AcknowledgementNode",
    "run_reconcile",
    # Builder
    "ReconcilerBuilder",
    "Reconciler",
    "reconciler",
)
