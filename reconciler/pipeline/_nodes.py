"""
Reconcile graph — the whole webhook decision as nodnod nodes.

Every state node validates one condition and raises NodeError otherwise, so
exactly one leaf survives per delivery. Side-effecting nodes (ledger insert,
order lookup, gateway calls, conditional updates) sit behind the state node
that licenses them and never run on another path.

Architecture:
    ReconcileSpec (injected)
         │
    SpecNode ─► SignatureNode
                  ├── UnconfiguredNode ─────────────────────────────────┐
                  ├── ForgedNode ───────────────────────────────────────┤
                  └── AuthenticNode ─► DecodedNode                      │
                        ├── MalformedNode ──────────────────────────────┤
                        ├── AnonymousEventNode ─────────────────────────┤
                        └── IdentifiedEventNode ─► LedgerEntryNode      │
                              ├── DuplicateEventNode ───────────────────┤
                              ├── LedgerFailureNode ────────────────────┤
                              └── FreshEventNode                        │
                                    ├── IgnoredEventNode ───────────────┤
                                    ├── OrphanEventNode ────────────────┤
                                    └── ActionableEventNode             │
                                          └─► OrderLookupNode           │
                                                ├── LookupFailureNode ──┤
                                                ├── UnknownOrderNode ───┤
                                                ├── SettledOrderNode ───┤
                                                └── PendingOrderNode    │
                                                      ├── FailureTransitionNode
                                                      └── GuardNode     │
                                                            ├── RejectedNode
                                                            └── ApprovedNode
                                                                  └─► PaidTransitionNode
                                                                        │
    every leaf ─► ReconcileOutcome (@polymorphic) ─► AcknowledgementNode

Note: no 'from __future__ import annotations' here: nodnod resolves
dependencies from __compose__ type hints at runtime.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from kungfu import Result, Ok, Error
from nodnod import NodeError, polymorphic, case

from reconciler import graph as G
from reconciler import events as E
from reconciler import guard as GD
from reconciler import ledger as L
from reconciler import signature as S
from reconciler._types import StoreError
from reconciler.diagnostics import Diagnostic, DiagnosticKind
from reconciler.orders import Order, OrderStatus
from reconciler.pipeline._types import ReconcileSpec, Acknowledgement, Reason

logger = structlog.get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Entry Node
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class SpecNode:
    """Wraps ReconcileSpec for graph."""

    def __init__(self, spec: ReconcileSpec) -> None:
        self.spec = spec

    @classmethod
    def __compose__(cls, spec: ReconcileSpec) -> "SpecNode":
        return cls(spec)


# ═══════════════════════════════════════════════════════════════════════════════
# Signature
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class SignatureNode:
    """Verifies the raw body against the signature header."""

    def __init__(self, verdict: S.Verdict, spec: ReconcileSpec) -> None:
        self.verdict = verdict
        self.spec = spec

    @classmethod
    def __compose__(cls, spec_node: SpecNode) -> "SignatureNode":
        spec = spec_node.spec
        verdict = S.verify(
            spec.delivery.body,
            spec.delivery.signature,
            spec.settings.webhook_secret,
        )
        return cls(verdict, spec)


@G.node
class UnconfiguredNode:
    """Validates: no webhook secret configured."""

    def __init__(self, spec: ReconcileSpec) -> None:
        self.spec = spec

    @classmethod
    def __compose__(cls, sig: SignatureNode) -> "UnconfiguredNode":
        if sig.verdict is not S.Verdict.UNCONFIGURED:
            raise NodeError("Secret configured")
        return cls(sig.spec)


@G.node
class ForgedNode:
    """Validates: signature missing or wrong."""

    def __init__(self, spec: ReconcileSpec) -> None:
        self.spec = spec

    @classmethod
    def __compose__(cls, sig: SignatureNode) -> "ForgedNode":
        if sig.verdict is not S.Verdict.FORGED:
            raise NodeError("Not forged")
        return cls(sig.spec)


@G.node
class AuthenticNode:
    """Validates: signature matches."""

    def __init__(self, spec: ReconcileSpec) -> None:
        self.spec = spec

    @classmethod
    def __compose__(cls, sig: SignatureNode) -> "AuthenticNode":
        if sig.verdict is not S.Verdict.AUTHENTIC:
            raise NodeError("Not authentic")
        return cls(sig.spec)


# ═══════════════════════════════════════════════════════════════════════════════
# Decode
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class DecodedNode:
    """Decodes the authenticated body into an envelope."""

    def __init__(
        self,
        envelope: Any,
        spec: ReconcileSpec,
        decode_error: E.DecodeError | None = None,
    ) -> None:
        self.envelope = envelope
        self.spec = spec
        self.decode_error = decode_error

    @classmethod
    def __compose__(cls, authentic: AuthenticNode) -> "DecodedNode":
        spec = authentic.spec
        match E.decode(spec.delivery.body):
            case Ok(envelope):
                return cls(envelope, spec)
            case Error(err):
                return cls(None, spec, decode_error=err)


@G.node
class MalformedNode:
    """Validates: authentic body that is not a valid envelope."""

    def __init__(self, error: E.DecodeError, spec: ReconcileSpec) -> None:
        self.error = error
        self.spec = spec

    @classmethod
    def __compose__(cls, decoded: DecodedNode) -> "MalformedNode":
        if decoded.decode_error is None:
            raise NodeError("Decoded")
        return cls(decoded.decode_error, decoded.spec)


@G.node
class AnonymousEventNode:
    """Validates: decoded, but no event id to deduplicate on."""

    def __init__(self, event_type: str | None, spec: ReconcileSpec) -> None:
        self.event_type = event_type
        self.spec = spec

    @classmethod
    def __compose__(cls, decoded: DecodedNode) -> "AnonymousEventNode":
        if decoded.decode_error is not None:
            raise NodeError("Malformed")
        if decoded.envelope.id:
            raise NodeError("Has event id")
        return cls(decoded.envelope.event, decoded.spec)


@G.node
class IdentifiedEventNode:
    """Validates: decoded with an event id."""

    def __init__(self, event_id: str, envelope: Any, spec: ReconcileSpec) -> None:
        self.event_id = event_id
        self.envelope = envelope
        self.spec = spec

    @classmethod
    def __compose__(cls, decoded: DecodedNode) -> "IdentifiedEventNode":
        if decoded.decode_error is not None:
            raise NodeError("Malformed")
        envelope = decoded.envelope
        if not envelope.id:
            raise NodeError("No event id")
        logger.info("webhook_received", event_id=envelope.id, event_type=envelope.event)
        return cls(envelope.id, envelope, decoded.spec)


# ═══════════════════════════════════════════════════════════════════════════════
# Ledger
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class LedgerEntryNode:
    """Records the event id. The first write wins; the rest are duplicates."""

    def __init__(
        self,
        recording: L.Recording | None,
        identified: IdentifiedEventNode,
        store_error: StoreError | None = None,
    ) -> None:
        self.recording = recording
        self.identified = identified
        self.store_error = store_error

    @classmethod
    async def __compose__(cls, identified: IdentifiedEventNode) -> "LedgerEntryNode":
        spec = identified.spec
        match await spec.ledger.record(identified.event_id, spec.clock()):
            case Ok(recording):
                return cls(recording, identified)
            case Error(err):
                return cls(None, identified, store_error=err)


@G.node
class DuplicateEventNode:
    """Validates: event id already in the ledger."""

    def __init__(self, event_id: str, spec: ReconcileSpec) -> None:
        self.event_id = event_id
        self.spec = spec

    @classmethod
    def __compose__(cls, entry: LedgerEntryNode) -> "DuplicateEventNode":
        if entry.recording is not L.DUPLICATE:
            raise NodeError("Not duplicate")
        return cls(entry.identified.event_id, entry.identified.spec)


@G.node
class LedgerFailureNode:
    """Validates: ledger insert failed for a reason other than uniqueness."""

    def __init__(self, error: StoreError, event_id: str, spec: ReconcileSpec) -> None:
        self.error = error
        self.event_id = event_id
        self.spec = spec

    @classmethod
    def __compose__(cls, entry: LedgerEntryNode) -> "LedgerFailureNode":
        if entry.store_error is None:
            raise NodeError("Ledger ok")
        return cls(entry.store_error, entry.identified.event_id, entry.identified.spec)


@G.node
class FreshEventNode:
    """Validates: first delivery of this event id. Classifies it."""

    def __init__(self, event: E.WebhookEvent, spec: ReconcileSpec) -> None:
        self.event = event
        self.spec = spec

    @classmethod
    def __compose__(cls, entry: LedgerEntryNode) -> "FreshEventNode":
        if entry.recording is not L.FIRST_TIME:
            raise NodeError("Not first time")
        identified = entry.identified
        event = E.classify(identified.envelope, identified.event_id)
        return cls(event, identified.spec)


# ═══════════════════════════════════════════════════════════════════════════════
# Classification
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class IgnoredEventNode:
    """Validates: event type not acted on."""

    def __init__(self, event: E.Ignored, spec: ReconcileSpec) -> None:
        self.event = event
        self.spec = spec

    @classmethod
    def __compose__(cls, fresh: FreshEventNode) -> "IgnoredEventNode":
        if not isinstance(fresh.event, E.Ignored):
            raise NodeError("Recognized")
        return cls(fresh.event, fresh.spec)


@G.node
class OrphanEventNode:
    """Validates: recognized event that names no gateway order."""

    def __init__(self, event: E.ActionableEvent, spec: ReconcileSpec) -> None:
        self.event = event
        self.spec = spec

    @classmethod
    def __compose__(cls, fresh: FreshEventNode) -> "OrphanEventNode":
        event = fresh.event
        if isinstance(event, E.Ignored):
            raise NodeError("Ignored")
        if event.gateway_order_id:
            raise NodeError("Has order id")
        return cls(event, fresh.spec)


@G.node
class ActionableEventNode:
    """Validates: recognized event with a gateway order id."""

    def __init__(self, event: E.ActionableEvent, order_id: str, spec: ReconcileSpec) -> None:
        self.event = event
        self.order_id = order_id
        self.spec = spec

    @classmethod
    def __compose__(cls, fresh: FreshEventNode) -> "ActionableEventNode":
        event = fresh.event
        if isinstance(event, E.Ignored):
            raise NodeError("Ignored")
        if not event.gateway_order_id:
            raise NodeError("No order id")
        return cls(event, event.gateway_order_id, fresh.spec)


# ═══════════════════════════════════════════════════════════════════════════════
# Order Matching
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class OrderLookupNode:
    """Finds the local order for (gateway order id, this gateway)."""

    def __init__(
        self,
        order: Order | None,
        actionable: ActionableEventNode,
        store_error: StoreError | None = None,
    ) -> None:
        self.order = order
        self.actionable = actionable
        self.store_error = store_error

    @classmethod
    async def __compose__(cls, actionable: ActionableEventNode) -> "OrderLookupNode":
        spec = actionable.spec
        match await spec.orders.find(actionable.order_id, spec.settings.gateway):
            case Ok(order):
                return cls(order, actionable)
            case Error(err):
                return cls(None, actionable, store_error=err)


@G.node
class LookupFailureNode:
    """Validates: order lookup failed."""

    def __init__(self, error: StoreError, actionable: ActionableEventNode) -> None:
        self.error = error
        self.actionable = actionable

    @classmethod
    def __compose__(cls, lookup: OrderLookupNode) -> "LookupFailureNode":
        if lookup.store_error is None:
            raise NodeError("Lookup ok")
        return cls(lookup.store_error, lookup.actionable)


@G.node
class UnknownOrderNode:
    """Validates: no local order for this gateway order id."""

    def __init__(self, actionable: ActionableEventNode) -> None:
        self.actionable = actionable

    @classmethod
    def __compose__(cls, lookup: OrderLookupNode) -> "UnknownOrderNode":
        if lookup.store_error is not None:
            raise NodeError("Lookup failed")
        if lookup.order is not None:
            raise NodeError("Order found")
        return cls(lookup.actionable)


@G.node
class SettledOrderNode:
    """Validates: order found, already terminal."""

    def __init__(self, order: Order, actionable: ActionableEventNode) -> None:
        self.order = order
        self.actionable = actionable

    @classmethod
    def __compose__(cls, lookup: OrderLookupNode) -> "SettledOrderNode":
        order = lookup.order
        if order is None:
            raise NodeError("No order")
        if order.is_pending:
            raise NodeError("Pending")
        return cls(order, lookup.actionable)


@G.node
class PendingOrderNode:
    """Validates: order found and still pending."""

    def __init__(self, order: Order, actionable: ActionableEventNode) -> None:
        self.order = order
        self.actionable = actionable

    @classmethod
    def __compose__(cls, lookup: OrderLookupNode) -> "PendingOrderNode":
        order = lookup.order
        if order is None:
            raise NodeError("No order")
        if not order.is_pending:
            raise NodeError("Not pending")
        return cls(order, lookup.actionable)


# ═══════════════════════════════════════════════════════════════════════════════
# Transitions
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class FailureTransitionNode:
    """
    payment.failed → pending → failed.

    Note: no amount/currency checks. A failed payment can only close the
    order as failed, never pay it.
    """

    def __init__(
        self,
        changed: bool | None,
        pending: PendingOrderNode,
        store_error: StoreError | None = None,
    ) -> None:
        self.changed = changed
        self.pending = pending
        self.store_error = store_error

    @classmethod
    async def __compose__(cls, pending: PendingOrderNode) -> "FailureTransitionNode":
        if not isinstance(pending.actionable.event, E.PaymentFailed):
            raise NodeError("Not a failure")
        spec = pending.actionable.spec
        result = await spec.orders.transition(
            pending.order.id,
            OrderStatus.FAILED,
            payment_id=None,
            at=spec.clock(),
        )
        match result:
            case Ok(changed):
                return cls(changed, pending)
            case Error(err):
                return cls(None, pending, store_error=err)


@G.node
class GuardNode:
    """Runs the consistency guard for paid-type events."""

    def __init__(
        self,
        verdict: Result[GD.Approved, GD.Rejected],
        pending: PendingOrderNode,
    ) -> None:
        self.verdict = verdict
        self.pending = pending

    @classmethod
    async def __compose__(cls, pending: PendingOrderNode) -> "GuardNode":
        event = pending.actionable.event
        if isinstance(event, E.PaymentFailed):
            raise NodeError("Failure event")
        verdict = await GD.inspect(event, pending.order, pending.actionable.spec.gateway)
        return cls(verdict, pending)


@G.node
class RejectedNode:
    """Validates: guard rejected the event."""

    def __init__(self, rejected: GD.Rejected, pending: PendingOrderNode) -> None:
        self.rejected = rejected
        self.pending = pending

    @classmethod
    def __compose__(cls, guard: GuardNode) -> "RejectedNode":
        match guard.verdict:
            case Error(rejected):
                return cls(rejected, guard.pending)
            case _:
                raise NodeError("Approved")


@G.node
class ApprovedNode:
    """Validates: guard approved the event."""

    def __init__(self, approved: GD.Approved, pending: PendingOrderNode) -> None:
        self.approved = approved
        self.pending = pending

    @classmethod
    def __compose__(cls, guard: GuardNode) -> "ApprovedNode":
        match guard.verdict:
            case Ok(approved):
                return cls(approved, guard.pending)
            case _:
                raise NodeError("Rejected")


@G.node
class PaidTransitionNode:
    """Approved → pending → paid, with payment id and paid_at."""

    def __init__(
        self,
        changed: bool | None,
        approved: ApprovedNode,
        store_error: StoreError | None = None,
    ) -> None:
        self.changed = changed
        self.approved = approved
        self.store_error = store_error

    @classmethod
    async def __compose__(cls, approved: ApprovedNode) -> "PaidTransitionNode":
        spec = approved.pending.actionable.spec
        result = await spec.orders.transition(
            approved.pending.order.id,
            OrderStatus.PAID,
            payment_id=approved.approved.payment_id,
            at=spec.clock(),
        )
        match result:
            case Ok(changed):
                return cls(changed, approved)
            case Error(err):
                return cls(None, approved, store_error=err)


# ═══════════════════════════════════════════════════════════════════════════════
# Polymorphic Outcome — one case per surviving leaf
# ═══════════════════════════════════════════════════════════════════════════════


_REJECTIONS: dict[GD.RejectReason, tuple[Reason, DiagnosticKind]] = {
    GD.RejectReason.NOT_CAPTURED: (Reason.NOT_CAPTURED, DiagnosticKind.CONSISTENCY_VIOLATION),
    GD.RejectReason.MISMATCH: (Reason.MISMATCH, DiagnosticKind.CONSISTENCY_VIOLATION),
    GD.RejectReason.CONFIRM_MISMATCH: (Reason.CONFIRM_MISMATCH, DiagnosticKind.CONFIRMATION_MISMATCH),
    GD.RejectReason.CONFIRM_INCONCLUSIVE: (
        Reason.CONFIRM_INCONCLUSIVE,
        DiagnosticKind.CONFIRMATION_INCONCLUSIVE,
    ),
}


def _emit(
    spec: ReconcileSpec,
    kind: DiagnosticKind,
    event_id: str | None,
    order_id: str | None = None,
    detail: Mapping[str, Any] | None = None,
) -> None:
    spec.diagnostics.emit(
        Diagnostic(
            kind=kind,
            event_id=event_id,
            order_id=order_id,
            detail=dict(detail or {}),
            occurred_at=spec.clock(),
        )
    )


@polymorphic[Acknowledgement]
class ReconcileOutcome:
    """
    Polymorphic router — each @case depends on one validated leaf.

    Note: leaves are mutually exclusive; checks live in the nodes, here only
    logging, diagnostics and the response body.
    """

    @case
    def unconfigured(cls, node: UnconfiguredNode) -> Acknowledgement:
        logger.error("webhook_secret_missing")
        return Acknowledgement.refuse(500, "Server not configured", Reason.UNCONFIGURED)

    @case
    def forged(cls, node: ForgedNode) -> Acknowledgement:
        logger.warning("invalid_signature", has_signature=bool(node.spec.delivery.signature))
        return Acknowledgement.refuse(400, "Invalid signature", Reason.INVALID_SIGNATURE)

    @case
    def malformed(cls, node: MalformedNode) -> Acknowledgement:
        logger.warning("webhook_malformed", error=node.error.message)
        return Acknowledgement.noop(Reason.MALFORMED)

    @case
    def anonymous(cls, node: AnonymousEventNode) -> Acknowledgement:
        logger.info("webhook_without_event_id", event_type=node.event_type)
        return Acknowledgement.noop(Reason.NO_EVENT_ID)

    @case
    def duplicate(cls, node: DuplicateEventNode) -> Acknowledgement:
        logger.info("duplicate_event", event_id=node.event_id)
        return Acknowledgement.ok(Reason.DUPLICATE, duplicate=True)

    @case
    def ledger_failure(cls, node: LedgerFailureNode) -> Acknowledgement:
        logger.error("event_ledger_error", event_id=node.event_id, error=node.error.message)
        _emit(
            node.spec,
            DiagnosticKind.LEDGER_UNCONFIRMED,
            node.event_id,
            detail={"error": node.error.message},
        )
        return Acknowledgement.ok(Reason.LEDGER_UNCONFIRMED, noted=False)

    @case
    def ignored(cls, node: IgnoredEventNode) -> Acknowledgement:
        logger.info("event_ignored", event_id=node.event.event_id, event_type=node.event.event_type)
        return Acknowledgement.ok(Reason.IGNORED, ignored=True)

    @case
    def orphan(cls, node: OrphanEventNode) -> Acknowledgement:
        logger.warning("no_order_id", event_id=node.event.event_id, kind=node.event.kind.value)
        return Acknowledgement.noop(Reason.NO_ORDER_ID)

    @case
    def lookup_failure(cls, node: LookupFailureNode) -> Acknowledgement:
        actionable = node.actionable
        logger.error(
            "order_lookup_error",
            event_id=actionable.event.event_id,
            order_id=actionable.order_id,
            error=node.error.message,
        )
        _emit(
            actionable.spec,
            DiagnosticKind.LOOKUP_UNCONFIRMED,
            actionable.event.event_id,
            actionable.order_id,
            {"error": node.error.message},
        )
        return Acknowledgement.ok(Reason.LOOKUP_UNCONFIRMED)

    @case
    def unknown_order(cls, node: UnknownOrderNode) -> Acknowledgement:
        actionable = node.actionable
        logger.warning(
            "no_local_order",
            event_id=actionable.event.event_id,
            order_id=actionable.order_id,
        )
        return Acknowledgement.noop(Reason.NO_LOCAL_ORDER)

    @case
    def settled_order(cls, node: SettledOrderNode) -> Acknowledgement:
        logger.info(
            "order_not_pending",
            event_id=node.actionable.event.event_id,
            order_id=node.actionable.order_id,
            status=node.order.status.value,
        )
        return Acknowledgement.noop(Reason.NOT_PENDING)

    @case
    def failure_transition(cls, node: FailureTransitionNode) -> Acknowledgement:
        pending = node.pending
        event_id = pending.actionable.event.event_id
        order_id = pending.actionable.order_id

        if node.store_error is not None:
            logger.error("order_update_error", event_id=event_id, order_id=order_id, error=node.store_error.message)
            _emit(
                pending.actionable.spec,
                DiagnosticKind.UPDATE_UNCONFIRMED,
                event_id,
                order_id,
                {"target": OrderStatus.FAILED.value, "error": node.store_error.message},
            )
            return Acknowledgement.ok(Reason.UPDATE_UNCONFIRMED, updated=False)

        if not node.changed:
            logger.info("order_already_handled", event_id=event_id, order_id=order_id)
            return Acknowledgement.ok(Reason.ALREADY_HANDLED)

        logger.info("order_marked_failed", event_id=event_id, order_id=order_id, id=pending.order.id)
        return Acknowledgement.ok(Reason.MARKED_FAILED, failed=True)

    @case
    def rejected(cls, node: RejectedNode) -> Acknowledgement:
        actionable = node.pending.actionable
        reason, kind = _REJECTIONS[node.rejected.reason]
        logger.warning(
            "consistency_check_failed",
            event_id=actionable.event.event_id,
            order_id=actionable.order_id,
            reason=reason.value,
            detail=node.rejected.detail,
        )
        _emit(
            actionable.spec,
            kind,
            actionable.event.event_id,
            actionable.order_id,
            {"reason": reason.value, **node.rejected.detail},
        )
        return Acknowledgement.noop(reason)

    @case
    def paid_transition(cls, node: PaidTransitionNode) -> Acknowledgement:
        pending = node.approved.pending
        approved = node.approved.approved
        event_id = pending.actionable.event.event_id
        order_id = pending.actionable.order_id

        if node.store_error is not None:
            logger.error("order_update_error", event_id=event_id, order_id=order_id, error=node.store_error.message)
            _emit(
                pending.actionable.spec,
                DiagnosticKind.UPDATE_UNCONFIRMED,
                event_id,
                order_id,
                {
                    "target": OrderStatus.PAID.value,
                    "payment_id": approved.payment_id,
                    "error": node.store_error.message,
                },
            )
            return Acknowledgement.ok(Reason.UPDATE_UNCONFIRMED, updated=False)

        if not node.changed:
            logger.info("order_already_handled", event_id=event_id, order_id=order_id)
            return Acknowledgement.ok(Reason.ALREADY_HANDLED)

        logger.info(
            "order_marked_paid",
            event_id=event_id,
            order_id=order_id,
            id=pending.order.id,
            payment_id=approved.payment_id,
            confirmation=approved.confirmation.value,
        )
        return Acknowledgement.ok(Reason.MARKED_PAID)


# ═══════════════════════════════════════════════════════════════════════════════
# Final Node
# ═══════════════════════════════════════════════════════════════════════════════


@G.node
class AcknowledgementNode:
    """Unwraps the polymorphic outcome."""

    def __init__(self, acknowledgement: Acknowledgement) -> None:
        self.acknowledgement = acknowledgement

    @classmethod
    def __compose__(cls, outcome: ReconcileOutcome) -> "AcknowledgementNode":
        return cls(outcome.value)


# ═══════════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════════


async def run_reconcile(spec: ReconcileSpec) -> Acknowledgement:
    """Reconcile one delivery via graph."""
    node = await G.run(AcknowledgementNode).labelled("reconcile").inject(spec)
    return node.acknowledgement


__all__ = (
    "SpecNode",
    "SignatureNode",
    "UnconfiguredNode",
    "ForgedNode",
    "AuthenticNode",
    "DecodedNode",
    "MalformedNode",
    "AnonymousEventNode",
    "IdentifiedEventNode",
    "LedgerEntryNode",
    "DuplicateEventNode",
    "LedgerFailureNode",
    "FreshEventNode",
    "IgnoredEventNode",
    "OrphanEventNode",
    "ActionableEventNode",
    "OrderLookupNode",
    "LookupFailureNode",
    "UnknownOrderNode",
    "SettledOrderNode",
    "PendingOrderNode",
    "FailureTransitionNode",
    "GuardNode",
    "RejectedNode",
    "ApprovedNode",
    "PaidTransitionNode",
    "ReconcileOutcome",
    "AcknowledgementNode",
    "run_reconcile",
)
