"""
Guard — consistency checks before trusting a webhook's claim of payment.

    from reconciler import guard as GD

    match await GD.inspect(event, order, gateway):
        case Ok(GD.Approved(payment_id=pid)): ...
        case Error(GD.Rejected(reason=reason)): ...
"""

from reconciler.guard._checks import (
    PaidEvent,
    Confirmation,
    RejectReason,
    Approved,
    Rejected,
    check_capture_state,
    check_amount_currency,
    resolve_payment_id,
    confirm,
    inspect,
)

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
