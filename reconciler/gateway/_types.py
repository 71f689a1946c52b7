"""
Gateway types — what the payment gateway's API says about a payment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol

from kungfu import Result


@dataclass(frozen=True, slots=True)
class GatewayPayment:
    """Authoritative payment record as returned by the gateway API."""

    id: str
    order_id: str | None
    amount: int | None
    currency: str | None
    status: str | None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GatewayPayment:
        amount = data.get("amount")
        return cls(
            id=str(data.get("id") or ""),
            order_id=data.get("order_id") or None,
            amount=amount if isinstance(amount, int) and not isinstance(amount, bool) else None,
            currency=data.get("currency") or None,
            status=data.get("status") or None,
        )


class GatewayErrorKind(Enum):
    """Why a gateway call did not produce an answer."""

    TIMEOUT = auto()  # No response within the confirm timeout
    TRANSPORT = auto()  # Connection / protocol failure
    HTTP_STATUS = auto()  # Non-2xx response
    DECODE = auto()  # Response body not the expected JSON


@dataclass(frozen=True, slots=True)
class GatewayError:
    kind: GatewayErrorKind
    message: str
    status_code: int | None = None


class Gateway(Protocol):
    """
    Gateway API used for defense-in-depth confirmation.

    Both calls need the gateway's private API credentials.
    """

    async def fetch_payment(
        self, payment_id: str
    ) -> Result[GatewayPayment | None, GatewayError]:
        """Fetch one payment by id."""
        ...

    async def fetch_captured_payment(
        self, order_id: str
    ) -> Result[GatewayPayment | None, GatewayError]:
        """Fetch the captured payment of an order. Ok(None) if none captured."""
        ...


__all__ = (
    "GatewayPayment",
    "GatewayErrorKind",
    "GatewayError",
    "Gateway",
)
