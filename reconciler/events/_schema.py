"""
Webhook envelope schema — strict decoding of the gateway's JSON.

The payload shape depends on the event type, so the envelope is a tagged
union keyed by `event` with an explicit catch-all variant:

    payment.captured  → PaymentCapturedEnvelope
    order.paid        → OrderPaidEnvelope
    payment.failed    → PaymentFailedEnvelope
    anything else     → UnrecognizedEnvelope
"""

import json
from dataclasses import dataclass
from typing import Annotated, Any, Literal

from kungfu import Result, Ok, Error
from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
)


PAYMENT_CAPTURED = "payment.captured"
ORDER_PAID = "order.paid"
PAYMENT_FAILED = "payment.failed"
RECOGNIZED_EVENTS = frozenset({PAYMENT_CAPTURED, ORDER_PAID, PAYMENT_FAILED})


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _minor_units(value: Any) -> int | None:
    # Amounts are integers in minor units; anything else cannot match an order.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


# ═══════════════════════════════════════════════════════════════════════════════
# Entities
# ═══════════════════════════════════════════════════════════════════════════════


class _Entity(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class PaymentEntity(_Entity):
    """`payload.payment.entity`"""

    id: str | None = None
    order_id: str | None = None
    amount: int | None = None
    currency: str | None = None
    status: str | None = None
    captured: bool = False

    @field_validator("id", "order_id", mode="before")
    @classmethod
    def coerce_ids(cls, value: Any) -> str | None:
        return _optional_str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> int | None:
        return _minor_units(value)

    @field_validator("captured", mode="before")
    @classmethod
    def coerce_captured(cls, value: Any) -> bool:
        # Only a literal JSON true counts as captured.
        return value is True


class OrderEntity(_Entity):
    """`payload.order.entity`"""

    id: str | None = None
    amount: int | None = None
    currency: str | None = None
    status: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str | None:
        return _optional_str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> int | None:
        return _minor_units(value)


class PaymentRef(_Entity):
    entity: PaymentEntity | None = None


class OrderRef(_Entity):
    entity: OrderEntity | None = None


class Payload(_Entity):
    payment: PaymentRef | None = None
    order: OrderRef | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Envelope Variants
# ═══════════════════════════════════════════════════════════════════════════════


class _Envelope(_Entity):
    id: str | None = None
    payload: Payload = Payload()

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str | None:
        return _optional_str(value)

    @property
    def payment(self) -> PaymentEntity | None:
        ref = self.payload.payment
        return ref.entity if ref else None

    @property
    def order(self) -> OrderEntity | None:
        ref = self.payload.order
        return ref.entity if ref else None


class PaymentCapturedEnvelope(_Envelope):
    event: Literal["payment.captured"]


class OrderPaidEnvelope(_Envelope):
    event: Literal["order.paid"]


class PaymentFailedEnvelope(_Envelope):
    event: Literal["payment.failed"]


class UnrecognizedEnvelope(_Envelope):
    event: str | None = None

    @field_validator("event", mode="before")
    @classmethod
    def coerce_event(cls, value: Any) -> str | None:
        return _optional_str(value)


def _event_tag(value: Any) -> str:
    event = value.get("event") if isinstance(value, dict) else getattr(value, "event", None)
    if isinstance(event, str) and event in RECOGNIZED_EVENTS:
        return event
    return "unrecognized"


Envelope = Annotated[
    Annotated[PaymentCapturedEnvelope, Tag(PAYMENT_CAPTURED)]
    | Annotated[OrderPaidEnvelope, Tag(ORDER_PAID)]
    | Annotated[PaymentFailedEnvelope, Tag(PAYMENT_FAILED)]
    | Annotated[UnrecognizedEnvelope, Tag("unrecognized")],
    Discriminator(_event_tag),
]

_envelope_adapter: TypeAdapter[Envelope] = TypeAdapter(Envelope)


# ═══════════════════════════════════════════════════════════════════════════════
# Decoding
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class DecodeError:
    """Body is not a JSON object of the expected shape."""

    message: str
    cause: Exception | None = None


def decode(body: bytes) -> Result[Envelope, DecodeError]:
    """Decode a raw (already authenticated) webhook body."""
    try:
        raw = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return Error(DecodeError(f"Invalid JSON: {e}", e))

    try:
        return Ok(_envelope_adapter.validate_python(raw))
    except ValidationError as e:
        return Error(DecodeError(f"Unexpected payload shape: {e.error_count()} error(s)", e))


__all__ = (
    "PAYMENT_CAPTURED",
    "ORDER_PAID",
    "PAYMENT_FAILED",
    "RECOGNIZED_EVENTS",
    "PaymentEntity",
    "OrderEntity",
    "Payload",
    "PaymentCapturedEnvelope",
    "OrderPaidEnvelope",
    "PaymentFailedEnvelope",
    "UnrecognizedEnvelope",
    "Envelope",
    "DecodeError",
    "decode",
)
