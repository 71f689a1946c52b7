"""Tests for the consistency guard."""

import pytest
from kungfu import Ok, Error

from factories import (
    AMOUNT,
    CURRENCY,
    ORDER_ID,
    PAYMENT_ID,
    ScriptedGateway,
    gateway_payment,
    pending_order,
    unwrap,
)
from reconciler import events as E
from reconciler import guard as GD
from reconciler.gateway import GatewayError, GatewayErrorKind


def captured(**overrides) -> E.PaymentCaptured:
    fields = {
        "event_id": "evt_1",
        "gateway_order_id": ORDER_ID,
        "payment_id": PAYMENT_ID,
        "amount": AMOUNT,
        "currency": CURRENCY,
        "status": "captured",
        "captured": True,
    }
    fields.update(overrides)
    return E.PaymentCaptured(**fields)


def order_paid(**overrides) -> E.OrderPaid:
    fields = {
        "event_id": "evt_op_1",
        "gateway_order_id": ORDER_ID,
        "amount": AMOUNT,
        "currency": CURRENCY,
    }
    fields.update(overrides)
    return E.OrderPaid(**fields)


def rejection(result) -> GD.Rejected:
    match result:
        case Error(rejected):
            return rejected
        case Ok(value):
            raise AssertionError(f"expected rejection, got {value!r}")


class TestCaptureState:
    @pytest.mark.parametrize(
        "overrides",
        [{"status": "authorized"}, {"captured": False}, {"status": None}],
    )
    def test_incomplete_capture_rejected(self, overrides):
        rejected = GD.check_capture_state(captured(**overrides))
        assert rejected is not None
        assert rejected.reason is GD.RejectReason.NOT_CAPTURED

    def test_captured_passes(self):
        assert GD.check_capture_state(captured()) is None

    def test_order_paid_implies_completion(self):
        assert GD.check_capture_state(order_paid()) is None


class TestAmountCurrency:
    def test_exact_match(self):
        assert GD.check_amount_currency(captured(), pending_order()) is None

    @pytest.mark.parametrize("amount", [AMOUNT - 1, AMOUNT + 1, 149, None])
    def test_amount_must_be_exact(self, amount):
        rejected = GD.check_amount_currency(captured(amount=amount), pending_order())
        assert rejected is not None
        assert rejected.reason is GD.RejectReason.MISMATCH
        assert rejected.detail["webhook_amount"] == amount
        assert rejected.detail["local_amount"] == AMOUNT

    def test_currency_mismatch(self):
        rejected = GD.check_amount_currency(captured(currency="USD"), pending_order())
        assert rejected is not None
        assert rejected.reason is GD.RejectReason.MISMATCH

    def test_missing_currency_is_not_checked(self):
        assert GD.check_amount_currency(order_paid(currency=None), pending_order()) is None


class TestResolvePaymentId:
    async def test_payment_captured_names_its_payment(self):
        gateway = ScriptedGateway()
        assert await GD.resolve_payment_id(captured(), gateway) == PAYMENT_ID
        assert gateway.captured_calls == []

    async def test_order_paid_looks_up_captured_payment(self):
        gateway = ScriptedGateway(captured=Ok(gateway_payment(id="pay_lookup")))
        assert await GD.resolve_payment_id(order_paid(), gateway) == "pay_lookup"
        assert gateway.captured_calls == [ORDER_ID]

    async def test_order_paid_without_gateway(self):
        assert await GD.resolve_payment_id(order_paid(), None) is None

    @pytest.mark.parametrize(
        "answer",
        [Ok(None), Error(GatewayError(GatewayErrorKind.TIMEOUT, "timeout"))],
    )
    async def test_lookup_failure_is_not_fatal(self, answer):
        assert await GD.resolve_payment_id(order_paid(), ScriptedGateway(captured=answer)) is None


class TestConfirm:
    async def test_skipped_without_gateway(self):
        assert unwrap(await GD.confirm(PAYMENT_ID, captured(), None)) is GD.Confirmation.SKIPPED

    async def test_skipped_without_payment_id(self):
        gateway = ScriptedGateway()
        assert unwrap(await GD.confirm(None, order_paid(), gateway)) is GD.Confirmation.SKIPPED
        assert gateway.payment_calls == []

    async def test_confirmed(self):
        gateway = ScriptedGateway()
        assert unwrap(await GD.confirm(PAYMENT_ID, captured(), gateway)) is GD.Confirmation.CONFIRMED
        assert gateway.payment_calls == [PAYMENT_ID]

    @pytest.mark.parametrize(
        "record",
        [
            {"status": "authorized"},
            {"status": "refunded"},
            {"order_id": "order_other"},
            {"order_id": None},
            {"amount": AMOUNT - 100},
            {"amount": None},
        ],
    )
    async def test_disagreement_is_mismatch(self, record):
        gateway = ScriptedGateway(payment=Ok(gateway_payment(**record)))
        rejected = rejection(await GD.confirm(PAYMENT_ID, captured(), gateway))
        assert rejected.reason is GD.RejectReason.CONFIRM_MISMATCH

    @pytest.mark.parametrize("kind", list(GatewayErrorKind))
    async def test_unanswered_is_inconclusive(self, kind):
        gateway = ScriptedGateway(payment=Error(GatewayError(kind, "down", status_code=502)))
        rejected = rejection(await GD.confirm(PAYMENT_ID, captured(), gateway))
        assert rejected.reason is GD.RejectReason.CONFIRM_INCONCLUSIVE
        assert rejected.detail["kind"] == kind.name

    async def test_empty_answer_is_inconclusive(self):
        gateway = ScriptedGateway(payment=Ok(None))
        rejected = rejection(await GD.confirm(PAYMENT_ID, captured(), gateway))
        assert rejected.reason is GD.RejectReason.CONFIRM_INCONCLUSIVE


class TestInspect:
    async def test_degraded_mode_approves_on_local_checks(self):
        approved = unwrap(await GD.inspect(captured(), pending_order(), None))
        assert approved == GD.Approved(payment_id=PAYMENT_ID, confirmation=GD.Confirmation.SKIPPED)

    async def test_confirmed_approval(self):
        approved = unwrap(await GD.inspect(captured(), pending_order(), ScriptedGateway()))
        assert approved.confirmation is GD.Confirmation.CONFIRMED

    async def test_order_paid_confirms_looked_up_payment(self):
        gateway = ScriptedGateway()
        approved = unwrap(await GD.inspect(order_paid(), pending_order(), gateway))
        assert approved.payment_id == PAYMENT_ID
        assert gateway.captured_calls == [ORDER_ID]
        assert gateway.payment_calls == [PAYMENT_ID]

    async def test_local_checks_run_before_gateway(self):
        gateway = ScriptedGateway()
        rejected = rejection(await GD.inspect(captured(amount=1), pending_order(), gateway))
        assert rejected.reason is GD.RejectReason.MISMATCH
        assert gateway.payment_calls == []

    async def test_capture_check_runs_first(self):
        rejected = rejection(await GD.inspect(captured(captured=False, amount=1), pending_order(), None))
        assert rejected.reason is GD.RejectReason.NOT_CAPTURED
