"""Tests for the Razorpay API client over a mocked transport."""

import base64

import httpx
from kungfu import Error

from factories import AMOUNT, ORDER_ID, PAYMENT_ID, unwrap
from reconciler import gateway as GW
from reconciler.config import Settings


BASE_URL = "https://api.test/v1"

PAYMENT_JSON = {
    "id": PAYMENT_ID,
    "entity": "payment",
    "order_id": ORDER_ID,
    "amount": AMOUNT,
    "currency": "INR",
    "status": "captured",
    "captured": True,
}


def client(handler, **kwargs) -> GW.RazorpayGateway:
    return GW.RazorpayGateway(
        "rzp_key",
        "rzp_secret",
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def failing_with(error: Exception):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    return handler


class TestFetchPayment:
    async def test_sends_basic_auth_to_payment_path(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=PAYMENT_JSON)

        payment = unwrap(await client(handler).fetch_payment(PAYMENT_ID))

        assert payment == GW.GatewayPayment(
            id=PAYMENT_ID, order_id=ORDER_ID, amount=AMOUNT, currency="INR", status="captured"
        )
        [request] = seen
        assert request.method == "GET"
        assert str(request.url) == f"{BASE_URL}/payments/{PAYMENT_ID}"
        expected = base64.b64encode(b"rzp_key:rzp_secret").decode()
        assert request.headers["authorization"] == f"Basic {expected}"

    async def test_non_integer_amount_is_absent(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=PAYMENT_JSON | {"amount": "14900"})

        assert unwrap(await client(handler).fetch_payment(PAYMENT_ID)).amount is None

    async def test_non_2xx_is_http_status_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": {"code": "BAD_REQUEST_ERROR"}})

        match await client(handler).fetch_payment(PAYMENT_ID):
            case Error(err):
                assert err.kind is GW.GatewayErrorKind.HTTP_STATUS
                assert err.status_code == 404
            case other:
                raise AssertionError(f"expected error, got {other!r}")

    async def test_timeout(self):
        result = await client(failing_with(httpx.ReadTimeout("slow"))).fetch_payment(PAYMENT_ID)
        assert isinstance(result, Error)
        assert result.value.kind is GW.GatewayErrorKind.TIMEOUT

    async def test_transport_failure(self):
        result = await client(failing_with(httpx.ConnectError("refused"))).fetch_payment(PAYMENT_ID)
        assert isinstance(result, Error)
        assert result.value.kind is GW.GatewayErrorKind.TRANSPORT

    async def test_invalid_json_is_decode_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        result = await client(handler).fetch_payment(PAYMENT_ID)
        assert isinstance(result, Error)
        assert result.value.kind is GW.GatewayErrorKind.DECODE

    async def test_non_object_json_is_decode_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[PAYMENT_JSON])

        result = await client(handler).fetch_payment(PAYMENT_ID)
        assert isinstance(result, Error)
        assert result.value.kind is GW.GatewayErrorKind.DECODE


class TestFetchCapturedPayment:
    async def test_picks_the_captured_item(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            items = [
                PAYMENT_JSON | {"id": "pay_failed", "status": "failed"},
                PAYMENT_JSON | {"id": "pay_ok"},
            ]
            return httpx.Response(200, json={"entity": "collection", "count": 2, "items": items})

        payment = unwrap(await client(handler).fetch_captured_payment(ORDER_ID))

        assert payment is not None
        assert payment.id == "pay_ok"
        assert seen == [f"/v1/orders/{ORDER_ID}/payments"]

    async def test_none_captured(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": [PAYMENT_JSON | {"status": "failed"}]})

        assert unwrap(await client(handler).fetch_captured_payment(ORDER_ID)) is None

    async def test_missing_items(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": "nope"})

        assert unwrap(await client(handler).fetch_captured_payment(ORDER_ID)) is None

    async def test_errors_propagate(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        result = await client(handler).fetch_captured_payment(ORDER_ID)
        assert isinstance(result, Error)
        assert result.value.status_code == 503


class TestGatewayFromSettings:
    def test_none_without_credentials(self):
        assert GW.gateway_from_settings(Settings(webhook_secret="s")) is None
        assert GW.gateway_from_settings(Settings().with_credentials("rzp_key", None)) is None

    async def test_uses_settings(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=PAYMENT_JSON)

        settings = Settings(api_base_url="http://localhost:9000/v1/").with_credentials("k", "s")
        gateway = GW.gateway_from_settings(settings, transport=httpx.MockTransport(handler))

        assert gateway is not None
        unwrap(await gateway.fetch_payment(PAYMENT_ID))
        assert str(seen[0].url) == f"http://localhost:9000/v1/payments/{PAYMENT_ID}"
