"""
Razorpay API client — server-to-server payment confirmation.

    GET /payments/{id}
    GET /orders/{id}/payments
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from kungfu import Result, Ok, Error

from reconciler.config import Settings
from reconciler.gateway._types import (
    GatewayPayment,
    GatewayError,
    GatewayErrorKind,
)

logger = structlog.get_logger(__name__)


class RazorpayGateway:
    """
    Razorpay REST client over httpx.

    Note: Every failure is returned as GatewayError, never raised. The guard
    decides whether an unanswered confirmation blocks the transition.
    """

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        *,
        base_url: str = "https://api.razorpay.com/v1",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._auth = httpx.BasicAuth(key_id, key_secret)
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport

    async def fetch_payment(
        self, payment_id: str
    ) -> Result[GatewayPayment | None, GatewayError]:
        match await self._get(f"/payments/{payment_id}"):
            case Ok(data):
                return Ok(GatewayPayment.from_json(data))
            case Error(err):
                return Error(err)

    async def fetch_captured_payment(
        self, order_id: str
    ) -> Result[GatewayPayment | None, GatewayError]:
        match await self._get(f"/orders/{order_id}/payments"):
            case Ok(data):
                items = data.get("items")
                payments = items if isinstance(items, list) else []
                for item in payments:
                    if isinstance(item, dict) and item.get("status") == "captured":
                        return Ok(GatewayPayment.from_json(item))
                return Ok(None)
            case Error(err):
                return Error(err)

    async def _get(self, path: str) -> Result[dict[str, Any], GatewayError]:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(
                auth=self._auth,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.warning("gateway_timeout", path=path)
            return Error(GatewayError(GatewayErrorKind.TIMEOUT, str(e) or "timeout"))
        except httpx.HTTPError as e:
            logger.warning("gateway_transport_error", path=path, error=str(e))
            return Error(GatewayError(GatewayErrorKind.TRANSPORT, str(e)))

        if not response.is_success:
            logger.warning("gateway_http_error", path=path, status_code=response.status_code)
            return Error(
                GatewayError(
                    GatewayErrorKind.HTTP_STATUS,
                    f"HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            )

        try:
            data = response.json()
        except ValueError as e:
            return Error(GatewayError(GatewayErrorKind.DECODE, f"Invalid JSON: {e}"))

        if not isinstance(data, dict):
            return Error(GatewayError(GatewayErrorKind.DECODE, "Expected JSON object"))
        return Ok(data)


def gateway_from_settings(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RazorpayGateway | None:
    """Client for configured credentials, None in degraded (credential-less) mode."""
    if not settings.has_api_credentials:
        return None
    assert settings.key_id is not None and settings.key_secret is not None
    return RazorpayGateway(
        settings.key_id,
        settings.key_secret,
        base_url=settings.api_base_url,
        timeout=settings.confirm_timeout.total_seconds(),
        transport=transport,
    )


__all__ = (
    "RazorpayGateway",
    "gateway_from_settings",
)
