"""
Webhook codec — raw HTTP request ⇄ WebhookDelivery / Acknowledgement.

The body is passed through as bytes: the signature is computed over exactly
what the gateway sent.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from reconciler.config import DEFAULT_SIGNATURE_HEADER
from reconciler.pipeline import Acknowledgement, WebhookDelivery


CORS_HEADERS: Mapping[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type, x-razorpay-signature"
    ),
}


@dataclass(frozen=True, slots=True)
class WebhookCodec:
    """
    Decodes inbound deliveries, encodes acknowledgements.

    Note: header lookup is case-insensitive as long as the mapping passed in
    is (Starlette's Headers is).
    """

    signature_header: str = DEFAULT_SIGNATURE_HEADER
    response_headers: Mapping[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def decode(self, body: bytes, headers: Mapping[str, str]) -> WebhookDelivery:
        return WebhookDelivery(body=body, signature=headers.get(self.signature_header) or None)

    def encode(self, ack: Acknowledgement) -> tuple[int, dict[str, Any], dict[str, str]]:
        """→ (status code, JSON body, headers)."""
        return ack.status_code, dict(ack.body), dict(self.response_headers)


__all__ = ("CORS_HEADERS", "WebhookCodec")
