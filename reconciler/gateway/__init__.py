"""
Gateway — outbound calls to the payment gateway's private API.

    from reconciler import gateway as GW

    client = GW.gateway_from_settings(settings)  # None without credentials
"""

from reconciler.gateway._types import (
    GatewayPayment,
    GatewayErrorKind,
    GatewayError,
    Gateway,
)
from reconciler.gateway._razorpay import (
    RazorpayGateway,
    gateway_from_settings,
)

__all__ = (
    "GatewayPayment",
    "GatewayErrorKind",
    "GatewayError",
    "Gateway",
    "RazorpayGateway",
    "gateway_from_settings",
)
