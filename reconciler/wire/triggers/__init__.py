"""
Triggers — describe how endpoints are exposed (e.g., HTTP routes).

    from reconciler.wire.triggers.http import HTTPRouteTrigger

    http = HTTPRouteTrigger("POST", "/webhooks/razorpay", frozenset({"x-razorpay-signature"}))
"""

from reconciler.wire.triggers import http


__all__ = ("http",)
