"""
Codecs — translate between transport requests and reconciler types.

    from reconciler.wire.codecs.webhook import WebhookCodec

    codec = WebhookCodec(signature_header="x-razorpay-signature")
"""

from reconciler.wire.codecs import webhook


__all__ = ("webhook",)
