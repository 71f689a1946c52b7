"""
Wire — expose the reconciler via triggers and codecs.

    from reconciler.wire import endpoint, application, HTTPRouteTrigger
    from reconciler.wire.contrib import fastapi

    endp = endpoint(rec).expose(HTTPRouteTrigger("POST", "/webhooks/razorpay"))
    app = fastapi.from_application(application().mount(endp))
"""

from reconciler.wire._endpoint import (
    Endpoint,
    endpoint,
)
from reconciler.wire._app import Application, application
from reconciler.wire._types import (
    Trigger,
    Codec,
    Exposure,
)

# Common codecs and triggers
from reconciler.wire.codecs.webhook import CORS_HEADERS, WebhookCodec
from reconciler.wire.triggers.http import (
    HTTPRouteTrigger,
    Method,
    Path,
    Header,
    Headers,
)

# Subpackages
from reconciler.wire import codecs, triggers, contrib

__all__ = (
    # Core API
    "Endpoint",
    "endpoint",
    "Application",
    "application",
    "Trigger",
    "Codec",
    "Exposure",
    # Built-ins
    "CORS_HEADERS",
    "WebhookCodec",
    "HTTPRouteTrigger",
    "Method",
    "Path",
    "Header",
    "Headers",
    # Subpackages
    "codecs",
    "triggers",
    "contrib",
)
