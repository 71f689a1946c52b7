"""
FastAPI integration for reconciler.wire.

    from reconciler.wire.contrib import fastapi
    # fapp = fastapi.from_application(app)
"""

from ._fastapi import (
    add_endpoint_to_app,
    from_application,
    compile_to_fastapi_route,
)

__all__ = (
    "add_endpoint_to_app",
    "from_application",
    "compile_to_fastapi_route",
)
