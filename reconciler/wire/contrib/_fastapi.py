from typing import Any, TypeGuard
from collections.abc import Awaitable, Callable

import fastapi
import structlog
from fastapi.responses import JSONResponse, Response

from reconciler.pipeline import Acknowledgement, Reason, Reconciler
from reconciler.wire._app import Application
from reconciler.wire._endpoint import Endpoint
from reconciler.wire._types import Exposure
from reconciler.wire.codecs.webhook import WebhookCodec
from reconciler.wire.triggers.http import HTTPRouteTrigger, Method, Path

logger = structlog.get_logger(__name__)

type RouteHandler = Callable[[fastapi.Request], Awaitable[Response]]

_REFUSED_METHODS: tuple[Method, ...] = ("GET", "PUT", "DELETE", "PATCH")


def is_target(exposure: Exposure) -> TypeGuard[tuple[HTTPRouteTrigger, WebhookCodec]]:
    trigger, codec = exposure
    return isinstance(trigger, HTTPRouteTrigger) and isinstance(codec, WebhookCodec)


def _webhook_handler(reconciler: Reconciler, codec: WebhookCodec) -> RouteHandler:
    async def _route_handler(request: fastapi.Request) -> Response:
        delivery = codec.decode(await request.body(), request.headers)
        try:
            ack = await reconciler.handle(delivery)
        except Exception as e:
            logger.exception("handler_error", error=str(e))
            ack = Acknowledgement.refuse(500, str(e), Reason.HANDLER_ERROR)

        status_code, body, headers = codec.encode(ack)
        return JSONResponse(status_code=status_code, content=body, headers=headers)

    return _route_handler


def _preflight_handler(codec: WebhookCodec) -> RouteHandler:
    async def _route_handler(request: fastapi.Request) -> Response:
        return Response(status_code=200, headers=dict(codec.response_headers))

    return _route_handler


def _refusal_handler(codec: WebhookCodec) -> RouteHandler:
    async def _route_handler(request: fastapi.Request) -> Response:
        return JSONResponse(
            status_code=405,
            content={"error": "Method not allowed"},
            headers=dict(codec.response_headers),
        )

    return _route_handler


def compile_to_fastapi_route(
    endp: Endpoint,
) -> list[tuple[list[str], Path, RouteHandler]]:  # (methods, path, route_func)
    """
    One webhook exposure compiles to three routes on its path:
    the trigger's method runs the reconciler, OPTIONS answers preflight, and
    every other method is refused with 405. None of the latter two touch the
    reconciler.
    """
    routes: list[tuple[list[str], Path, RouteHandler]] = []

    for exposure in endp.exposures:
        if not is_target(exposure):
            continue

        trigger, codec = exposure
        method = trigger.method.upper()

        routes.append(([method], trigger.path, _webhook_handler(endp.reconciler, codec)))
        routes.append((["OPTIONS"], trigger.path, _preflight_handler(codec)))

        refused = [m for m in _REFUSED_METHODS if m != method]
        routes.append((refused, trigger.path, _refusal_handler(codec)))

    return routes


def add_endpoint_to_app(
    app: fastapi.FastAPI,
    endp: Endpoint,
) -> None:
    for methods, path, handler in compile_to_fastapi_route(endp):
        app.add_api_route(path, handler, methods=methods, include_in_schema=methods != ["OPTIONS"])


def from_application(app: Application, **fastapi_kwargs: Any) -> fastapi.FastAPI:
    f_app = fastapi.FastAPI(**fastapi_kwargs)

    for endp in app.endpoints:
        add_endpoint_to_app(f_app, endp)

    return f_app
