"""
Application factory — wires settings, stores, gateway and HTTP exposure.

    uvicorn reconciler.app:create_app --factory
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import fastapi
import structlog

from reconciler import ledger as L
from reconciler import orders as O
from reconciler import pipeline as P
from reconciler import wire as W
from reconciler.config import Settings
from reconciler.db import open_database, create_tables
from reconciler.diagnostics import Diagnostics
from reconciler.logging import configure_logging
from reconciler.wire.contrib import fastapi as wire_fastapi

logger = structlog.get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    diagnostics: Diagnostics | None = None,
) -> fastapi.FastAPI:
    """
    Build the webhook service.

    Settings default to the environment. Tables are created on startup and
    the engine is disposed on shutdown.
    """
    settings = settings if settings is not None else Settings.from_env()
    configure_logging()

    session_factory, engine = open_database(settings.database_url)

    builder = (
        P.reconciler(settings)
        .ledger(L.SQLAlchemyLedger(session_factory))
        .orders(O.SQLAlchemyOrders(session_factory))
    )
    if diagnostics is not None:
        builder = builder.diagnostics(diagnostics)
    rec = builder.build()

    trigger = W.HTTPRouteTrigger(
        "POST",
        settings.webhook_path,
        frozenset({settings.signature_header}),
    )
    app = W.application().mount(W.endpoint(rec).expose(trigger))

    @asynccontextmanager
    async def lifespan(_: fastapi.FastAPI) -> AsyncIterator[None]:
        await create_tables(engine)
        logger.info(
            "reconciler_started",
            path=settings.webhook_path,
            gateway=settings.gateway,
            confirmation=rec.gateway is not None,
        )
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("reconciler_stopped")

    return wire_fastapi.from_application(
        app,
        title="Payment webhook reconciler",
        lifespan=lifespan,
    )


__all__ = ("create_app",)
