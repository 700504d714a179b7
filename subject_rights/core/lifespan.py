"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (Redis session
client, telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as redis
from fastapi import FastAPI

from subject_rights.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: Redis session client (when the session handler is
    redis), telemetry (if enabled). Shutdown order: Redis close, telemetry
    shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.session_redis = None
    if settings.session_handler == "redis":
        app.state.session_redis = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=settings.redis_password.get_secret_value() if settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        logger.info(
            "Redis session store configured: %s:%s",
            settings.redis_host,
            settings.redis_port,
        )

    app.state.telemetry = None
    if settings.telemetry_enabled:
        from subject_rights.shared.telemetry.telemetry import Telemetry, span_exporter

        app.state.telemetry = Telemetry.start(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            exporter=span_exporter(
                settings.telemetry_exporter, settings.telemetry_otlp_endpoint
            ),
            sample_rate=settings.telemetry_sample_rate,
        )
        app.state.telemetry.instrument(app, redis=app.state.session_redis is not None)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "session_redis", None) is not None:
        await app.state.session_redis.aclose()
        app.state.session_redis = None
        logger.info("Redis session client closed")

    if getattr(app.state, "telemetry", None) is not None:
        app.state.telemetry.shutdown()
        app.state.telemetry = None

    from subject_rights.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
