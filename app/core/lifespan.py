"""Application lifespan: startup and shutdown.

Wiring of infrastructure only (logging, tracing, SQL engine). The search
core never opens or closes the engine itself; it is disposed here on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: logging, then tracing when enabled. Shutdown: flush spans, dispose engine."""
    settings = get_settings()
    setup_logging()

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        if telemetry.start(settings.telemetry_exporter, settings.telemetry_otlp_endpoint):
            database._ensure_engine()
            telemetry.instrument(app, database.engine)
            set_telemetry(telemetry)

    logger.info("%s %s started", settings.app_name, settings.app_version)
    try:
        yield
    finally:
        telemetry_instance = get_telemetry()
        if telemetry_instance is not None:
            telemetry_instance.shutdown()
            set_telemetry(None)
        await database.dispose_engine()
