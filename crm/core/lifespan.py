"""Startup and shutdown for the CRM API (logging, tracing, DB engine)."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from crm.core.config import Settings, get_settings
from crm.infrastructure.persistence.database import dispose_engine, get_engine
from crm.shared.telemetry.logging import setup_logging
from crm.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def _start_tracing(app: FastAPI, settings: Settings) -> None:
    telemetry = TelemetryConfig.from_settings(settings)
    provider = telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    if provider is None:
        return
    telemetry.instrument(app, get_engine())
    set_telemetry(telemetry)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and optional tracing, yield, then flush spans and close the pool."""
    settings = get_settings()
    setup_logging()
    if settings.telemetry_enabled:
        _start_tracing(app, settings)
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)
