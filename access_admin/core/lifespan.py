"""Application lifespan: logging on startup, SQL engine dispose on shutdown."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from access_admin.core.config import get_settings
from access_admin.infrastructure.persistence.database import dispose_engine
from access_admin.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the database engine."""
    settings = get_settings()
    setup_logging()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; user operations will return 503")

    yield

    await dispose_engine()
    logger.info("Shutdown complete")
