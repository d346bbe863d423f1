"""Application lifespan: startup and shutdown.

Only infrastructure wiring lives here: the shared backend REST client and
the telemetry provider created in create_app().
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from portal.infrastructure.backend import close_backend, init_backend

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the backend client on startup; close it and flush spans on shutdown."""
    init_backend()
    logger.info("Startup complete")

    yield

    await close_backend()
    telemetry = getattr(app.state, "telemetry", None)
    if telemetry is not None:
        telemetry.shutdown()
