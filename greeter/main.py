"""env-greeter: plain-text greeting service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from greeter.api.routes_greeting import router as greeting_router
from greeter.config import Settings, get_settings
from greeter.greeting import UtcClock

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("env-greeter starting up...")

    yield

    logger.info("env-greeter shutting down...")


def create_app(settings: Settings | None = None, clock: UtcClock | None = None) -> FastAPI:
    """Build the application with explicit settings and clock.

    Falls back to the process settings and a fresh clock when not given.
    """
    app = FastAPI(
        title="env-greeter",
        version="1.0.0",
        lifespan=lifespan,
        # GET / is the only route
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings if settings is not None else get_settings()
    app.state.clock = clock if clock is not None else UtcClock()

    app.include_router(greeting_router)
    return app
