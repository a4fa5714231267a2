"""Car Rental API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Resource routes mounted under Settings.api_prefix; health checks at the root
    - Global error handlers map every failure to {"error": <message>}
    - Connection pool created on startup and stored on app.state.db_manager
    - Pool disposed on shutdown, after the server has stopped accepting
      connections and in-flight requests have finished

Design Decisions:
    - Lifespan over @app.on_event for startup/shutdown
    - SIGINT/SIGTERM are handled by uvicorn; run() sets the graceful-shutdown window
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rental_api.api.error_handlers import register_error_handlers
from rental_api.api.routes import cars, health, rentals, users
from rental_api.config import Settings, get_settings
from rental_api.infrastructure.database import init_db
from rental_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info("Rental API started")
    try:
        yield
    finally:
        logger.info("Rental API shutting down, draining database pool")
        await app.state.db_manager.close()
        app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(title="Car Rental API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(cars.router, prefix=settings.api_prefix)
    app.include_router(rentals.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with graceful shutdown on SIGINT/SIGTERM."""
    settings = get_settings()
    uvicorn.run(
        "rental_api.main:app",
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    run()
