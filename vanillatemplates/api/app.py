"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vanillatemplates.api.routes import health, render
from vanillatemplates.config import VERSION
from vanillatemplates.loaders import create_default_loader
from vanillatemplates.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup
    setup_logging()
    logger.info("Starting Vanilla Templates API...")

    app.state.loader = create_default_loader()
    if app.state.loader is not None:
        logger.info(f"Partial loader: {app.state.loader.name}")
    else:
        logger.info("Partial loader: none (inline partials only)")

    logger.info("Vanilla Templates API ready")

    yield

    # Shutdown
    logger.info("Shutting down Vanilla Templates API...")
    if app.state.loader is not None:
        await app.state.loader.aclose()
    app.state.loader = None
    logger.info("Vanilla Templates API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Vanilla Templates API",
        description="Declarative HTML template rendering",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(render.router, prefix="/api/v1", tags=["Render"])

    return app


app = create_app()
