"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortener.common.logging_config import get_logger
from .api import api_router, register_exception_handlers
from .middleware.logging import LoggingMiddleware


def create_app(
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: URLShortenerService instance (may be set later on
            ``app.state.service``, e.g. by a lifespan handler)
        config: Configuration instance
        logger: Logger for the web layer

    Returns:
        Configured FastAPI app
    """
    logger = logger or get_logger()

    app = FastAPI(
        title="URL Shortener",
        description="Create, resolve, update and delete short URLs",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, logger=logger.getChild("web"))

    register_exception_handlers(app, logger)
    app.include_router(api_router, tags=["URLs"])

    return app
