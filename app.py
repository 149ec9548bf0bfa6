#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - PostgreSQL connection URL
    DATABASE_NAME - Database name
    SERVER_ADDRESS - host:port to listen on
    STORE_BACKEND - 'postgres' (default) or 'memory'
    CREATE_TABLES - Set to 'true' to create the schema on startup
    REDIS_URL - Redis connection URL (optional)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shortener.config import Config, load_config
from shortener.database import InMemoryURLStore, PostgresURLStore, RedisCache
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging, shutdown_logging
from shortener_web import create_app


def build_store(config: Config, logger):
    """Create the record store selected by configuration."""
    if config.store_backend == "memory":
        logger.warning("Using in-memory store; records are lost on restart")
        return InMemoryURLStore(logger=logger)

    logger.info(f"Connecting to PostgreSQL database '{config.database_name}'")
    return PostgresURLStore(
        db_config=config.database_url,
        database=config.database_name,
        create_tables=config.create_tables,
        logger=logger,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    store = build_store(config, logger)

    cache = None
    if config.redis_url:
        logger.info("Connecting to Redis")
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")

    service = URLShortenerService(
        store=store,
        short_code_generator=ShortCodeGenerator(),
        cache=cache,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
        store_timeout_seconds=config.store_timeout_seconds,
    )
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json or config.environment == "production",
    )

    logger.info("URL Shortener Service")
    logger.info(
        f"Configuration: store={config.store_backend}, database={config.database_name}, "
        f"listen={config.server_address}, cache={'on' if config.redis_url else 'off'}"
    )

    # Service is created in lifespan
    app = create_app(service_instance=None, config=config, logger=logger)
    app.router.lifespan_context = lifespan

    host, port = config.listen_address
    uvicorn_config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    exit_code = 0
    try:
        logger.info(f"Starting server on {host}:{port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        exit_code = 1
    finally:
        shutdown_logging(logger)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
