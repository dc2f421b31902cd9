#!/usr/bin/env python3
"""
Main entry point for the TinyLink service.

Runs a single uvicorn process; every request is its own asyncio task on the
asyncpg pool or redis.asyncio client. Scale out by running more instances
behind a load balancer.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - Store URL (postgresql://..., redis://..., memory://)
    PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD - PostgreSQL settings
        used when DATABASE_URL is unset
    PGSSLMODE - 'disable' to turn SSL off for PostgreSQL
    BASE_URL - Public base URL for short links
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tinylink.config import Config, load_config
from tinylink.database import create_store
from tinylink.service import LinkRegistry
from tinylink.shortcode import ShortCodeGenerator
from tinylink.common.logging_config import setup_logging
from web_app import create_app


def build_registry(config: Config, logger) -> LinkRegistry:
    """Wire store, generator and registry from configuration."""
    store = create_store(config, logger=logger)
    return LinkRegistry(
        store=store,
        short_code_generator=ShortCodeGenerator(default_length=config.code_length),
        logger=logger,
        max_generation_attempts=config.max_generation_attempts,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting TinyLink service...")

    registry = build_registry(config, logger)
    app.state.store = registry.store
    app.state.service = registry

    # A failed check is logged but does not stop startup
    health = await registry.health_check()
    if health["overall"]:
        logger.info("Store connected")
    else:
        logger.error("Store connection failed; requests will fail until it recovers")

    logger.info(f"Using base URL: {config.resolved_base_url}")

    yield

    logger.info("Shutting down TinyLink service...")
    await registry.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("TinyLink Service")
    # database_url and pgpassword may carry a password
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'pgpassword'})}")

    # Store and registry are created in the lifespan, on the server's loop
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
    )

    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
