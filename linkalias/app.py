"""
Main entry point for the linkalias service.

The alias store lives in process memory: aliases do not survive a restart
and the service runs as a single uvicorn process so that every request sees
the same store.

Usage:
    linkalias serve

Environment variables:
    BASE_URL - Base URL every alias starts with
    PATH_PREFIX - Optional path segment between base URL and code
    CACHE_CAPACITY - LRU cache capacity (0 disables caching)
    HOST / PORT - Bind address
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Config, load_config
from .core.store import AliasStore
from .common.logging_config import setup_logging_from_config
from .web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting linkalias service...")
    logger.info(f"Alias prefix: {config.alias_prefix}")

    if config.cache_capacity == 0:
        logger.info("LRU caching disabled")

    app.state.store = AliasStore(
        base_url_prefix=config.alias_prefix,
        cache_capacity=config.cache_capacity,
        logger=logger.getChild("store"),
    )

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down linkalias service...")
    # Store stays on app.state; get_store answers 503 once it is closed
    app.state.store.close()
    logger.info("Service stopped")


def build_app(config: Config) -> FastAPI:
    """Create the app with a lifespan that owns the store."""
    logger = setup_logging_from_config(config)

    app = create_app(store=None, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main(config: Optional[Config] = None) -> int:
    """Main entry point."""
    config = config or load_config()
    app = build_app(config)
    logger = app.state.logger

    logger.info("linkalias service")
    logger.info(f"Configuration: {config.model_dump()}")

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        # Handlers come from setup_logging_from_config, not uvicorn's dictConfig
        log_config=None,
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
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
