"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .web import web_router
from .middleware.request_log import install_request_logging
from ..common.url_builder import normalize_path_prefix


def create_app(store, config) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store: AliasStore instance (None when the lifespan creates it)
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="linkalias",
        description="Concurrent URL aliasing service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_logging(app)

    # API first so /api/... never reaches the catch-all redirect route
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, prefix=normalize_path_prefix(config.path_prefix), tags=["Web"])

    return app
