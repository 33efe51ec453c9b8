"""JSON API for shortening and resolving aliases."""

from .routes import router as api_router

__all__ = ["api_router"]
