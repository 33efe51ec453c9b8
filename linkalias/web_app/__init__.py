"""FastAPI web application for linkalias."""

from .app_factory import create_app

__all__ = ["create_app"]
