"""Middleware for the linkalias web app."""

from .request_log import install_request_logging

__all__ = ["install_request_logging"]
