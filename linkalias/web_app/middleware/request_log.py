"""Per-request access logging."""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request

from ...common.logging_config import get_logger


def install_request_logging(app: FastAPI, logger: Optional[logging.Logger] = None) -> None:
    """Log one line per request with status and duration.

    Client and server errors log at WARNING so unknown aliases stand out.
    """
    logger = logger or get_logger("web")

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client = request.client.host if request.client else "-"
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"{client} {request.method} {request.url.path} -> "
            f"{response.status_code} ({elapsed_ms:.1f}ms)",
        )
        return response
