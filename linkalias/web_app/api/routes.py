"""API routes implementation."""

from fastapi import APIRouter, Depends, Request, Response, HTTPException, Query, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    ResolveResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from ..dependencies import get_store
from ...common.validators import require_valid_url
from ...core.errors import AliasNotFoundError, InvalidURLError
from ...core.store import AliasStore

router = APIRouter()

UNAVAILABLE = {503: {"model": ErrorResponse, "description": "Store not running"}}


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL"},
        **UNAVAILABLE,
    },
    summary="Create alias",
    description="Create a new alias for a URL. Every call issues a fresh alias.",
)
async def shorten_url(body: ShortenRequest, store: AliasStore = Depends(get_store)):
    """Create an alias for a URL."""
    try:
        original_url = require_valid_url(body.url)
    except InvalidURLError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    alias = store.shorten(original_url)

    return ShortenResponse(
        alias=alias,
        short_code=alias[len(store.base_url_prefix):],
        original_url=original_url,
        created_at=datetime.now(timezone.utc),
    )


@router.get(
    "/resolve",
    response_model=ResolveResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Alias not found"},
        **UNAVAILABLE,
    },
    summary="Resolve alias",
    description="Get the original URL for an alias.",
)
async def resolve_alias(
    alias: str = Query(..., min_length=1),
    store: AliasStore = Depends(get_store),
):
    """Resolve an alias to its original URL."""
    try:
        original_url = store.resolve(alias)
    except AliasNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return ResolveResponse(alias=alias, original_url=original_url)


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    responses=UNAVAILABLE,
    summary="Get statistics",
    description="Get store and cache statistics.",
)
async def get_statistics(store: AliasStore = Depends(get_store)):
    """Get store statistics."""
    return StatisticsResponse(**store.get_statistics())


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Service unhealthy"}},
    summary="Health check",
    description="Check if the service is healthy. Answers 503 before startup and after shutdown.",
)
async def health_check(request: Request, response: Response):
    """Health check endpoint for load balancers and monitoring."""
    store = request.app.state.store

    if store is None:
        health = {"store": False, "cache": False, "overall": False}
    else:
        health = store.health_check()

    if not health["overall"]:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
