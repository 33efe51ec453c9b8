"""Redirect routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from ..dependencies import get_store
from ...common.validators import is_valid_short_code
from ...core.errors import AliasNotFoundError
from ...core.store import AliasStore

router = APIRouter()


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(short_code: str, store: AliasStore = Depends(get_store)):
    """Redirect to the original URL."""
    # decode() skips foreign characters, so malformed codes are rejected here
    is_valid, error = is_valid_short_code(short_code)
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found: {error}",
        )

    try:
        original_url = store.resolve(store.alias_for(short_code))
    except AliasNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
