"""Route dependencies."""

from fastapi import HTTPException, Request, status

from ..core.store import AliasStore


def get_store(request: Request) -> AliasStore:
    """Return the running store, or 503 before startup and after shutdown."""
    store = request.app.state.store
    if store is None or store.closed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Alias store is not available",
        )
    return store
