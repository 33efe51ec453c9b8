"""URL building utilities for linkalias."""


def build_alias_prefix(base_url: str, path_prefix: str = "") -> str:
    """Build the string prepended to every short code.

    Args:
        base_url: Base URL (e.g., http://short.url)
        path_prefix: Optional path prefix (e.g., /s)

    Returns:
        Prefix ending in a slash (e.g., http://short.url/s/)
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/"
    return f"{base}/"


def normalize_path_prefix(path_prefix: str) -> str:
    """Normalize a path prefix for route mounting: leading slash, no trailing ('' if unset)."""
    p = (path_prefix or "").strip().strip("/")
    return "/" + p if p else ""
