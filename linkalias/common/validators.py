"""Validation utilities for linkalias."""

from urllib.parse import urlparse
from typing import Tuple

from ..core.codec import Base62Codec
from ..core.errors import InvalidURLError

MAX_URL_LENGTH = 2048


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if result.scheme not in ("http", "https"):
        return False, "URL must use http or https protocol"

    if not result.netloc:
        return False, "URL must have a valid domain"

    return True, ""


def require_valid_url(url: str) -> str:
    """Return the URL unchanged, or raise if it is not acceptable.

    Raises:
        InvalidURLError: If validation fails
    """
    is_valid, error = is_valid_url(url)
    if not is_valid:
        raise InvalidURLError(url, error)
    return url


def is_valid_short_code(short_code: str) -> Tuple[bool, str]:
    """Validate the short code part of an alias.

    Args:
        short_code: The short code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if not Base62Codec.is_valid_format(short_code):
        return False, "Short code can only contain letters and numbers"

    return True, ""
