"""Common utilities for linkalias."""

from .validators import is_valid_url, require_valid_url, is_valid_short_code
from .url_builder import build_alias_prefix, normalize_path_prefix
from .logging_config import setup_logging, setup_logging_from_config, get_logger

__all__ = [
    "is_valid_url",
    "require_valid_url",
    "is_valid_short_code",
    "build_alias_prefix",
    "normalize_path_prefix",
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
]
