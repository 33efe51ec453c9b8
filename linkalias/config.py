"""Configuration management for linkalias."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from .common.url_builder import build_alias_prefix


class Config(BaseSettings):
    """Application configuration."""

    # Alias settings
    base_url: str = Field(
        default="http://short.url",
        description="Base URL every alias starts with"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for aliases (e.g., '/s' for http://short.url/s/abc)"
    )

    # Cache settings
    cache_capacity: int = Field(
        default=100,
        ge=0,
        description="LRU cache capacity for resolved aliases (0 disables caching)"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def alias_prefix(self) -> str:
        """String prepended to every short code."""
        return build_alias_prefix(self.base_url, self.path_prefix)


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
