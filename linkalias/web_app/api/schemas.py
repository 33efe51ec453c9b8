"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"}
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    alias: str = Field(..., description="The complete alias")
    short_code: str = Field(..., description="The base62 code at the end of the alias")
    original_url: str = Field(..., description="The original long URL")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "alias": "http://short.url/b",
                    "short_code": "b",
                    "original_url": "https://example.com/very/long/path",
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }


class ResolveResponse(BaseModel):
    """Response with the URL an alias points to."""

    alias: str
    original_url: str


class CacheStatistics(BaseModel):
    """LRU cache counters."""

    size: int
    capacity: int
    hits: int
    misses: int
    evictions: int


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    last_identifier: int
    cache_enabled: bool
    cache: Optional[CacheStatistics] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Alias store status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
