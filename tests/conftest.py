"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from linkalias.config import Config
from linkalias.core.store import AliasStore
from linkalias.common.logging_config import setup_logging
from linkalias.web_app import create_app

BASE_URL = "http://short.url/"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> AliasStore:
    """Create store without a cache."""
    return AliasStore(base_url_prefix=BASE_URL, cache_capacity=0, logger=logger)


@pytest.fixture
def cached_store(logger) -> AliasStore:
    """Create store with a capacity-3 cache."""
    return AliasStore(base_url_prefix=BASE_URL, cache_capacity=3, logger=logger)


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
        "http://example.com/4",
    ]


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(base_url="http://testserver", cache_capacity=10)


@pytest.fixture
def app(config, logger):
    """Create test FastAPI app."""
    store = AliasStore(
        base_url_prefix=config.alias_prefix,
        cache_capacity=config.cache_capacity,
        logger=logger,
    )
    return create_app(store=store, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
