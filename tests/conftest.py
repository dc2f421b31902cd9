"""Pytest configuration and fixtures."""

import itertools
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from tinylink.config import Config
from tinylink.database.memory import MemoryLinkStore
from tinylink.service import LinkRegistry
from tinylink.shortcode import ShortCodeGenerator
from tinylink.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create in-memory store."""
    return MemoryLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=7)


@pytest.fixture
def registry(store, short_code_generator, logger) -> LinkRegistry:
    """Create registry instance."""
    return LinkRegistry(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def ticking_clock(monkeypatch):
    """Make every registry timestamp one second later than the previous one."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = itertools.count()
    monkeypatch.setattr(
        "tinylink.service.utcnow",
        lambda: start + timedelta(seconds=next(ticks)),
    )
    return start


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(database_url="memory://", base_url="http://testserver/")


@pytest.fixture
def app(store, registry, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=registry,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "http://stackoverflow.com/questions/123456?tab=votes#answer",
    ]
