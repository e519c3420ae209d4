"""Shared pytest configuration and fixtures."""

import json

import httpx
import pytest

from spring_exporter.config.models import ScrapeTargetConfig
from spring_exporter.services.fetcher import SpringFetcher
from spring_exporter.utils.logger import setup_logger


TARGET_URI = "http://spring.test/metrics"


@pytest.fixture
def logger():
    """Create logger for tests."""
    return setup_logger("test", "DEBUG")


@pytest.fixture
def target_config():
    """Scrape target pointing at a mocked endpoint."""
    return ScrapeTargetConfig(
        uri=TARGET_URI,
        namespace="spring",
        basic_auth_user="admin",
        basic_auth_password="secret",
    )


@pytest.fixture
def make_fetcher(target_config, logger):
    """Build a fetcher whose requests are answered by ``handler``."""
    fetchers = []

    def factory(handler, config=None):
        fetcher = SpringFetcher(
            config or target_config,
            logger,
            transport=httpx.MockTransport(handler)
        )
        fetchers.append(fetcher)
        return fetcher

    yield factory

    for fetcher in fetchers:
        fetcher.close()


@pytest.fixture
def json_handler():
    """Factory for handlers returning a payload serialized as JSON."""
    def factory(payload, status_code=200):
        def handler(request):
            return httpx.Response(status_code, content=json.dumps(payload).encode())
        return handler
    return factory
