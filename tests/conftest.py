"""Pytest configuration and fixtures for engine_client tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from engine_client.infrastructure.config import Config, EngineConfig, get_config
from engine_client.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def test_config() -> Config:
    """Provide a configuration pointing at the default unix socket."""
    return Config(engine=EngineConfig(uri="unix:///var/run/docker.sock"))


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a metrics registry backed by a private collector registry."""
    return MetricsRegistry(registry=CollectorRegistry(auto_describe=True))


@pytest.fixture
def fresh_config_cache() -> Generator[None, None, None]:
    """Clear the cached global configuration around a test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
