"""Pytest configuration for imperial tests."""

import pytest

from imperial.services import ServiceConfig, ServiceRegistry


@pytest.fixture
def registry():
    """A fresh, empty registry per test."""
    return ServiceRegistry()


@pytest.fixture
def github_config():
    return ServiceConfig(
        name="github",
        endpoints={"user": "https://api.github.com/user"},
    )
