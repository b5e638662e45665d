"""Pytest configuration and shared fixtures for threadops tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from threadops import Some

    return Some(10)


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from threadops import Nothing

    return Nothing


@dataclass(frozen=True)
class Person:
    name: str
    age: int


@pytest.fixture
def alice() -> Person:
    """A person fixture for thread-first field access."""
    return Person(name='Alice', age=30)


@pytest.fixture(autouse=True)
def reset_config():
    """Forget stored configuration around each test."""
    import threadops._config as config_module

    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture(autouse=True)
def reset_library_logging():
    """Leave the threadops logger silent and unconfigured around each test."""
    from threadops import reset_logging

    reset_logging()
    yield
    reset_logging()
