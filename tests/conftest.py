"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides isolated environments and sample environment values for all tests
"""

import os
from unittest.mock import patch

import pytest

BOUND_PREFIXES = ("APP_", "MOCK_")


@pytest.fixture
def clean_env():
    """Environment with every variable the sample records read removed."""
    with patch.dict(os.environ):
        for key in list(os.environ):
            if key.startswith(BOUND_PREFIXES):
                del os.environ[key]
        yield os.environ


@pytest.fixture
def test_env_vars():
    """Provide test environment variables for AppConfig."""
    return {
        "APP_HOST": "localhost",
        "APP_PORT": "8080",
        "APP_DEBUG": "true",
        "APP_FEATURES": "create,test",
    }


@pytest.fixture
def mock_env_vars(clean_env, test_env_vars):
    """Mock environment variables for testing."""
    clean_env.update(test_env_vars)
    yield test_env_vars


@pytest.fixture
def dict_lookup(test_env_vars):
    """A lookup collaborator backed by a plain dict instead of os.environ."""
    return lambda key: test_env_vars.get(key, "")
