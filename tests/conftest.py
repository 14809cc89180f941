# tests/conftest.py
"""
Pytest configuration and shared test fixtures.
"""

import os
from typing import Generator

import pytest

# Set testing environment variables before importing app
os.environ.update(
    {
        "LOG_LEVEL": "WARNING",
        "PING_MESSAGE": "pong from tests",
    }
)

# Import after setting environment
from fastapi.testclient import TestClient
from app.main import create_app
from app.core.settings import Settings


@pytest.fixture(scope="function")
def fast_settings() -> Settings:
    """Settings with a near-zero artificial delay so API tests stay quick."""
    return Settings(caption_delay_min_ms=0, caption_delay_max_ms=5, log_level="WARNING")


@pytest.fixture(scope="function")
def client(fast_settings) -> Generator[TestClient, None, None]:
    """
    Create a test client for the FastAPI app with the fast settings injected.
    """
    with TestClient(create_app(fast_settings)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def slow_client() -> Generator[TestClient, None, None]:
    """Client on default settings (real 800-2000 ms delay)."""
    with TestClient(create_app()) as test_client:
        yield test_client
