"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient

from scrapless.main import app


@pytest.fixture(scope="session")
def client():
    return TestClient(app)
