# This project was developed with assistance from AI tools.
"""Shared fixtures for unit and route tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from portal_api.main import app
from portal_api.middleware.auth import get_current_user
from portal_api.routes.loan_application import get_application_writer

from .personas import borrower_jane


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Never let one test's dependency overrides leak into the next."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def mock_writer():
    """ApplicationWriter stand-in whose write() returns application id 7."""
    writer = MagicMock()
    writer.write = AsyncMock(return_value=7)
    return writer


@pytest.fixture
def save_client(mock_writer):
    """TestClient for the save route, authenticated as Jane, with a mocked writer."""
    app.dependency_overrides[get_current_user] = borrower_jane
    app.dependency_overrides[get_application_writer] = lambda: mock_writer
    return TestClient(app)
