# This project was developed with assistance from AI tools.
"""Tests for DatabaseService construction and the FastAPI dependencies."""

from types import SimpleNamespace

import pytest

from portal_db import DatabaseService, get_db_service


async def test_from_url_builds_engine_for_given_url():
    service = DatabaseService.from_url("sqlite+aiosqlite://", echo=False)
    try:
        assert service.engine.dialect.name == "sqlite"
        assert service.engine.echo is False
        assert await service.health_check() is True
    finally:
        await service.dispose()


async def test_get_db_service_returns_app_state_service():
    service = DatabaseService.from_url("sqlite+aiosqlite://")
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(db_service=service)))
    try:
        assert await get_db_service(request) is service
    finally:
        await service.dispose()


async def test_get_db_service_without_lifespan_raises():
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))

    with pytest.raises(RuntimeError, match="not initialised"):
        await get_db_service(request)
