# This project was developed with assistance from AI tools.
"""Integration test fixtures -- real SQLAlchemy engine on in-memory SQLite.

Each test gets its own engine and a freshly created schema, so nothing leaks
between tests. Foreign keys are switched on so parent/child ordering is
actually enforced by the database.
"""

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from portal_db import DatabaseService

# ---------------------------------------------------------------------------
# Mark all tests in this directory as integration
# ---------------------------------------------------------------------------
pytestmark = pytest.mark.integration

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def db_service():
    """DatabaseService over a private in-memory database with the schema created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    service = DatabaseService(engine)
    await service.create_schema()
    yield service
    await service.dispose()


@pytest.fixture
def client_factory(db_service):
    """Factory returning an async httpx client with dependency overrides."""
    from portal_db import get_db_service

    from portal_api.main import app
    from portal_api.middleware.auth import get_current_user

    async def _make(user):
        async def _get_current_user():
            return user

        async def _get_db_service():
            return db_service

        app.dependency_overrides[get_current_user] = _get_current_user
        app.dependency_overrides[get_db_service] = _get_db_service
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        return httpx.AsyncClient(transport=transport, base_url="http://test")

    yield _make

    app.dependency_overrides.clear()
