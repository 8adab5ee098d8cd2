"""
API test fixtures.

Provides an httpx AsyncClient that talks to the FastAPI app
in-process via ASGITransport (no server needed).

ASGITransport does not trigger ASGI lifespan, so init_globals()
never runs. The module-level singletons in api.dependencies are
built from the test db_manager instead, and restored afterwards.
"""

import pytest
from httpx import ASGITransport, AsyncClient

import api.dependencies as deps
from api.main import create_app
from db.database import DatabaseManager


@pytest.fixture
async def app(populated_db: DatabaseManager):
    application = create_app()

    saved = (deps._db_manager, deps._registry, deps._data_broker, deps._report_broker)
    deps.build_services(populated_db)

    yield application

    deps._db_manager, deps._registry, deps._data_broker, deps._report_broker = saved


@pytest.fixture
async def client(app) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
