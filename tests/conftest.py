# tests/conftest.py
import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test if available; environment must be set before firegear is imported
load_dotenv(".env.test", override=False)

# A throwaway SQLite file unless TEST_DATABASE_URL points at Postgres
_DB_FILE = Path(tempfile.gettempdir()) / f"firegear-test-{os.getpid()}.sqlite3"
DB_URL = os.getenv("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{_DB_FILE}"
os.environ["DATABASE_URL"] = DB_URL
os.environ["TESTING"] = "1"
os.environ.setdefault("APP_ENV", "test")

from firegear import db  # noqa: E402
from firegear.core import startup  # noqa: E402
from firegear.infra.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from firegear.main import create_app  # noqa: E402
from firegear.middleware import rate_limit  # noqa: E402
from firegear.models import Base  # noqa: E402


@pytest_asyncio.fixture(scope="function")
async def engine():
    db.configure_engine(DB_URL)
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield db.engine
    finally:
        await db.engine.dispose()


@pytest.fixture
def uow_factory(engine):
    return lambda: SqlAlchemyUnitOfWork(db.SessionLocal)


@pytest_asyncio.fixture
async def app_client(engine):
    # TESTING short-circuits alembic and marks the schema ready
    startup.run_database_migrations()
    rate_limit.reset()
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def station(app_client):
    res = await app_client.post(
        "/api/stations", json={"name": "Station 1", "address": "1 Main St", "phone": "555-123-4567"}
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
def make_equipment(app_client, station):
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        body = {
            "name": f"SCBA Pack {counter['n']}",
            "serial_number": f"SCBA-{counter['n']:04d}",
            "category": "breathing",
            "station_id": station["id"],
        }
        body.update(overrides)
        res = await app_client.post("/api/equipment", json=body)
        assert res.status_code == 201, res.text
        return res.json()

    return _make
