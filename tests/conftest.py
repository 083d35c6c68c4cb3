import os

# Keep the app's own engine off MySQL while the test suite imports it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from decimal import Decimal

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core import models
from app.core.database import Base, Database, get_database

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# Fresh in-memory store for every test, one shared connection so it survives
@pytest_asyncio.fixture(scope="function")
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine):
    TestingSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def database(test_engine):
    return Database(test_engine)


# Client
@pytest_asyncio.fixture(scope="function")
async def client(database: Database):
    async def override_get_database():
        return database

    app.dependency_overrides[get_database] = override_get_database

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# Two locations, three tasks, three workers and their logged time
@pytest_asyncio.fixture(scope="function")
async def seeded(db_session: AsyncSession):
    depot = models.Location(id=1, name="Depot")
    harbor = models.Location(id=2, name="Harbor")
    empty_site = models.Location(id=3, name="Empty Site")

    sweep = models.Task(id=10, description="Sweep", location=depot)
    load = models.Task(id=11, description="Load trucks", location=depot)
    moor = models.Task(id=20, description="Moor boats", location=harbor)

    ana = models.Worker(id=1, username="ana", hourly_wage=Decimal("30"))
    ben = models.Worker(id=2, username="ben", hourly_wage=Decimal("12.5"))
    cy = models.Worker(id=3, username="cy", hourly_wage=Decimal("20"))

    entries = [
        models.LoggedTime(worker=ana, task=sweep, time_seconds=600),
        models.LoggedTime(worker=ana, task=sweep, time_seconds=1800),
        models.LoggedTime(worker=ana, task=moor, time_seconds=120),
        models.LoggedTime(worker=ben, task=sweep, time_seconds=3600),
        models.LoggedTime(worker=ben, task=load, time_seconds=60),
        models.LoggedTime(worker=cy, task=moor, time_seconds=240),
    ]

    db_session.add_all([depot, harbor, empty_site, sweep, load, moor, ana, ben, cy])
    db_session.add_all(entries)
    await db_session.commit()
    return {"workers": [ana, ben, cy], "locations": [depot, harbor, empty_site]}


class RecordingDatabase:
    """Stands in for Database: remembers statements, returns canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.statements = []

    async def execute(self, statement, parameters=None):
        self.statements.append(statement)
        if self.error is not None:
            raise self.error
        return self.rows


@pytest_asyncio.fixture(scope="function")
async def recording_db():
    return RecordingDatabase()
