"""
Shared fixtures.

Environment overrides run before any application import so the settings
singleton never points at a developer database or Redis.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["REDIS_URL"] = ""
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["REPORT_TIMEZONE"] = "UTC"

from datetime import date  # noqa: E402
from typing import AsyncGenerator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from api.attendees.attendees_schema import AttendeeCreate  # noqa: E402
from api.attendees.attendees_service import AttendeeService  # noqa: E402
from api.booths.booths_schema import BoothCreate  # noqa: E402
from api.booths.booths_service import BoothService  # noqa: E402
from api.events.events_schema import EventCreate  # noqa: E402
from api.events.events_service import EventService  # noqa: E402
from config.database import get_db  # noqa: E402
from database.init_db import init_db  # noqa: E402
from stores.sqlalchemy_store import SqlAlchemyCheckinStore  # noqa: E402
from tests.fakes import InMemoryCheckinStore, StepClock, utc  # noqa: E402


# ─── In-memory store ─────────────────────────────────────────────────────────

@pytest.fixture
def store() -> InMemoryCheckinStore:
    return InMemoryCheckinStore()


@pytest.fixture
def clock() -> StepClock:
    return StepClock(utc(2025, 3, 10, 9, 0, 0))


async def _seed_event(store, code: str = "EXPO25"):
    return await EventService(store).create_event(
        EventCreate(
            event_name=f"Expo {code}",
            event_code=code,
            start_date=date(2025, 3, 10),
            end_date=date(2025, 3, 12),
        )
    )


@pytest_asyncio.fixture
async def event(store):
    return await _seed_event(store)


@pytest_asyncio.fixture
async def other_event(store):
    return await _seed_event(store, "OTHER25")


@pytest.fixture
def make_attendee(store):
    async def _make(event, name: str, company: str = None, email: str = None):
        return await AttendeeService(store).create_attendee(
            event.id, AttendeeCreate(name=name, company=company, email=email)
        )
    return _make


@pytest.fixture
def make_booth(store):
    async def _make(event, number: str, name: str = None):
        return await BoothService(store).create_booth(
            event.id, BoothCreate(booth_number=number, booth_name=name or f"Booth {number}")
        )
    return _make


# ─── SQLite-backed store and HTTP client ─────────────────────────────────────

@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def sql_store(db) -> SqlAlchemyCheckinStore:
    return SqlAlchemyCheckinStore(db)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    from main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
