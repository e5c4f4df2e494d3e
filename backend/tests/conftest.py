"""Pytest configuration and shared fixtures for store and API tests."""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test DB before app imports so config/engine use it
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///" + os.path.join(tempfile.gettempdir(), "lifting_diary_test.db"),
)
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")

from lifting_diary.core.auth import create_access_token
from lifting_diary.db.base import Base
from lifting_diary.db.session import async_session_maker, engine, init_db
from lifting_diary.main import app
from lifting_diary.models import Exercise

USER_ID = "user_alice"
OTHER_USER_ID = "user_bob"


async def _clear_all():
    """Delete all rows, children first, so tests start clean."""
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())


@pytest_asyncio.fixture
async def clean_db():
    """Create tables if needed and empty them."""
    await init_db()
    await _clear_all()
    yield


@pytest_asyncio.fixture
async def session(clean_db):
    async with async_session_maker() as s:
        yield s


@pytest_asyncio.fixture
async def client(clean_db):
    """Yield AsyncClient against the app (no lifespan; clean_db creates tables)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def user_id():
    return USER_ID


@pytest.fixture
def other_user_id():
    return OTHER_USER_ID


@pytest.fixture
def auth_headers():
    """Authorization header for USER_ID."""
    return {"Authorization": f"Bearer {create_access_token(USER_ID)}"}


@pytest.fixture
def other_auth_headers():
    return {"Authorization": f"Bearer {create_access_token(OTHER_USER_ID)}"}


@pytest_asyncio.fixture
async def exercises(clean_db) -> dict[str, int]:
    """Seed three global exercises and one custom exercise per user; return name -> id."""
    async with async_session_maker() as s:
        rows = [
            Exercise(name="Overhead Press", is_custom=False),
            Exercise(name="Barbell Squat", video_url="https://www.youtube.com/watch?v=ultWZbUMPL8", is_custom=False),
            Exercise(name="Barbell Bench Press", is_custom=False),
            Exercise(name="Cable Fly", is_custom=True, user_id=USER_ID),
            Exercise(name="Landmine Press", is_custom=True, user_id=OTHER_USER_ID),
        ]
        s.add_all(rows)
        await s.commit()
        return {r.name: r.id for r in rows}
