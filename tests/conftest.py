"""Pytest configuration and fixtures for the CRM API.

Uses crm.main:app for HTTP tests (services replaced through
app.dependency_overrides) and crm.infrastructure.persistence.database for
DB-dependent fixtures. Builder fixtures return application DTOs with sensible
defaults so tests only spell out the fields they care about.
"""

import os
from datetime import UTC, datetime
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from crm.application.dtos.contact import ContactResult, ContactSummary, TagSummary
from crm.application.dtos.interaction import InteractionResult
from crm.application.dtos.note import NoteResult
from crm.application.dtos.reminder import ReminderResult
from crm.application.dtos.tag import TagResult
from crm.core.limiter import limiter
from crm.domain.enums import InteractionType
from crm.infrastructure.persistence.database import dispose_engine, get_engine
from crm.main import app

NOW = datetime(2025, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _rate_limits_off():
    """Rate limits are per client address; every test client shares one."""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI).

    raise_app_exceptions=False so unhandled errors come back as the 500
    envelope instead of propagating into the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def override():
    """Replace a dependency with a fixed object for the current test."""

    def _override(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        return value

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session_factory():
    """Session factory bound to one connection whose transaction is rolled back.

    Requires DATABASE_URL pointing at a migrated Postgres database. Skips
    (pytest.skip) otherwise. Use @pytest.mark.requires_db on tests that need
    it; run without DB via: pytest -m 'not requires_db'.
    """
    if not os.environ.get("DATABASE_URL"):
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with get_engine().connect() as conn:
        trans = await conn.begin()
        factory = async_sessionmaker(
            bind=conn,
            class_=AsyncSession,
            expire_on_commit=False,
            join_transaction_mode="create_savepoint",
        )
        yield factory
        await trans.rollback()
    await dispose_engine()


@pytest.fixture
async def db_session(db_session_factory) -> AsyncSession:
    """Database session for repository tests. Rolled back after the test."""
    async with db_session_factory() as session:
        yield session


@pytest.fixture
def make_contact():
    def _make(**overrides: Any) -> ContactResult:
        values: dict[str, Any] = {
            "id": "c1",
            "first_name": "Jane",
            "last_name": "Smith",
            "email": "jane@acme.io",
            "phone": None,
            "social_media": None,
            "company": "Acme",
            "job_title": "CTO",
            "address": None,
            "birthday": None,
            "created_at": NOW,
            "updated_at": NOW,
            "tags": (TagSummary(id="t1", name="Work", color="#3B82F6"),),
        }
        values.update(overrides)
        return ContactResult(**values)

    return _make


@pytest.fixture
def make_interaction():
    def _make(**overrides: Any) -> InteractionResult:
        values: dict[str, Any] = {
            "id": "i1",
            "contact_id": "c1",
            "type": InteractionType.CALL,
            "subject": "Quarterly check-in",
            "notes": None,
            "date": NOW,
            "duration": 30,
            "location": None,
            "created_at": NOW,
            "updated_at": NOW,
            "contact": ContactSummary(id="c1", first_name="Jane", last_name="Smith"),
        }
        values.update(overrides)
        return InteractionResult(**values)

    return _make


@pytest.fixture
def make_note():
    def _make(**overrides: Any) -> NoteResult:
        values: dict[str, Any] = {
            "id": "n1",
            "contact_id": "c1",
            "content": "Prefers email over calls",
            "is_pinned": False,
            "created_at": NOW,
            "updated_at": NOW,
            "contact": ContactSummary(id="c1", first_name="Jane", last_name="Smith"),
        }
        values.update(overrides)
        return NoteResult(**values)

    return _make


@pytest.fixture
def make_reminder():
    def _make(**overrides: Any) -> ReminderResult:
        values: dict[str, Any] = {
            "id": "r1",
            "contact_id": "c1",
            "title": "Send proposal",
            "description": None,
            "due_date": NOW,
            "is_completed": False,
            "completed_at": None,
            "created_at": NOW,
            "updated_at": NOW,
            "contact": ContactSummary(id="c1", first_name="Jane", last_name="Smith"),
        }
        values.update(overrides)
        return ReminderResult(**values)

    return _make


@pytest.fixture
def make_tag():
    def _make(**overrides: Any) -> TagResult:
        values: dict[str, Any] = {
            "id": "t1",
            "name": "Work",
            "color": "#3B82F6",
            "created_at": NOW,
            "contact_count": 0,
        }
        values.update(overrides)
        return TagResult(**values)

    return _make
