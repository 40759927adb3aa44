"""GET /api/search: parameter validation, envelope and ranking end to end.

The real GlobalSearchService runs against a mocked search repository.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from crm.api.v1.dependencies import get_search_repo
from crm.application.dtos.search import ContactCandidate, NoteCandidate

CREATED = datetime(2025, 2, 1, 8, 0, tzinfo=UTC)


@pytest.fixture
def search_repo(override):
    repo = AsyncMock()
    repo.find_contacts = AsyncMock(
        return_value=[
            ContactCandidate(
                id="c1",
                first_name="John",
                last_name="Doe",
                email="john@acme.io",
                company="Acme",
                job_title=None,
                created_at=CREATED,
            )
        ]
    )
    repo.find_notes = AsyncMock(
        return_value=[
            NoteCandidate(
                id="n1",
                content="Lunch with john next week",
                created_at=CREATED,
                contact_id="c2",
                contact_name="Mary Major",
            )
        ]
    )
    repo.find_interactions = AsyncMock(return_value=[])
    repo.find_reminders = AsyncMock(return_value=[])
    return override(get_search_repo, repo)


async def test_search_returns_ranked_envelope(client: AsyncClient, search_repo) -> None:
    response = await client.get("/api/search", params={"q": "john"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["query"] == "john"
    assert data["totalResults"] == 2

    contact, note = data["results"]
    assert contact["entityType"] == "contact"
    assert contact["title"] == "John Doe"
    assert contact["preview"] == "Acme • john@acme.io"
    assert contact["relevanceScore"] == 110
    assert "contactId" not in contact
    assert "contactName" not in contact
    assert note["entityType"] == "note"
    assert note["relevanceScore"] == 30
    assert note["contactId"] == "c2"
    assert note["contactName"] == "Mary Major"
    assert note["createdAt"].startswith("2025-02-01T08:00:00")


async def test_search_limit_passed_per_entity(client: AsyncClient, search_repo) -> None:
    response = await client.get("/api/search", params={"q": "john", "limit": "3"})
    assert response.status_code == 200
    search_repo.find_contacts.assert_awaited_once_with("john", 3)
    search_repo.find_reminders.assert_awaited_once_with("john", 3)


async def test_search_default_limit(client: AsyncClient, search_repo) -> None:
    await client.get("/api/search", params={"q": "john", "limit": ""})
    search_repo.find_notes.assert_awaited_once_with("john", 10)


@pytest.mark.parametrize("params", [{}, {"q": ""}])
async def test_missing_query(client: AsyncClient, search_repo, params) -> None:
    response = await client.get("/api/search", params=params)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "MISSING_QUERY"
    assert error["message"] == 'Search query parameter "q" is required'
    search_repo.find_contacts.assert_not_called()


@pytest.mark.parametrize("limit", ["0", "51", "abc", "-5"])
async def test_invalid_limit(client: AsyncClient, search_repo, limit) -> None:
    response = await client.get("/api/search", params={"q": "john", "limit": limit})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INVALID_LIMIT"
    assert body["error"]["message"] == "Limit must be a number between 1 and 50"


@pytest.mark.parametrize("q", ["j", "   ", " j "])
async def test_short_query(client: AsyncClient, search_repo, q) -> None:
    response = await client.get("/api/search", params={"q": q})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_QUERY"


async def test_fetch_failure_is_search_error(client: AsyncClient, search_repo) -> None:
    search_repo.find_interactions.side_effect = RuntimeError("connection lost")
    response = await client.get("/api/search", params={"q": "john"})
    assert response.status_code == 500
    body = response.json()
    assert body == {
        "success": False,
        "error": {"message": "Search failed", "code": "SEARCH_ERROR"},
    }


async def test_trimmed_query_echoed(client: AsyncClient, search_repo) -> None:
    response = await client.get("/api/search", params={"q": "  john  "})
    assert response.json()["data"]["query"] == "john"
