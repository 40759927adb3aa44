"""Per-entity search strategies: titles, previews and scores of mapped results."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from crm.application.dtos.search import (
    ContactCandidate,
    InteractionCandidate,
    NoteCandidate,
    ReminderCandidate,
)
from crm.application.services.search_strategies import (
    ContactSearchStrategy,
    InteractionSearchStrategy,
    NoteSearchStrategy,
    ReminderSearchStrategy,
)
from crm.domain.enums import InteractionType, SearchEntityType

CREATED = datetime(2025, 1, 10, 9, 30, tzinfo=UTC)


@pytest.fixture
def search_repo():
    repo = AsyncMock()
    repo.find_contacts = AsyncMock(return_value=[])
    repo.find_notes = AsyncMock(return_value=[])
    repo.find_interactions = AsyncMock(return_value=[])
    repo.find_reminders = AsyncMock(return_value=[])
    return repo


def _contact(**overrides) -> ContactCandidate:
    values = {
        "id": "c1",
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane@acme.io",
        "company": "Acme",
        "job_title": "CTO",
        "created_at": CREATED,
    }
    values.update(overrides)
    return ContactCandidate(**values)


def _interaction(**overrides) -> InteractionCandidate:
    values = {
        "id": "i1",
        "type": InteractionType.CALL,
        "subject": None,
        "notes": None,
        "date": datetime(2025, 3, 5, 15, 0, tzinfo=UTC),
        "created_at": CREATED,
        "contact_id": "c1",
        "contact_name": "Jane Smith",
    }
    values.update(overrides)
    return InteractionCandidate(**values)


def _reminder(**overrides) -> ReminderCandidate:
    values = {
        "id": "r1",
        "title": "Follow up",
        "description": None,
        "due_date": datetime(2025, 12, 1, 10, 0, tzinfo=UTC),
        "is_completed": False,
        "created_at": CREATED,
        "contact_id": "c1",
        "contact_name": "Jane Smith",
    }
    values.update(overrides)
    return ReminderCandidate(**values)


async def test_contact_result_joins_details(search_repo) -> None:
    search_repo.find_contacts.return_value = [_contact()]
    [result] = await ContactSearchStrategy(search_repo).search("jane", 10)

    assert result.entity_type is SearchEntityType.CONTACT
    assert result.title == "Jane Smith"
    assert result.preview == "Acme • CTO • jane@acme.io"
    # prefix on the name plus the email in the details
    assert result.relevance_score == 110
    assert result.contact_id is None
    assert result.contact_name is None
    assert result.created_at == CREATED


async def test_contact_without_details(search_repo) -> None:
    search_repo.find_contacts.return_value = [
        _contact(email=None, company=None, job_title=None)
    ]
    [result] = await ContactSearchStrategy(search_repo).search("smith", 10)
    assert result.preview == "No additional details"
    assert result.relevance_score == 60


async def test_note_result_scores_content_only(search_repo) -> None:
    search_repo.find_notes.return_value = [
        NoteCandidate(
            id="n1",
            content="Discuss budget for Q3",
            created_at=CREATED,
            contact_id="c1",
            contact_name="Jane Smith",
        )
    ]
    [result] = await NoteSearchStrategy(search_repo).search("budget", 5)

    assert result.title == "Note for Jane Smith"
    assert result.preview == "Discuss budget for Q3"
    assert result.relevance_score == 30
    assert result.contact_id == "c1"
    assert result.contact_name == "Jane Smith"
    search_repo.find_notes.assert_awaited_once_with("budget", 5)


async def test_interaction_without_subject_or_notes(search_repo) -> None:
    """Matched on location only: fallback title and dated preview, score 0."""
    search_repo.find_interactions.return_value = [_interaction()]
    [result] = await InteractionSearchStrategy(search_repo).search("cafe", 10)

    assert result.title == "CALL with Jane Smith"
    assert result.preview == "CALL on 3/5/2025"
    assert result.relevance_score == 0


async def test_interaction_with_subject_and_long_notes(search_repo) -> None:
    notes = "pricing " * 30
    search_repo.find_interactions.return_value = [
        _interaction(subject="Pricing review", notes=notes)
    ]
    [result] = await InteractionSearchStrategy(search_repo).search("pricing", 10)

    assert result.title == "Pricing review"
    assert result.preview.endswith("...")
    assert len(result.preview) <= 103
    assert result.relevance_score == 110


@pytest.mark.parametrize(
    ("description", "is_completed", "preview"),
    [
        ("Bring the signed contract", False, "Bring the signed contract"),
        (None, True, "✓ Completed"),
        (None, False, "Due 12/1/2025"),
    ],
)
async def test_reminder_preview(search_repo, description, is_completed, preview) -> None:
    search_repo.find_reminders.return_value = [
        _reminder(description=description, is_completed=is_completed)
    ]
    [result] = await ReminderSearchStrategy(search_repo).search("follow up", 10)
    assert result.preview == preview
    assert result.title == "Follow up"


async def test_reminder_exact_title_match(search_repo) -> None:
    search_repo.find_reminders.return_value = [_reminder()]
    [result] = await ReminderSearchStrategy(search_repo).search("follow up", 10)
    assert result.relevance_score == 100


async def test_preview_length_is_configurable(search_repo) -> None:
    search_repo.find_notes.return_value = [
        NoteCandidate(
            id="n1",
            content="alpha beta gamma delta",
            created_at=CREATED,
            contact_id="c1",
            contact_name="Jane Smith",
        )
    ]
    strategy = NoteSearchStrategy(search_repo, preview_max_length=12)
    [result] = await strategy.search("gamma", 10)
    assert result.preview == "alpha beta..."


async def test_results_keep_fetch_order(search_repo) -> None:
    search_repo.find_contacts.return_value = [
        _contact(id="c1", last_name="Adams"),
        _contact(id="c2", last_name="Baker"),
    ]
    results = await ContactSearchStrategy(search_repo).search("jane", 10)
    assert [r.id for r in results] == ["c1", "c2"]
