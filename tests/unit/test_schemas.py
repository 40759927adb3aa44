"""Request/response schema behavior: camelCase aliases and form normalization."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from crm.domain.enums import SearchEntityType
from crm.schemas.contact import ContactCreateRequest, ContactUpdateRequest
from crm.schemas.interaction import InteractionCreateRequest, InteractionUpdateRequest
from crm.schemas.reminder import ReminderUpdateRequest
from crm.schemas.search import SearchResultResponse
from crm.schemas.tag import TagCreateRequest, TagUpdateRequest


def test_contact_create_blank_optionals_become_none() -> None:
    body = ContactCreateRequest.model_validate(
        {"firstName": "Jane", "lastName": "Doe", "email": "", "company": "  "}
    )
    assert body.email is None
    assert body.company is None
    assert body.model_dump(exclude_none=True) == {"first_name": "Jane", "last_name": "Doe"}


def test_contact_create_accepts_snake_case() -> None:
    body = ContactCreateRequest.model_validate({"first_name": "Jane", "last_name": "Doe"})
    assert body.first_name == "Jane"


def test_contact_create_requires_names() -> None:
    with pytest.raises(ValidationError):
        ContactCreateRequest.model_validate({"firstName": "Jane"})


def test_contact_invalid_email() -> None:
    with pytest.raises(ValidationError):
        ContactCreateRequest.model_validate(
            {"firstName": "Jane", "lastName": "Doe", "email": "not-an-email"}
        )


def test_contact_birthday_is_utc_and_empty_social_media_dropped() -> None:
    body = ContactCreateRequest.model_validate(
        {
            "firstName": "Jane",
            "lastName": "Doe",
            "birthday": "1990-05-17T00:00:00",
            "socialMedia": {},
        }
    )
    assert body.birthday == datetime(1990, 5, 17, tzinfo=UTC)
    assert body.social_media is None


def test_contact_update_blank_clears_field() -> None:
    body = ContactUpdateRequest.model_validate({"phone": ""})
    assert body.model_dump(exclude_unset=True) == {"phone": None}


def test_contact_update_rejects_null_names() -> None:
    with pytest.raises(ValidationError):
        ContactUpdateRequest.model_validate({"firstName": None})


def test_interaction_type_must_be_known() -> None:
    with pytest.raises(ValidationError):
        InteractionCreateRequest.model_validate({"type": "FAX"})
    body = InteractionCreateRequest.model_validate({"type": "COFFEE", "date": ""})
    assert body.date is None


def test_interaction_update_rejects_null_date() -> None:
    with pytest.raises(ValidationError):
        InteractionUpdateRequest.model_validate({"date": None})


def test_reminder_update_partial() -> None:
    body = ReminderUpdateRequest.model_validate({"isCompleted": True})
    assert body.model_dump(exclude_unset=True) == {"is_completed": True}


def test_tag_name_trimmed_and_color_validated() -> None:
    body = TagCreateRequest.model_validate({"name": "  Work  ", "color": "#abc"})
    assert body.name == "Work"
    with pytest.raises(ValidationError):
        TagCreateRequest.model_validate({"name": "Work", "color": "red"})
    with pytest.raises(ValidationError):
        TagCreateRequest.model_validate({"name": "   "})


def test_tag_update_rejects_null_name() -> None:
    with pytest.raises(ValidationError):
        TagUpdateRequest.model_validate({"name": None})
    assert TagUpdateRequest.model_validate({"color": "#FFFFFF"}).name is None


def test_search_result_serializes_camel_case_without_contact() -> None:
    result = SearchResultResponse(
        id="c1",
        entity_type=SearchEntityType.CONTACT,
        title="Jane Doe",
        preview="Acme",
        relevance_score=80,
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
    )
    dumped = result.model_dump(by_alias=True, exclude_none=True, mode="json")
    assert dumped["entityType"] == "contact"
    assert dumped["relevanceScore"] == 80
    assert "contactId" not in dumped
    assert "contactName" not in dumped
