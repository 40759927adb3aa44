"""Contacts API with a mocked ContactService."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from crm.api.v1.dependencies import get_contact_service
from crm.application.use_cases.contacts import ContactService
from crm.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    TagNotAssignedException,
)


@pytest.fixture
def contact_svc(override):
    return override(get_contact_service, AsyncMock(spec=ContactService))


async def test_list_contacts_with_tag_filter(
    client: AsyncClient, contact_svc, make_contact
) -> None:
    contact_svc.list_contacts.return_value = [make_contact()]
    response = await client.get("/api/contacts", params={"tags": "t1, t2,"})
    assert response.status_code == 200
    [contact] = response.json()["data"]
    assert contact["firstName"] == "Jane"
    assert contact["jobTitle"] == "CTO"
    assert contact["tags"] == [{"id": "t1", "name": "Work", "color": "#3B82F6"}]
    contact_svc.list_contacts.assert_awaited_once_with(["t1", "t2"])


async def test_get_contact_not_found(client: AsyncClient, contact_svc) -> None:
    contact_svc.get_contact.side_effect = ResourceNotFoundException("contact", "c9")
    response = await client.get("/api/contacts/c9")
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "CONTACT_NOT_FOUND"
    assert error["message"] == "Contact not found"


async def test_create_contact(client: AsyncClient, contact_svc, make_contact) -> None:
    contact_svc.create_contact.return_value = make_contact(tags=())
    response = await client.post(
        "/api/contacts",
        json={"firstName": "Jane", "lastName": "Smith", "email": "", "company": "Acme"},
    )
    assert response.status_code == 201
    assert response.json()["data"]["id"] == "c1"
    contact_svc.create_contact.assert_awaited_once_with(
        {"first_name": "Jane", "last_name": "Smith", "company": "Acme"}
    )


async def test_create_contact_validation_error(client: AsyncClient, contact_svc) -> None:
    response = await client.post("/api/contacts", json={"firstName": "Jane"})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any("lastName" in d["field"] for d in error["details"])
    contact_svc.create_contact.assert_not_called()


async def test_create_contact_duplicate_email(client: AsyncClient, contact_svc) -> None:
    contact_svc.create_contact.side_effect = DuplicateEmailException()
    response = await client.post(
        "/api/contacts",
        json={"firstName": "Jane", "lastName": "Smith", "email": "jane@acme.io"},
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_EMAIL"


async def test_update_contact_sends_only_present_fields(
    client: AsyncClient, contact_svc, make_contact
) -> None:
    contact_svc.update_contact.return_value = make_contact(phone=None)
    response = await client.put("/api/contacts/c1", json={"phone": ""})
    assert response.status_code == 200
    contact_svc.update_contact.assert_awaited_once_with("c1", {"phone": None})


async def test_delete_contact(client: AsyncClient, contact_svc) -> None:
    response = await client.delete("/api/contacts/c1")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"message": "Contact deleted successfully"},
    }


async def test_contact_search_requires_query(client: AsyncClient, contact_svc) -> None:
    response = await client.get("/api/contacts/search")
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_QUERY"


async def test_companies(client: AsyncClient, contact_svc) -> None:
    contact_svc.list_companies.return_value = ["Acme", "Globex"]
    response = await client.get("/api/contacts/companies")
    assert response.json()["data"] == ["Acme", "Globex"]


async def test_assign_and_remove_tag(client: AsyncClient, contact_svc, make_contact) -> None:
    contact_svc.add_tag.return_value = make_contact()
    response = await client.post("/api/contacts/c1/tags", json={"tagId": "t1"})
    assert response.status_code == 201
    contact_svc.add_tag.assert_awaited_once_with("c1", "t1")

    contact_svc.remove_tag.side_effect = TagNotAssignedException("c1", "t2")
    response = await client.delete("/api/contacts/c1/tags/t2")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TAG_NOT_ASSIGNED"
