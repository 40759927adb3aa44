"""Tests for domain exceptions (error_code, message, details, status_code)."""

import pytest

from crm.domain.exceptions import (
    CrmException,
    DuplicateEmailException,
    DuplicateTagNameException,
    InvalidLimitException,
    InvalidQueryException,
    MissingQueryException,
    OperationFailedException,
    ResourceNotFoundException,
    SearchFailedException,
    TagNotAssignedException,
    ValidationException,
)


def test_crm_exception_default_error_code() -> None:
    """Base CrmException uses class name as error_code when not provided."""
    exc = CrmException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CrmException"
    assert exc.details == {}
    assert exc.status_code == 400


def test_crm_exception_custom_fields() -> None:
    exc = CrmException("Oops", error_code="CUSTOM", details={"k": "v"}, status_code=418)
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"k": "v"}
    assert exc.status_code == 418
    assert str(exc) == "Oops"


def test_validation_exception() -> None:
    exc = ValidationException("Invalid interaction type", field="type", error_code="INVALID_TYPE")
    assert exc.error_code == "INVALID_TYPE"
    assert exc.details == {"field": "type"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {}


@pytest.mark.parametrize(
    ("resource", "message", "code"),
    [
        ("contact", "Contact not found", "CONTACT_NOT_FOUND"),
        ("tag", "Tag not found", "TAG_NOT_FOUND"),
        ("interaction", "Interaction not found", "INTERACTION_NOT_FOUND"),
    ],
)
def test_resource_not_found(resource, message, code) -> None:
    exc = ResourceNotFoundException(resource, "x1")
    assert exc.message == message
    assert exc.error_code == code
    assert exc.status_code == 404
    assert exc.details == {"resource_type": resource, "resource_id": "x1"}


def test_conflicts_are_409() -> None:
    assert DuplicateEmailException().status_code == 409
    assert DuplicateEmailException().error_code == "DUPLICATE_EMAIL"
    exc = DuplicateTagNameException("Work")
    assert exc.status_code == 409
    assert exc.details == {"name": "Work"}


def test_tag_not_assigned() -> None:
    exc = TagNotAssignedException("c1", "t1")
    assert exc.status_code == 404
    assert exc.error_code == "TAG_NOT_ASSIGNED"


def test_search_boundary_errors() -> None:
    missing = MissingQueryException()
    assert missing.message == 'Search query parameter "q" is required'
    assert missing.error_code == "MISSING_QUERY"
    assert missing.status_code == 400

    limit = InvalidLimitException(1, 50)
    assert limit.message == "Limit must be a number between 1 and 50"
    assert limit.error_code == "INVALID_LIMIT"

    query = InvalidQueryException(2)
    assert query.message == "Search query must be at least 2 characters"
    assert query.error_code == "INVALID_QUERY"


def test_server_side_failures_are_500() -> None:
    assert SearchFailedException().status_code == 500
    assert SearchFailedException().message == "Search failed"
    exc = OperationFailedException("Failed to fetch dashboard stats", "FETCH_STATS_ERROR")
    assert exc.status_code == 500
    assert exc.error_code == "FETCH_STATS_ERROR"
