"""Domain exceptions for the CRM application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers using status_code
and error_code.
"""

from typing import Any


class CrmException(Exception):
    """Base exception for all CRM application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to the {success: false, error: {message, code}} envelope.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
        status_code: HTTP status the presentation layer should use.
    """

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
            status_code: Optional HTTP status override for this instance.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationException(CrmException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        """Initialize with message, optional field name and code.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
            error_code: Machine-readable code (e.g. INVALID_TYPE, INVALID_DATE).
        """
        details = {"field": field} if field else {}
        super().__init__(message, error_code, details)


class ResourceNotFoundException(CrmException):
    """Raised when a requested resource is not found.

    error_code is derived from the resource type (e.g. CONTACT_NOT_FOUND).
    """

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'contact', 'note').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type.capitalize()} not found",
            f"{resource_type.upper()}_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TagNotAssignedException(CrmException):
    """Raised when removing a tag that is not linked to the contact."""

    status_code = 404

    def __init__(self, contact_id: str, tag_id: str) -> None:
        super().__init__(
            "Tag is not assigned to this contact",
            "TAG_NOT_ASSIGNED",
            {"contact_id": contact_id, "tag_id": tag_id},
        )


class DuplicateEmailException(CrmException):
    """Raised when creating or updating a contact to an email already in use."""

    status_code = 409

    def __init__(self) -> None:
        super().__init__("A contact with this email already exists", "DUPLICATE_EMAIL")


class DuplicateTagNameException(CrmException):
    """Raised when creating or renaming a tag to a name already in use."""

    status_code = 409

    def __init__(self, name: str) -> None:
        super().__init__(
            "A tag with this name already exists",
            "DUPLICATE_TAG_NAME",
            {"name": name},
        )


class MissingQueryException(CrmException):
    """Raised at the HTTP boundary when the q parameter is absent or empty."""

    def __init__(self, message: str = 'Search query parameter "q" is required') -> None:
        super().__init__(message, "MISSING_QUERY")


class InvalidLimitException(CrmException):
    """Raised at the HTTP boundary when limit is non-numeric or out of range."""

    def __init__(self, minimum: int, maximum: int) -> None:
        """Initialize with the accepted range.

        Args:
            minimum: Smallest accepted limit.
            maximum: Largest accepted limit.
        """
        super().__init__(
            f"Limit must be a number between {minimum} and {maximum}",
            "INVALID_LIMIT",
            {"min": minimum, "max": maximum},
        )


class InvalidQueryException(CrmException):
    """Raised by the search engine when the trimmed query is too short."""

    def __init__(self, min_length: int) -> None:
        """Initialize with the minimum accepted query length.

        Args:
            min_length: Minimum number of characters after trimming.
        """
        super().__init__(
            f"Search query must be at least {min_length} characters",
            "INVALID_QUERY",
            {"min_length": min_length},
        )


class SearchFailedException(CrmException):
    """Raised when any entity fetch of a global search fails (no partial results)."""

    status_code = 500

    def __init__(self) -> None:
        super().__init__("Search failed", "SEARCH_ERROR")


class OperationFailedException(CrmException):
    """Raised when a repository operation fails for reasons other than domain rules.

    Carries an operation-specific code (e.g. FETCH_STATS_ERROR) so failures stay
    opaque to clients while remaining distinguishable in logs.
    """

    status_code = 500

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message, error_code)
