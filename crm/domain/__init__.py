"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from crm.domain.enums import ActivityType, InteractionType, SearchEntityType
from crm.domain.exceptions import (
    CrmException,
    InvalidQueryException,
    ResourceNotFoundException,
    SearchFailedException,
    ValidationException,
)

__all__ = [
    "ActivityType",
    "CrmException",
    "InteractionType",
    "InvalidQueryException",
    "ResourceNotFoundException",
    "SearchEntityType",
    "SearchFailedException",
    "ValidationException",
]
