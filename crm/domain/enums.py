"""Domain enumerations for the CRM application.

Enums represent fixed sets of domain values (interaction kinds, searchable
entity kinds).
"""

from enum import Enum


class InteractionType(str, Enum):
    """Kind of interaction logged against a contact."""

    CALL = "CALL"
    MEETING = "MEETING"
    EMAIL = "EMAIL"
    TEXT = "TEXT"
    COFFEE = "COFFEE"
    LUNCH = "LUNCH"
    EVENT = "EVENT"
    OTHER = "OTHER"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid interaction types as strings.

        Returns:
            List of enum value strings in declaration order.
        """
        return [t.value for t in cls]

    @property
    def label(self) -> str:
        """Plural display label used by the dashboard breakdown."""
        return _INTERACTION_LABELS[self]


_INTERACTION_LABELS: dict[InteractionType, str] = {
    InteractionType.CALL: "Calls",
    InteractionType.MEETING: "Meetings",
    InteractionType.EMAIL: "Emails",
    InteractionType.TEXT: "Texts",
    InteractionType.COFFEE: "Coffee",
    InteractionType.LUNCH: "Lunch",
    InteractionType.EVENT: "Events",
    InteractionType.OTHER: "Other",
}


class SearchEntityType(str, Enum):
    """Entity kinds covered by global search (order = result concatenation order)."""

    CONTACT = "contact"
    NOTE = "note"
    INTERACTION = "interaction"
    REMINDER = "reminder"


class ActivityType(str, Enum):
    """Entity kinds that appear in the dashboard recent-activity feed."""

    INTERACTION = "interaction"
    NOTE = "note"
    REMINDER = "reminder"
