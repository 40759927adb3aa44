"""ORM models. Importing this package registers every table on Base.metadata."""

from crm.infrastructure.persistence.models.contact import Contact
from crm.infrastructure.persistence.models.interaction import Interaction
from crm.infrastructure.persistence.models.note import Note
from crm.infrastructure.persistence.models.reminder import Reminder
from crm.infrastructure.persistence.models.tag import DEFAULT_TAG_COLOR, ContactTag, Tag

__all__ = [
    "Contact",
    "ContactTag",
    "DEFAULT_TAG_COLOR",
    "Interaction",
    "Note",
    "Reminder",
    "Tag",
]
