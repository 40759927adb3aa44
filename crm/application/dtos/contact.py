"""DTOs for contact use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TagSummary:
    """Tag as embedded in a contact (id, name, color)."""

    id: str
    name: str
    color: str | None


@dataclass(frozen=True)
class ContactSummary:
    """Minimal contact reference embedded in interactions, notes and reminders."""

    id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class ContactResult:
    """Contact read-model (result of get, list, create, update)."""

    id: str
    first_name: str
    last_name: str
    email: str | None
    phone: str | None
    social_media: dict[str, str] | None
    company: str | None
    job_title: str | None
    address: str | None
    birthday: datetime | None
    created_at: datetime
    updated_at: datetime
    tags: tuple[TagSummary, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
