"""DTOs for tag use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TagResult:
    """Tag read-model with the number of contacts carrying it."""

    id: str
    name: str
    color: str | None
    created_at: datetime
    contact_count: int = 0
