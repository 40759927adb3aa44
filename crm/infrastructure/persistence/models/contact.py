"""Contact ORM model. Root entity; interactions, reminders, notes and tag links cascade from it."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import CrmModel

if TYPE_CHECKING:
    from crm.infrastructure.persistence.models.tag import Tag


class Contact(CrmModel, Base):
    """Contact entity. Table: contact. Index: (last_name, first_name) for list/search order."""

    __tablename__ = "contact"

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), unique=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(64))
    # {"twitter": "@user", "linkedin": "user", ...}
    social_media: Mapped[dict[str, str] | None] = mapped_column(JSON, nullable=True)
    company: Mapped[str | None] = mapped_column(String(255))
    job_title: Mapped[str | None] = mapped_column(String(255))
    address: Mapped[str | None] = mapped_column(Text)
    birthday: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    tags: Mapped[list["Tag"]] = relationship(
        secondary="contact_tag",
        order_by="Tag.name",
        lazy="raise",
        passive_deletes=True,
    )

    __table_args__ = (Index("ix_contact_last_first", "last_name", "first_name"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
