"""Reminder ORM model. Follow-up task with a due date for a contact."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import CrmModel

if TYPE_CHECKING:
    from crm.infrastructure.persistence.models.contact import Contact


class Reminder(CrmModel, Base):
    """Reminder entity. Table: reminder. Indexed by contact_id, due_date, is_completed."""

    __tablename__ = "reminder"

    contact_id: Mapped[str] = mapped_column(
        String, ForeignKey("contact.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    due_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    is_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false", index=True
    )
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    contact: Mapped["Contact"] = relationship(lazy="raise")
