"""Interaction ORM model. A call, meeting, email, etc. logged against a contact."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from crm.domain.enums import InteractionType
from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import CrmModel

if TYPE_CHECKING:
    from crm.infrastructure.persistence.models.contact import Contact


class Interaction(CrmModel, Base):
    """Interaction entity. Table: interaction. Indexed by contact_id and date."""

    __tablename__ = "interaction"

    contact_id: Mapped[str] = mapped_column(
        String, ForeignKey("contact.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[InteractionType] = mapped_column(
        Enum(
            InteractionType,
            name="interaction_type",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    subject: Mapped[str | None] = mapped_column(String(500))
    notes: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    # Minutes
    duration: Mapped[int | None] = mapped_column(Integer)
    location: Mapped[str | None] = mapped_column(String(500))

    contact: Mapped["Contact"] = relationship(lazy="raise")
