"""Tag and ContactTag ORM models. Tags are global labels linked to contacts (many-to-many)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin

DEFAULT_TAG_COLOR = "#6B7280"


class Tag(CuidMixin, CreatedAtMixin, Base):
    """Tag entity. Table: tag. Name is unique."""

    __tablename__ = "tag"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    color: Mapped[str | None] = mapped_column(
        String(7), default=DEFAULT_TAG_COLOR, server_default=DEFAULT_TAG_COLOR
    )


class ContactTag(Base):
    """Association row linking a contact to a tag. Table: contact_tag."""

    __tablename__ = "contact_tag"

    contact_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("contact.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    tag_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("tag.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
