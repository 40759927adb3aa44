"""Note ORM model. Free-text note attached to a contact; may be pinned."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import CrmModel

if TYPE_CHECKING:
    from crm.infrastructure.persistence.models.contact import Contact


class Note(CrmModel, Base):
    """Note entity. Table: note."""

    __tablename__ = "note"

    contact_id: Mapped[str] = mapped_column(
        String, ForeignKey("contact.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_pinned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )

    contact: Mapped["Contact"] = relationship(lazy="raise")
