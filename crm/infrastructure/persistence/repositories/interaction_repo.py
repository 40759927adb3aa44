"""Interaction repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from crm.application.dtos.interaction import InteractionFilters, InteractionResult
from crm.infrastructure.persistence.models.interaction import Interaction
from crm.infrastructure.persistence.repositories.base import BaseRepository
from crm.infrastructure.persistence.repositories.contact_repo import contact_to_summary


def interaction_to_result(
    i: Interaction, *, with_contact: bool = False
) -> InteractionResult:
    """Map ORM Interaction to application InteractionResult."""
    return InteractionResult(
        id=i.id,
        contact_id=i.contact_id,
        type=i.type,
        subject=i.subject,
        notes=i.notes,
        date=i.date,
        duration=i.duration,
        location=i.location,
        created_at=i.created_at,
        updated_at=i.updated_at,
        contact=contact_to_summary(i.contact) if with_contact else None,
    )


class InteractionRepository(BaseRepository[Interaction]):
    """Interaction persistence: per-contact listing with filters, CRUD."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Interaction)

    async def get_by_id(self, interaction_id: str) -> InteractionResult | None:
        """Return interaction with its contact summary, or None."""
        result = await self.db.execute(
            select(Interaction)
            .options(joinedload(Interaction.contact))
            .where(Interaction.id == interaction_id)
        )
        row = result.scalar_one_or_none()
        return interaction_to_result(row, with_contact=True) if row else None

    async def list_for_contact(
        self, contact_id: str, filters: InteractionFilters | None = None
    ) -> list[InteractionResult]:
        """Interactions of one contact, most recent date first; date range is inclusive."""
        stmt = select(Interaction).where(Interaction.contact_id == contact_id)
        if filters is not None:
            if filters.type is not None:
                stmt = stmt.where(Interaction.type == filters.type)
            if filters.start_date is not None:
                stmt = stmt.where(Interaction.date >= filters.start_date)
            if filters.end_date is not None:
                stmt = stmt.where(Interaction.date <= filters.end_date)
        result = await self.db.execute(stmt.order_by(Interaction.date.desc()))
        return [interaction_to_result(i) for i in result.scalars().all()]

    async def create_interaction(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> InteractionResult:
        """Insert an interaction; date falls back to the server's now() when omitted."""
        values = {k: v for k, v in data.items() if not (k == "date" and v is None)}
        interaction = await self.add(Interaction(contact_id=contact_id, **values))
        return interaction_to_result(interaction)

    async def update_interaction(
        self, interaction_id: str, changes: Mapping[str, Any]
    ) -> InteractionResult | None:
        interaction = await self.get_entity(interaction_id)
        if interaction is None:
            return None
        await self.apply_changes(interaction, changes)
        return interaction_to_result(interaction)

    async def delete_interaction(self, interaction_id: str) -> bool:
        interaction = await self.get_entity(interaction_id)
        if interaction is None:
            return False
        await self.remove(interaction)
        return True
