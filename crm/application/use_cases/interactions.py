"""Interaction use cases: per-contact listing and CRUD."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from crm.application.dtos.interaction import InteractionFilters, InteractionResult
from crm.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import (
        IContactRepository,
        IInteractionRepository,
    )


class InteractionService:
    """Log and query interactions. Every contact-scoped call checks the contact exists."""

    def __init__(
        self,
        interaction_repo: IInteractionRepository,
        contact_repo: IContactRepository,
    ) -> None:
        self.interaction_repo = interaction_repo
        self.contact_repo = contact_repo

    async def _require_contact(self, contact_id: str) -> None:
        if not await self.contact_repo.exists(contact_id):
            raise ResourceNotFoundException("contact", contact_id)

    async def list_for_contact(
        self, contact_id: str, filters: InteractionFilters | None = None
    ) -> list[InteractionResult]:
        await self._require_contact(contact_id)
        return await self.interaction_repo.list_for_contact(contact_id, filters)

    async def get_interaction(self, interaction_id: str) -> InteractionResult:
        interaction = await self.interaction_repo.get_by_id(interaction_id)
        if interaction is None:
            raise ResourceNotFoundException("interaction", interaction_id)
        return interaction

    async def create_interaction(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> InteractionResult:
        await self._require_contact(contact_id)
        return await self.interaction_repo.create_interaction(contact_id, data)

    async def update_interaction(
        self, interaction_id: str, changes: Mapping[str, Any]
    ) -> InteractionResult:
        result = await self.interaction_repo.update_interaction(interaction_id, changes)
        if result is None:
            raise ResourceNotFoundException("interaction", interaction_id)
        return result

    async def delete_interaction(self, interaction_id: str) -> None:
        if not await self.interaction_repo.delete_interaction(interaction_id):
            raise ResourceNotFoundException("interaction", interaction_id)
