"""Global search use case: validate, fan out to every entity strategy, rank."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from crm.application.dtos.search import GlobalSearchResponse, SearchResult
from crm.application.services.relevance import DEFAULT_PREVIEW_LENGTH
from crm.application.services.search_strategies import (
    ContactSearchStrategy,
    EntitySearchStrategy,
    InteractionSearchStrategy,
    NoteSearchStrategy,
    ReminderSearchStrategy,
)
from crm.domain.exceptions import (
    CrmException,
    InvalidQueryException,
    SearchFailedException,
)
from crm.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import ISearchRepository

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 10


class GlobalSearchService:
    """Search contacts, notes, interactions and reminders in one call.

    Strategies run concurrently; results are concatenated in strategy order
    (contacts, notes, interactions, reminders) and stably sorted by
    relevance, so equal scores keep that order.
    """

    def __init__(
        self,
        search_repo: ISearchRepository,
        preview_max_length: int = DEFAULT_PREVIEW_LENGTH,
    ) -> None:
        self.strategies: tuple[EntitySearchStrategy, ...] = (
            ContactSearchStrategy(search_repo, preview_max_length),
            NoteSearchStrategy(search_repo, preview_max_length),
            InteractionSearchStrategy(search_repo, preview_max_length),
            ReminderSearchStrategy(search_repo, preview_max_length),
        )

    @traced("search.global_search")
    async def global_search(
        self, query: str | None, limit: int = DEFAULT_LIMIT
    ) -> GlobalSearchResponse:
        """Return ranked results for query across all searchable entities.

        limit caps each entity kind separately, so up to 4 * limit results
        come back. No result is dropped after ranking.

        Raises:
            InvalidQueryException: trimmed query shorter than 2 characters.
            SearchFailedException: any entity fetch failed (no partial results).
        """
        search_query = (query or "").strip()
        if len(search_query) < MIN_QUERY_LENGTH:
            raise InvalidQueryException(MIN_QUERY_LENGTH)

        logger.debug("Global search: limit=%d, query_length=%d", limit, len(search_query))
        try:
            per_entity = await asyncio.gather(
                *(strategy.search(search_query, limit) for strategy in self.strategies)
            )
        except CrmException:
            raise
        except Exception as e:
            logger.exception("Global search failed: %s", e)
            raise SearchFailedException() from e

        results: list[SearchResult] = [hit for hits in per_entity for hit in hits]
        results = sorted(results, key=lambda r: r.relevance_score, reverse=True)
        add_span_attributes(**{"search.total_results": len(results)})
        return GlobalSearchResponse(
            query=search_query,
            total_results=len(results),
            results=results,
        )
