"""Dashboard statistics use case: counters, growth, interaction mix, activity feed."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar

from crm.application.dtos.stats import (
    ContactGrowthPoint,
    DashboardStats,
    InteractionBreakdownItem,
    RecentActivityItem,
)
from crm.domain.enums import ActivityType, InteractionType
from crm.domain.exceptions import CrmException, OperationFailedException
from crm.shared.telemetry.tracing import traced
from crm.shared.utils.datetime import start_of_month, start_of_week, utc_now

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import IStatsRepository

logger = logging.getLogger(__name__)

GROWTH_MONTHS = 12
ACTIVITY_DESCRIPTION_LENGTH = 100

T = TypeVar("T")


async def _guarded(work: Awaitable[T], message: str, error_code: str) -> T:
    """Await work; repository failures become OperationFailedException(error_code)."""
    try:
        return await work
    except CrmException:
        raise
    except Exception as e:
        logger.exception("%s: %s", message, e)
        raise OperationFailedException(message, error_code) from e


class DashboardStatsService:
    """Read-only aggregates for the home dashboard. Times are UTC."""

    def __init__(self, stats_repo: IStatsRepository) -> None:
        self.stats_repo = stats_repo

    @traced("stats.dashboard")
    async def get_dashboard_stats(self, now: datetime | None = None) -> DashboardStats:
        """Run every counter concurrently; the week starts Sunday 00:00."""
        now = now or utc_now()
        month_start = start_of_month(now)
        last_month_start = start_of_month(now, months_back=1)
        week_start = start_of_week(now)
        repo = self.stats_repo

        counts = await _guarded(
            asyncio.gather(
                repo.count_contacts(),
                repo.count_contacts(created_from=month_start),
                repo.count_contacts(
                    created_from=last_month_start, created_before=month_start
                ),
                repo.count_interactions(),
                repo.count_interactions(date_from=week_start),
                repo.count_interactions(date_from=month_start),
                repo.count_open_reminders(),
                repo.count_open_reminders(due_before=now),
            ),
            "Failed to fetch dashboard stats",
            "FETCH_STATS_ERROR",
        )
        return DashboardStats(*counts)

    @traced("stats.contact_growth")
    async def get_contact_growth(
        self, now: datetime | None = None
    ) -> list[ContactGrowthPoint]:
        """Contacts per month for the last 12 months (oldest first).

        cumulative starts from the number of contacts created before the window.
        """
        now = now or utc_now()
        window_start = start_of_month(now, months_back=GROWTH_MONTHS - 1)
        prior, per_month = await _guarded(
            asyncio.gather(
                self.stats_repo.count_contacts(created_before=window_start),
                self.stats_repo.contacts_per_month(window_start),
            ),
            "Failed to fetch contact growth",
            "FETCH_GROWTH_ERROR",
        )

        points: list[ContactGrowthPoint] = []
        cumulative = prior
        for back in range(GROWTH_MONTHS - 1, -1, -1):
            month = start_of_month(now, months_back=back).strftime("%Y-%m")
            count = per_month.get(month, 0)
            cumulative += count
            points.append(ContactGrowthPoint(month=month, count=count, cumulative=cumulative))
        return points

    async def get_interaction_breakdown(self) -> list[InteractionBreakdownItem]:
        """Every interaction type with its count, busiest first (ties in enum order)."""
        counts = await _guarded(
            self.stats_repo.interaction_type_counts(),
            "Failed to fetch interaction breakdown",
            "FETCH_BREAKDOWN_ERROR",
        )
        items = [
            InteractionBreakdownItem(type=t, count=counts.get(t, 0), label=t.label)
            for t in InteractionType
        ]
        return sorted(items, key=lambda item: item.count, reverse=True)

    async def get_recent_activity(self, limit: int = 10) -> list[RecentActivityItem]:
        """Latest interactions, notes and reminders merged, newest first, capped at limit."""
        interactions, notes, reminders = await _guarded(
            asyncio.gather(
                self.stats_repo.recent_interactions(limit),
                self.stats_repo.recent_notes(limit),
                self.stats_repo.recent_reminders(limit),
            ),
            "Failed to fetch recent activity",
            "FETCH_ACTIVITY_ERROR",
        )

        items: list[RecentActivityItem] = []
        for i in interactions:
            items.append(
                RecentActivityItem(
                    id=i.id,
                    type=ActivityType.INTERACTION,
                    title=f"{i.type.value.capitalize()} logged",
                    description=i.subject or f"{i.type.value} with contact",
                    contact_id=i.contact_id,
                    contact_name=i.contact.full_name if i.contact else "",
                    timestamp=i.created_at,
                )
            )
        for n in notes:
            content = n.content
            if len(content) > ACTIVITY_DESCRIPTION_LENGTH:
                content = content[:ACTIVITY_DESCRIPTION_LENGTH] + "..."
            items.append(
                RecentActivityItem(
                    id=n.id,
                    type=ActivityType.NOTE,
                    title="Note added",
                    description=content,
                    contact_id=n.contact_id,
                    contact_name=n.contact.full_name if n.contact else "",
                    timestamp=n.created_at,
                )
            )
        for r in reminders:
            items.append(
                RecentActivityItem(
                    id=r.id,
                    type=ActivityType.REMINDER,
                    title="Reminder completed" if r.is_completed else "Reminder created",
                    description=r.title,
                    contact_id=r.contact_id,
                    contact_name=r.contact.full_name if r.contact else "",
                    timestamp=r.created_at,
                )
            )
        items.sort(key=lambda item: item.timestamp, reverse=True)
        return items[:limit]
