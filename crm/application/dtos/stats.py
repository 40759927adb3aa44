"""DTOs for dashboard statistics (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from crm.domain.enums import ActivityType, InteractionType


@dataclass(frozen=True)
class DashboardStats:
    """Headline counters for the dashboard."""

    total_contacts: int
    contacts_this_month: int
    contacts_last_month: int
    total_interactions: int
    interactions_this_week: int
    interactions_this_month: int
    pending_reminders: int
    overdue_reminders: int


@dataclass(frozen=True)
class ContactGrowthPoint:
    """Contacts created in one calendar month and the running total at its end."""

    month: str
    count: int
    cumulative: int


@dataclass(frozen=True)
class InteractionBreakdownItem:
    type: InteractionType
    count: int
    label: str


@dataclass(frozen=True)
class RecentActivityItem:
    """One entry of the merged recent-activity feed."""

    id: str
    type: ActivityType
    title: str
    description: str
    contact_id: str
    contact_name: str
    timestamp: datetime
