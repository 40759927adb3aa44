"""Dashboard statistics API schemas."""

from datetime import datetime

from pydantic import Field

from crm.domain.enums import ActivityType, InteractionType
from crm.schemas.common import CamelModel


class DashboardStatsResponse(CamelModel):
    total_contacts: int
    contacts_this_month: int
    contacts_last_month: int
    total_interactions: int
    interactions_this_week: int = Field(..., description="Since Sunday 00:00 UTC")
    interactions_this_month: int
    pending_reminders: int
    overdue_reminders: int


class ContactGrowthResponse(CamelModel):
    month: str = Field(..., description="YYYY-MM")
    count: int
    cumulative: int


class InteractionBreakdownResponse(CamelModel):
    type: InteractionType
    count: int
    label: str


class RecentActivityResponse(CamelModel):
    id: str
    type: ActivityType
    title: str
    description: str
    contact_id: str
    contact_name: str
    timestamp: datetime
