"""DashboardStatsService: counters, monthly growth, breakdown and activity feed."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, call

import pytest

from crm.application.use_cases.stats import DashboardStatsService
from crm.domain.enums import ActivityType, InteractionType
from crm.domain.exceptions import OperationFailedException

# Saturday
NOW = datetime(2025, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def stats_repo():
    return AsyncMock()


async def test_dashboard_stats_counts_and_boundaries(stats_repo) -> None:
    stats_repo.count_contacts = AsyncMock(side_effect=[50, 5, 8])
    stats_repo.count_interactions = AsyncMock(side_effect=[200, 7, 20])
    stats_repo.count_open_reminders = AsyncMock(side_effect=[12, 3])

    stats = await DashboardStatsService(stats_repo).get_dashboard_stats(now=NOW)

    assert stats.total_contacts == 50
    assert stats.contacts_this_month == 5
    assert stats.contacts_last_month == 8
    assert stats.total_interactions == 200
    assert stats.interactions_this_week == 7
    assert stats.interactions_this_month == 20
    assert stats.pending_reminders == 12
    assert stats.overdue_reminders == 3

    month_start = datetime(2025, 3, 1, tzinfo=UTC)
    assert stats_repo.count_contacts.call_args_list == [
        call(),
        call(created_from=month_start),
        call(
            created_from=datetime(2025, 2, 1, tzinfo=UTC), created_before=month_start
        ),
    ]
    assert stats_repo.count_interactions.call_args_list == [
        call(),
        call(date_from=datetime(2025, 3, 9, tzinfo=UTC)),
        call(date_from=month_start),
    ]
    assert stats_repo.count_open_reminders.call_args_list == [
        call(),
        call(due_before=NOW),
    ]


async def test_dashboard_stats_failure_is_wrapped(stats_repo) -> None:
    stats_repo.count_contacts = AsyncMock(side_effect=RuntimeError("db down"))
    stats_repo.count_interactions = AsyncMock(return_value=0)
    stats_repo.count_open_reminders = AsyncMock(return_value=0)

    with pytest.raises(OperationFailedException) as exc_info:
        await DashboardStatsService(stats_repo).get_dashboard_stats(now=NOW)
    assert exc_info.value.error_code == "FETCH_STATS_ERROR"
    assert exc_info.value.status_code == 500


async def test_contact_growth_covers_twelve_months(stats_repo) -> None:
    stats_repo.count_contacts = AsyncMock(return_value=10)
    stats_repo.contacts_per_month = AsyncMock(
        return_value={"2024-04": 2, "2024-12": 1, "2025-03": 3}
    )

    points = await DashboardStatsService(stats_repo).get_contact_growth(now=NOW)

    assert len(points) == 12
    assert points[0].month == "2024-04"
    assert (points[0].count, points[0].cumulative) == (2, 12)
    assert points[8].month == "2024-12"
    assert points[8].cumulative == 13
    assert points[-1].month == "2025-03"
    assert (points[-1].count, points[-1].cumulative) == (3, 16)
    window_start = datetime(2024, 4, 1, tzinfo=UTC)
    stats_repo.count_contacts.assert_awaited_once_with(created_before=window_start)
    stats_repo.contacts_per_month.assert_awaited_once_with(window_start)


async def test_contact_growth_failure_code(stats_repo) -> None:
    stats_repo.count_contacts = AsyncMock(return_value=0)
    stats_repo.contacts_per_month = AsyncMock(side_effect=RuntimeError("boom"))
    with pytest.raises(OperationFailedException) as exc_info:
        await DashboardStatsService(stats_repo).get_contact_growth(now=NOW)
    assert exc_info.value.error_code == "FETCH_GROWTH_ERROR"


async def test_interaction_breakdown_lists_every_type(stats_repo) -> None:
    stats_repo.interaction_type_counts = AsyncMock(
        return_value={InteractionType.CALL: 3, InteractionType.EMAIL: 5}
    )

    items = await DashboardStatsService(stats_repo).get_interaction_breakdown()

    assert [i.type for i in items] == [
        InteractionType.EMAIL,
        InteractionType.CALL,
        InteractionType.MEETING,
        InteractionType.TEXT,
        InteractionType.COFFEE,
        InteractionType.LUNCH,
        InteractionType.EVENT,
        InteractionType.OTHER,
    ]
    assert items[0].count == 5
    assert items[0].label == "Emails"
    assert items[-1].count == 0


async def test_recent_activity_merges_newest_first(
    stats_repo, make_interaction, make_note, make_reminder
) -> None:
    stats_repo.recent_interactions = AsyncMock(
        return_value=[
            make_interaction(id="i1", subject=None, created_at=NOW - timedelta(hours=1))
        ]
    )
    stats_repo.recent_notes = AsyncMock(
        return_value=[make_note(id="n1", content="x" * 150, created_at=NOW)]
    )
    stats_repo.recent_reminders = AsyncMock(
        return_value=[
            make_reminder(
                id="r1", is_completed=True, created_at=NOW - timedelta(hours=2)
            )
        ]
    )

    items = await DashboardStatsService(stats_repo).get_recent_activity(limit=10)

    assert [i.id for i in items] == ["n1", "i1", "r1"]
    note, interaction, reminder = items
    assert note.type is ActivityType.NOTE
    assert note.title == "Note added"
    assert note.description == "x" * 100 + "..."
    assert interaction.title == "Call logged"
    assert interaction.description == "CALL with contact"
    assert interaction.contact_name == "Jane Smith"
    assert reminder.title == "Reminder completed"
    assert reminder.description == "Send proposal"


async def test_recent_activity_truncates_to_limit(
    stats_repo, make_interaction, make_note
) -> None:
    stats_repo.recent_interactions = AsyncMock(
        return_value=[
            make_interaction(id=f"i{n}", created_at=NOW - timedelta(minutes=n))
            for n in range(3)
        ]
    )
    stats_repo.recent_notes = AsyncMock(
        return_value=[make_note(id="n1", created_at=NOW + timedelta(minutes=1))]
    )
    stats_repo.recent_reminders = AsyncMock(return_value=[])

    items = await DashboardStatsService(stats_repo).get_recent_activity(limit=2)

    assert [i.id for i in items] == ["n1", "i0"]
    stats_repo.recent_notes.assert_awaited_once_with(2)
