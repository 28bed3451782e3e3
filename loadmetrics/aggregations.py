"""Daily TRIMP aggregation."""

from collections import defaultdict
from datetime import date
from typing import Iterable

from loadmetrics.models import ActivityRecord, UserProfile
from loadmetrics.trimp import score_activity


def daily_trimp(
    activities: Iterable[ActivityRecord],
    profile: UserProfile,
    day: date | None = None,
) -> float:
    """Get total TRIMP for a day.

    Args:
        activities: Activities recorded for the day
        profile: Profile used to score each activity
        day: If given, only activities starting on this date are counted

    Returns:
        Total TRIMP (0 if no activities)
    """
    return sum(
        (
            score_activity(activity, profile)
            for activity in activities
            if day is None or activity.day == day
        ),
        0.0,
    )


def group_by_day(activities: Iterable[ActivityRecord]) -> dict[date, list[ActivityRecord]]:
    """Bucket activities by the calendar day they started on.

    Dates are taken as-is from each start time; timezone resolution is
    the caller's job.
    """
    by_day: dict[date, list[ActivityRecord]] = defaultdict(list)
    for activity in activities:
        by_day[activity.day].append(activity)
    return dict(sorted(by_day.items()))
