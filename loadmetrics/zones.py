"""HR zone time totals from per-activity zone breakdowns."""

from collections import defaultdict
from typing import Iterable

from loadmetrics.models import ActivityRecord


def daily_zone_minutes(activities: Iterable[ActivityRecord]) -> dict[str, int]:
    """Total minutes per HR zone across a day's activities.

    Zones are keyed by name in the order they first appear. Activities
    without a zone breakdown contribute nothing.
    """
    totals: dict[str, int] = defaultdict(int)
    for activity in activities:
        for zone in activity.zones:
            totals[zone.name] += zone.minutes
    return dict(totals)


def dominant_zone(activities: Iterable[ActivityRecord]) -> str | None:
    """Name of the zone with the most minutes, or None if no zone time was recorded."""
    totals = daily_zone_minutes(activities)
    if not totals or max(totals.values()) <= 0:
        return None
    return max(totals, key=totals.get)


def zone_distribution(activities: Iterable[ActivityRecord]) -> dict[str, float]:
    """Share of zone time spent in each zone (fractions summing to 1).

    Returns:
        Dict of zone name to fraction, empty if no zone time was recorded
    """
    totals = daily_zone_minutes(activities)
    total_minutes = sum(totals.values())
    if total_minutes <= 0:
        return {}
    return {name: minutes / total_minutes for name, minutes in totals.items()}
