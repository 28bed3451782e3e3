"""User profile construction from stored settings."""

from datetime import date, datetime, timedelta
from typing import Any

from dateutil import parser as dateparser

from loadmetrics.config import DEFAULT_MESOCYCLE_LENGTH, MAX_HR_AGE_BASE
from loadmetrics.models import Sex, UserProfile


def estimate_max_hr(age: int) -> int:
    """Estimate max HR from age.

    Uses the standard 220 - age estimation.
    """
    return MAX_HR_AGE_BASE - age


def compute_age(birth_date: date | None, today: date) -> int:
    """Age in whole years on the given day (0 if birth date is unknown)."""
    if birth_date is None:
        return 0

    years = today.year - birth_date.year
    # Birthday not reached yet this year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return max(years, 0)


def mesocycle_end_date(start: date, length: int) -> date:
    """Last day of a mesocycle of the given length (start counts as day 1)."""
    return start + timedelta(days=length - 1)


def day_index(start: date, today: date) -> int:
    """1-based index of today within the mesocycle (1 on or before the start)."""
    return max((today - start).days + 1, 1)


def series_end_date(start: date, length: int, today: date) -> date:
    """Last day to compute: yesterday, or the mesocycle end if it has passed.

    Today's data is still incomplete, so it is left out.
    """
    return min(today - timedelta(days=1), mesocycle_end_date(start, length))


def mesocycle_state(start: date | None, length: int, today: date) -> str:
    """Where today falls relative to the mesocycle.

    Returns one of 'future' (starts after today), 'starts_today',
    'ended' (last day is before yesterday) or 'active'.
    """
    if start is None:
        return "active"
    if start > today:
        return "future"
    if start == today:
        return "starts_today"
    if mesocycle_end_date(start, length) < today - timedelta(days=1):
        return "ended"
    return "active"


def _parse_day(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return dateparser.parse(str(value)).date()


def build_profile(
    settings: dict[str, Any],
    resting_hr: float,
    today: date,
) -> UserProfile:
    """Build a UserProfile from stored user settings.

    Settings keys (all optional):
        - gender: 'male' or 'female' (default male)
        - birthDate: yyyy-MM-dd
        - mesocycleLength: days (default 42)
        - mesocycleStart: yyyy-MM-dd
        - maxHR: user-specified max HR, takes precedence over the age estimate

    Args:
        settings: Stored user settings
        resting_hr: Resting heart rate reading to score against
        today: Reference day for age and day index

    Returns:
        UserProfile ready for the engine
    """
    birth_date = _parse_day(settings.get("birthDate"))
    age = compute_age(birth_date, today)

    # User values take precedence
    max_hr = settings.get("maxHR") or estimate_max_hr(age)

    length = settings.get("mesocycleLength") or DEFAULT_MESOCYCLE_LENGTH
    start = _parse_day(settings.get("mesocycleStart"))

    return UserProfile(
        sex=Sex.parse(settings.get("gender")),
        age=age,
        resting_hr=resting_hr,
        max_hr=max_hr,
        mesocycle_length=int(length),
        day_index=day_index(start, today) if start else 1,
        mesocycle_start=start,
    )
