"""Training load computation (ACL, CTL, TSB)."""

from datetime import date, timedelta
from typing import Iterator, Mapping, NamedTuple, Sequence

from loguru import logger

from loadmetrics.aggregations import daily_trimp
from loadmetrics.config import (
    ACUTE_TIME_CONSTANT,
    DEFAULT_MESOCYCLE_LENGTH,
    TSB_FORM_BANDS,
    TSB_FORM_FLOOR,
)
from loadmetrics.errors import InvalidDateRangeError
from loadmetrics.models import ActivityRecord, DailyScore, LoadSeries, UserProfile
from loadmetrics.trimp import warn_on_degenerate_profile


class LoadState(NamedTuple):
    """Running ACL/CTL accumulators carried from one day to the next."""

    acl: float
    ctl: float


def chronic_time_constant(profile: UserProfile) -> int:
    """CTL time constant: the mesocycle length, or 42 days when unset."""
    length = profile.mesocycle_length
    if not length or length < 1:
        if length is not None:
            logger.warning(f"Invalid mesocycle length {length}; using {DEFAULT_MESOCYCLE_LENGTH}")
        return DEFAULT_MESOCYCLE_LENGTH
    return length


def seed_state(trimp: float) -> LoadState:
    """Cold-start accumulators: the first day has no history to average against."""
    return LoadState(acl=trimp, ctl=trimp)


def advance_state(state: LoadState, trimp: float, tau_chronic: float) -> LoadState:
    """Move the accumulators forward one day.

    Formula: new = old + (today_trimp - old) / tau
    """
    return LoadState(
        acl=state.acl + (trimp - state.acl) / ACUTE_TIME_CONSTANT,
        ctl=state.ctl + (trimp - state.ctl) / tau_chronic,
    )


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def compute_series(
    mesocycle_start: date,
    end_date: date,
    activities_by_day: Mapping[date, Sequence[ActivityRecord]],
    profile: UserProfile,
) -> LoadSeries:
    """Compute TRIMP, ACL, CTL, TSB for every day of the mesocycle so far.

    Processes chronologically, folding the (ACL, CTL) state through each
    day. Days without an entry in activities_by_day count as rest days.

    Args:
        mesocycle_start: First day of the mesocycle
        end_date: Last day to compute (inclusive)
        activities_by_day: Activities grouped by calendar day
        profile: User profile for TRIMP personalisation and CTL window

    Returns:
        Date-ordered dict of DailyScore, one per day

    Raises:
        InvalidDateRangeError: If end_date is before mesocycle_start
    """
    if end_date < mesocycle_start:
        raise InvalidDateRangeError(mesocycle_start, end_date)

    warn_on_degenerate_profile(profile)
    tau_chronic = chronic_time_constant(profile)
    series: LoadSeries = {}
    state: LoadState | None = None

    for day in iter_days(mesocycle_start, end_date):
        trimp = daily_trimp(activities_by_day.get(day, ()), profile)

        if state is None:
            state = seed_state(trimp)
        else:
            state = advance_state(state, trimp, tau_chronic)

        series[day] = DailyScore(date=day, trimp=trimp, acl=state.acl, ctl=state.ctl)

    logger.debug(
        f"Computed {len(series)} days of training load "
        f"({mesocycle_start} to {end_date}, CTL window {tau_chronic}d)"
    )
    return series


def series_to_rows(series: LoadSeries, digits: int | None = 1) -> list[dict]:
    """Flatten a series for display or export.

    Returns:
        List of dicts with date, trimp, acl, ctl, tsb
    """
    def fmt(value: float) -> float:
        return round(value, digits) if digits is not None else value

    return [
        {
            "date": day.isoformat(),
            "trimp": fmt(score.trimp),
            "acl": fmt(score.acl),
            "ctl": fmt(score.ctl),
            "tsb": fmt(score.tsb),
        }
        for day, score in series.items()
    ]


def interpret_tsb(tsb: float) -> tuple[str, str]:
    """Map a TSB value to a (status, description) pair."""
    for lower_bound, status, description in TSB_FORM_BANDS:
        if tsb > lower_bound:
            return status, description
    return TSB_FORM_FLOOR


def get_current_form(series: LoadSeries) -> dict:
    """Get current training form status from the latest day of a series.

    Returns:
        Dict with current date, ACL, CTL, TSB and interpretation
    """
    if not series:
        return {
            "date": None,
            "acl": None,
            "ctl": None,
            "tsb": None,
            "status": "No data",
            "description": "No training load computed yet",
        }

    latest = series[max(series)]
    status, description = interpret_tsb(latest.tsb)

    return {
        "date": latest.date,
        "acl": latest.acl,
        "ctl": latest.ctl,
        "tsb": latest.tsb,
        "status": status,
        "description": description,
    }
