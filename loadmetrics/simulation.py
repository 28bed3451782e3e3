"""What-if projection of one extra training day."""

from datetime import date, timedelta
from typing import Sequence

from loguru import logger

from loadmetrics.aggregations import daily_trimp
from loadmetrics.errors import EmptyHistoryError
from loadmetrics.models import ActivityRecord, DailyScore, LoadSeries, UserProfile
from loadmetrics.training_load import (
    LoadState,
    advance_state,
    chronic_time_constant,
    seed_state,
)
from loadmetrics.trimp import warn_on_degenerate_profile


def _seed_from_history(sim_date: date, history: LoadSeries) -> DailyScore:
    """Most recent historical score dated before sim_date."""
    if not history:
        raise EmptyHistoryError("Cannot project a day without historical scores")

    earlier = [day for day in history if day < sim_date]
    if not earlier:
        raise EmptyHistoryError(
            f"No historical score before {sim_date} (history starts {min(history)})"
        )

    seed_day = max(earlier)
    if seed_day != sim_date - timedelta(days=1):
        logger.warning(
            f"Projecting {sim_date} from {seed_day}; intermediate days are not decayed"
        )
    return history[seed_day]


def project_score(
    sim_date: date,
    sim_activities: Sequence[ActivityRecord],
    historical_series: LoadSeries,
    profile: UserProfile,
) -> DailyScore:
    """Project the scores sim_date would get with the given activities.

    The historical series is only read; the projected day is not added to it.

    Raises:
        EmptyHistoryError: If no historical day precedes sim_date
    """
    previous = _seed_from_history(sim_date, historical_series)

    if len(historical_series) == 1:
        # Single-day history is the mesocycle's cold start
        state = seed_state(previous.trimp)
    else:
        state = LoadState(acl=previous.acl, ctl=previous.ctl)

    warn_on_degenerate_profile(profile)
    trimp = daily_trimp(sim_activities, profile)
    state = advance_state(state, trimp, chronic_time_constant(profile))

    return DailyScore(date=sim_date, trimp=trimp, acl=state.acl, ctl=state.ctl)


def project_day(
    sim_date: date,
    sim_activities: Sequence[ActivityRecord],
    historical_series: LoadSeries,
    profile: UserProfile,
) -> dict[str, float]:
    """Simulated {TRIMP, ACL, CTL, TSB} for sim_date.

    An empty activity list is a planned rest day.
    """
    return project_score(sim_date, sim_activities, historical_series, profile).as_dict()
