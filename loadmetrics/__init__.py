"""Training load metrics (TRIMP, ACL, CTL, TSB)."""

from loadmetrics.config import (
    ACUTE_TIME_CONSTANT,
    DEFAULT_MESOCYCLE_LENGTH,
    TRIMP_FACTOR_FEMALE,
    TRIMP_FACTOR_MALE,
)
from loadmetrics.errors import EmptyHistoryError, InvalidDateRangeError, LoadComputationError
from loadmetrics.models import ActivityRecord, DailyScore, HRZone, LoadSeries, Sex, UserProfile
from loadmetrics.trimp import compute_trimp, score_activity
from loadmetrics.aggregations import daily_trimp, group_by_day
from loadmetrics.training_load import compute_series, get_current_form
from loadmetrics.simulation import project_day, project_score
from loadmetrics.profile import build_profile, estimate_max_hr
from loadmetrics.zones import daily_zone_minutes, dominant_zone, zone_distribution

__all__ = [
    "ACUTE_TIME_CONSTANT",
    "DEFAULT_MESOCYCLE_LENGTH",
    "TRIMP_FACTOR_FEMALE",
    "TRIMP_FACTOR_MALE",
    "EmptyHistoryError",
    "InvalidDateRangeError",
    "LoadComputationError",
    "ActivityRecord",
    "DailyScore",
    "HRZone",
    "LoadSeries",
    "Sex",
    "UserProfile",
    "compute_trimp",
    "score_activity",
    "daily_trimp",
    "group_by_day",
    "compute_series",
    "get_current_form",
    "project_day",
    "project_score",
    "build_profile",
    "estimate_max_hr",
    "daily_zone_minutes",
    "dominant_zone",
    "zone_distribution",
]
