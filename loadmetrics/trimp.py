"""Training Impulse (TRIMP) calculation."""

import math

from loguru import logger

from loadmetrics.config import TRIMP_FACTOR_MALE, TRIMP_INTENSITY_WEIGHT
from loadmetrics.models import ActivityRecord, UserProfile


def hr_reserve_ratio(avg_hr: float, resting_hr: float, max_hr: float) -> float:
    """Fraction of heart rate reserve used, clamped to [0, 1].

    Returns 0 when the reserve is undefined (max_hr <= resting_hr).
    """
    if max_hr <= resting_hr:
        return 0.0

    ratio = (avg_hr - resting_hr) / (max_hr - resting_hr)
    return max(0.0, min(1.0, ratio))


def compute_trimp(
    avg_hr: float,
    resting_hr: float,
    max_hr: float,
    duration_minutes: float,
    sex_factor: float = TRIMP_FACTOR_MALE,
) -> float:
    """Compute TRIMP (Training Impulse) from average heart rate.

    Uses Bannister's TRIMP formula:
    TRIMP = duration × HRr × 0.64 × e^(sex_factor × HRr)

    Where HRr = (HR - resting) / (max - resting) is the heart rate reserve fraction.

    Args:
        avg_hr: Average heart rate over the session (0 means unknown)
        resting_hr: Resting heart rate
        max_hr: Maximum heart rate
        duration_minutes: Session duration in minutes
        sex_factor: Exponential weighting (1.92 male, 1.67 female)

    Returns:
        TRIMP value (never negative)
    """
    if duration_minutes <= 0 or avg_hr <= 0:
        return 0.0

    if max_hr <= resting_hr:
        logger.debug(f"Max HR {max_hr} does not exceed resting HR {resting_hr}; TRIMP treated as 0")
        return 0.0

    hr_reserve = hr_reserve_ratio(avg_hr, resting_hr, max_hr)
    return duration_minutes * hr_reserve * TRIMP_INTENSITY_WEIGHT * math.exp(sex_factor * hr_reserve)


def score_activity(activity: ActivityRecord, profile: UserProfile) -> float:
    """TRIMP for a single activity, personalised by the user's profile."""
    return compute_trimp(
        avg_hr=activity.avg_hr,
        resting_hr=profile.resting_hr,
        max_hr=profile.max_hr,
        duration_minutes=activity.duration_minutes,
        sex_factor=profile.sex.trimp_factor,
    )


def warn_on_degenerate_profile(profile: UserProfile) -> None:
    """Log once per computation when the profile makes every TRIMP 0."""
    if profile.max_hr <= profile.resting_hr:
        logger.warning(
            f"Max HR {profile.max_hr} does not exceed resting HR {profile.resting_hr}; "
            "all TRIMP values will be 0"
        )
