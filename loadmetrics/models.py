"""Data types for the training load engine."""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum

from loadmetrics.config import (
    DEFAULT_MESOCYCLE_LENGTH,
    TRIMP_FACTOR_FEMALE,
    TRIMP_FACTOR_MALE,
)


class Sex(Enum):
    """Biological sex, carrying its TRIMP weighting factor."""

    MALE = "male"
    FEMALE = "female"

    @property
    def trimp_factor(self) -> float:
        if self is Sex.FEMALE:
            return TRIMP_FACTOR_FEMALE
        return TRIMP_FACTOR_MALE

    @classmethod
    def parse(cls, value: "str | Sex | None") -> "Sex":
        """
        Parse a stored gender string.

        Accepts 'male'/'female' and their first letters in any case.
        Anything else falls back to MALE, matching the app default.
        """
        if isinstance(value, Sex):
            return value
        if value and value.strip().lower() in ("female", "f"):
            return cls.FEMALE
        return cls.MALE


@dataclass(frozen=True)
class HRZone:
    """Minutes spent in one heart rate zone during an activity."""

    name: str
    min_hr: int
    max_hr: int
    minutes: int


@dataclass(frozen=True)
class ActivityRecord:
    """One completed exercise session."""

    name: str
    avg_hr: float  # bpm, 0 when unknown
    duration: timedelta
    start_time: datetime

    # Display-only fields, not used for scoring
    zones: tuple[HRZone, ...] = field(default_factory=tuple)
    distance: float = 0.0
    steps: int = 0
    calories: int = 0
    avg_speed: float = 0.0
    vo2_max: float = 0.0
    elevation_gain: float = 0.0  # meters

    def __post_init__(self):
        if self.duration < timedelta(0):
            raise ValueError(f"Activity duration must be >= 0, got {self.duration}")
        if self.avg_hr < 0:
            raise ValueError(f"Average heart rate must be >= 0, got {self.avg_hr}")
        # Accept lists for convenience but keep the record hashable
        if not isinstance(self.zones, tuple):
            object.__setattr__(self, "zones", tuple(self.zones))

    @property
    def day(self) -> date:
        """Calendar day the activity started on."""
        return self.start_time.date()

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60


@dataclass(frozen=True)
class UserProfile:
    """Physiological parameters the scores are personalised with."""

    sex: Sex
    age: int
    resting_hr: float
    max_hr: float
    mesocycle_length: int | None = DEFAULT_MESOCYCLE_LENGTH
    day_index: int = 1
    mesocycle_start: date | None = None

    def __post_init__(self):
        if self.age < 0:
            raise ValueError(f"Age must be >= 0, got {self.age}")
        if self.day_index < 1:
            raise ValueError(f"Day index is 1-based, got {self.day_index}")


@dataclass(frozen=True)
class DailyScore:
    """Training load scores for one calendar day."""

    date: date
    trimp: float
    acl: float
    ctl: float

    @property
    def tsb(self) -> float:
        """Training Stress Balance (form = CTL - ACL)."""
        return self.ctl - self.acl

    def as_dict(self) -> dict[str, float]:
        """Scalar map keyed the way the app displays scores."""
        return {
            "TRIMP": self.trimp,
            "ACL": self.acl,
            "CTL": self.ctl,
            "TSB": self.tsb,
        }


# Ordered mapping of calendar day to its scores
LoadSeries = dict[date, DailyScore]
