"""Shared fixtures for training load tests."""

from datetime import date, datetime, timedelta

import pytest
from loguru import logger

from loadmetrics.models import ActivityRecord, HRZone, Sex, UserProfile


MESOCYCLE_START = date(2024, 3, 4)


def make_activity(
    avg_hr: float = 150,
    minutes: float = 60,
    day: date = MESOCYCLE_START,
    hour: int = 7,
    name: str = "Running",
    zones=(),
) -> ActivityRecord:
    """Build an activity starting at the given hour of day."""
    return ActivityRecord(
        name=name,
        avg_hr=avg_hr,
        duration=timedelta(minutes=minutes),
        start_time=datetime.combine(day, datetime.min.time()) + timedelta(hours=hour),
        zones=tuple(zones),
    )


@pytest.fixture
def male_profile():
    """Profile from the reference scenario: 30 y/o male, rest 60, max 190."""
    return UserProfile(
        sex=Sex.MALE,
        age=30,
        resting_hr=60,
        max_hr=190,
        mesocycle_length=42,
    )


@pytest.fixture
def female_profile():
    return UserProfile(
        sex=Sex.FEMALE,
        age=30,
        resting_hr=60,
        max_hr=190,
        mesocycle_length=42,
    )


@pytest.fixture
def reference_activity():
    """60 minutes at 150 bpm on the first mesocycle day."""
    return make_activity()


@pytest.fixture
def sample_zones():
    return [
        HRZone(name="Out of Range", min_hr=30, max_hr=98, minutes=5),
        HRZone(name="Fat Burn", min_hr=98, max_hr=137, minutes=20),
        HRZone(name="Cardio", min_hr=137, max_hr=166, minutes=30),
        HRZone(name="Peak", min_hr=166, max_hr=220, minutes=5),
    ]


@pytest.fixture
def logged_warnings():
    """Messages logged at WARNING or above while the test runs."""
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
