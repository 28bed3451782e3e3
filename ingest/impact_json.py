"""Parsing of exported exercise and resting HR JSON payloads."""
import json
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any

from dateutil import parser as dateparser
from loguru import logger

from loadmetrics.models import ActivityRecord, HRZone


class ActivityPayloadError(ValueError):
    """Raised when an exported payload cannot be read."""


def parse_number(value: Any, default: float = 0.0) -> float:
    """Parse a numeric payload value, returning default for missing or invalid values."""
    if value is None or value == "":
        return default

    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_day(value: str) -> date:
    """Parse a 'yyyy-MM-dd' day key."""
    try:
        return dateparser.parse(value).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ActivityPayloadError(f"Invalid day key: {value!r}") from e


def parse_start_time(day: str, time_of_day: str | None) -> datetime:
    """
    Combine a day key and an 'HH:MM:SS' time into a start time.

    A missing time places the activity at midnight of that day.
    """
    if not time_of_day:
        return datetime.combine(parse_day(day), datetime.min.time())

    try:
        return dateparser.parse(f"{day} {time_of_day}")
    except (ValueError, TypeError, OverflowError) as e:
        raise ActivityPayloadError(f"Invalid start time: {day} {time_of_day!r}") from e


def parse_zone(payload: dict[str, Any]) -> HRZone:
    """Parse one heart rate zone entry."""
    return HRZone(
        name=payload.get("name") or "",
        min_hr=int(parse_number(payload.get("min"))),
        max_hr=int(parse_number(payload.get("max"))),
        minutes=int(parse_number(payload.get("minutes"))),
    )


def parse_activity(day: str, payload: dict[str, Any]) -> ActivityRecord:
    """
    Parse one exercise entry recorded on the given day.

    Expected keys (all optional):
        activityName, averageHeartRate, calories, distance,
        duration (milliseconds), steps, heartRateZones, speed,
        vo2Max.vo2Max, elevationGain, time (HH:MM:SS)
    """
    if not isinstance(payload, dict):
        raise ActivityPayloadError(f"Activity entry must be an object, got {type(payload).__name__}")

    vo2 = payload.get("vo2Max")
    vo2_max = parse_number(vo2.get("vo2Max")) if isinstance(vo2, dict) else 0.0

    try:
        return ActivityRecord(
            name=payload.get("activityName") or "",
            avg_hr=int(parse_number(payload.get("averageHeartRate"))),
            duration=timedelta(milliseconds=int(parse_number(payload.get("duration")))),
            start_time=parse_start_time(day, payload.get("time")),
            zones=tuple(parse_zone(z) for z in payload.get("heartRateZones") or []),
            distance=parse_number(payload.get("distance")),
            steps=int(parse_number(payload.get("steps"))),
            calories=int(parse_number(payload.get("calories"))),
            avg_speed=parse_number(payload.get("speed")),
            vo2_max=vo2_max,
            elevation_gain=parse_number(payload.get("elevationGain")),
        )
    except ActivityPayloadError:
        raise
    except ValueError as e:
        raise ActivityPayloadError(f"Invalid activity on {day}: {e}") from e


def _day_blocks(payload: Any) -> list[dict[str, Any]]:
    """Normalise a day response, range response, or bare list to day blocks."""
    if isinstance(payload, dict) and "data" in payload and "date" not in payload:
        payload = payload["data"]

    if isinstance(payload, dict):
        # Single-day response; an empty object means no data
        return [payload] if payload else []

    if isinstance(payload, list):
        return payload

    raise ActivityPayloadError(f"Unexpected payload type: {type(payload).__name__}")


def parse_activities_by_day(payload: Any) -> dict[date, list[ActivityRecord]]:
    """
    Parse an exercise payload into activities grouped by day.

    Accepts the service's day response ({"data": {"date", "data"}}),
    range response ({"data": [{"date", "data"}, ...]}), or a bare list
    of day blocks.
    """
    activities: dict[date, list[ActivityRecord]] = {}

    for block in _day_blocks(payload):
        if not isinstance(block, dict) or "date" not in block:
            raise ActivityPayloadError("Day block must contain a 'date' key")

        day_key = block["date"]
        day = parse_day(day_key)
        day_activities = [parse_activity(day_key, entry) for entry in block.get("data") or []]
        activities.setdefault(day, []).extend(day_activities)

    return dict(sorted(activities.items()))


def parse_resting_hr(payload: Any) -> float:
    """Resting HR value from a {"data": {"value": ...}} response (0 if absent)."""
    if not isinstance(payload, dict):
        return 0.0
    data = payload.get("data")
    if not isinstance(data, dict):
        return 0.0
    return parse_number(data.get("value"))


def load_json(path: Path) -> Any:
    """Read a JSON export from disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ActivityPayloadError(f"Invalid JSON in {path}: {e}") from e


class JsonActivitySource:
    """Activity source backed by an exported exercise JSON file."""

    def __init__(self, activities_by_day: dict[date, list[ActivityRecord]]):
        self._by_day = activities_by_day

    @classmethod
    def from_file(cls, path: Path) -> "JsonActivitySource":
        source = cls(parse_activities_by_day(load_json(path)))
        logger.info(f"Loaded {source.activity_count} activities over {len(source._by_day)} days from {path}")
        return source

    @property
    def activity_count(self) -> int:
        return sum(len(acts) for acts in self._by_day.values())

    def activities_for_day(self, day: date) -> list[ActivityRecord]:
        """Activities recorded on a day (empty list for rest days)."""
        return list(self._by_day.get(day, []))

    def activities_by_day(self, start: date, end: date) -> dict[date, list[ActivityRecord]]:
        """Activities grouped by day for start..end inclusive, skipping empty days."""
        return {
            day: list(acts)
            for day, acts in self._by_day.items()
            if start <= day <= end and acts
        }
