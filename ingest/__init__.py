"""Ingestion of exported activity data."""
from .impact_json import ActivityPayloadError, JsonActivitySource, parse_activities_by_day, parse_resting_hr

__all__ = ["ActivityPayloadError", "JsonActivitySource", "parse_activities_by_day", "parse_resting_hr"]
