"""Compute training load (TRIMP, ACL, CTL, TSB) for the current mesocycle.

Usage:
    python -m scripts.compute_load --activities exercise.json --profile settings.json --resting-hr 58
    python -m scripts.compute_load ... --simulate planned.json   # What-if for today
    python -m scripts.compute_load ... --quiet                   # Only print the summary
"""

import argparse
import sys
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dateutil import parser as dateparser

from ingest.impact_json import (
    ActivityPayloadError,
    JsonActivitySource,
    load_json,
    parse_activities_by_day,
    parse_resting_hr,
)
from loadmetrics.errors import LoadComputationError
from loadmetrics.models import DailyScore
from loadmetrics.profile import build_profile, mesocycle_state, series_end_date
from loadmetrics.simulation import project_score
from loadmetrics.training_load import compute_series, get_current_form, series_to_rows


def parse_date_arg(value: str) -> date:
    try:
        return dateparser.parse(value).date()
    except (ValueError, OverflowError) as e:
        raise argparse.ArgumentTypeError(f"Invalid date: {value}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute training load (TRIMP, ACL/CTL/TSB) from exported activity data"
    )
    parser.add_argument(
        "--activities",
        type=Path,
        required=True,
        help="Path to the exercise JSON export",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        required=True,
        help="Path to the user settings JSON (gender, birthDate, mesocycleLength, mesocycleStart)",
    )
    resting = parser.add_mutually_exclusive_group(required=True)
    resting.add_argument(
        "--resting-hr",
        type=float,
        help="Resting heart rate in bpm",
    )
    resting.add_argument(
        "--resting-hr-file",
        type=Path,
        help="Path to a resting heart rate JSON response",
    )
    parser.add_argument(
        "--today",
        type=parse_date_arg,
        default=None,
        help="Reference day (default: today)",
    )
    parser.add_argument(
        "--simulate",
        type=Path,
        help="Exercise JSON with planned activities to project onto the simulated day",
    )
    parser.add_argument(
        "--sim-date",
        type=parse_date_arg,
        default=None,
        help="Day to simulate (default: today)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress the per-day table",
    )
    return parser


def print_simulated(score: DailyScore) -> None:
    print()
    print(f"Simulated {score.date}:")
    for name, value in score.as_dict().items():
        print(f"  {name}: {value:.1f}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    for path in (args.activities, args.profile, args.resting_hr_file, args.simulate):
        if path is not None and not path.exists():
            print(f"Error: file not found: {path}", file=sys.stderr)
            return 1

    today = args.today or date.today()

    try:
        settings = load_json(args.profile)
        if args.resting_hr_file is not None:
            resting_hr = parse_resting_hr(load_json(args.resting_hr_file))
        else:
            resting_hr = args.resting_hr

        profile = build_profile(settings, resting_hr=resting_hr, today=today)
        start = profile.mesocycle_start or today - timedelta(days=30)
        end = series_end_date(start, profile.mesocycle_length, today)
        state = mesocycle_state(profile.mesocycle_start, profile.mesocycle_length, today)

        if state == "future":
            print(f"Your training mesocycle will start on {start:%d/%m}")
            return 0

        if state == "ended" and args.simulate is not None:
            print(f"Your mesocycle ended on {end:%d/%m}!", file=sys.stderr)
            return 1

        sim_activities = None
        if args.simulate is not None:
            planned = parse_activities_by_day(load_json(args.simulate))
            sim_activities = [a for acts in planned.values() for a in acts]

        if state == "starts_today":
            # No history yet: the simulated first day is the cold start itself
            print("Your training mesocycle starts today!")
            if sim_activities is not None:
                first_day = compute_series(today, today, {today: sim_activities}, profile)
                print_simulated(first_day[today])
            return 0

        source = JsonActivitySource.from_file(args.activities)
        series = compute_series(start, end, source.activities_by_day(start, end), profile)

        projected = None
        if sim_activities is not None:
            sim_date = args.sim_date or today
            projected = project_score(sim_date, sim_activities, series, profile)

    except (ActivityPayloadError, LoadComputationError) as e:
        print(f"Error computing training load: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"{'Date':<12}{'TRIMP':>8}{'ACL':>8}{'CTL':>8}{'TSB':>8}")
        for row in series_to_rows(series):
            print(f"{row['date']:<12}{row['trimp']:>8.1f}{row['acl']:>8.1f}{row['ctl']:>8.1f}{row['tsb']:>8.1f}")

    print()
    print("=" * 50)
    print("Training Load Summary")
    print("=" * 50)
    print(f"Mesocycle: {start} to {end} (day {profile.day_index}, {len(series)} days computed)")
    print(f"Max HR: {profile.max_hr}, Resting HR: {profile.resting_hr}")

    form = get_current_form(series)
    print()
    print("Current Training Status:")
    print(f"  CTL (Fitness): {form['ctl']:.1f}")
    print(f"  ACL (Fatigue): {form['acl']:.1f}")
    print(f"  TSB (Form): {form['tsb']:.1f}")
    print(f"  Status: {form['status']}")
    print(f"  {form['description']}")

    if projected is not None:
        print_simulated(projected)

    return 0


if __name__ == "__main__":
    sys.exit(main())
