"""Tests for the compute_load command-line script."""

import json

import pytest

from scripts.compute_load import main

EXERCISE = {
    "data": [
        {
            "date": "2024-03-04",
            "data": [{"activityName": "Run", "averageHeartRate": 150, "duration": 3600000, "time": "07:00:00"}],
        },
        {
            "date": "2024-03-06",
            "data": [{"activityName": "Bike", "averageHeartRate": 135, "duration": 5400000, "time": "17:30:00"}],
        },
    ]
}

SETTINGS = {
    "gender": "male",
    "birthDate": "1994-01-15",
    "mesocycleLength": 42,
    "mesocycleStart": "2024-03-04",
}


@pytest.fixture
def data_files(tmp_path):
    exercise = tmp_path / "exercise.json"
    exercise.write_text(json.dumps(EXERCISE))
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps(SETTINGS))
    resting = tmp_path / "resting.json"
    resting.write_text(json.dumps({"data": {"date": "2024-03-07", "value": 60}}))
    planned = tmp_path / "planned.json"
    planned.write_text(json.dumps([{"date": "2024-03-08", "data": [EXERCISE["data"][0]["data"][0]]}]))
    return {"exercise": exercise, "settings": settings, "resting": resting, "planned": planned}


def test_prints_series_and_form(data_files, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(data_files["settings"]),
        "--resting-hr", "60",
        "--today", "2024-03-07",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "2024-03-04" in out
    assert "2024-03-06" in out
    # Today is still in progress, so the series stops at yesterday
    assert "2024-03-07" not in out
    assert "day 4, 3 days computed" in out
    assert "Status:" in out


def test_simulation(data_files, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(data_files["settings"]),
        "--resting-hr-file", str(data_files["resting"]),
        "--today", "2024-03-07",
        "--simulate", str(data_files["planned"]),
        "--quiet",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "Simulated 2024-03-07:" in out
    assert "TRIMP:" in out


def test_missing_file(data_files, tmp_path, capsys):
    code = main([
        "--activities", str(tmp_path / "missing.json"),
        "--profile", str(data_files["settings"]),
        "--resting-hr", "60",
    ])

    assert code == 1
    assert "file not found" in capsys.readouterr().err


def test_invalid_payload(data_files, tmp_path, capsys):
    broken = tmp_path / "broken.json"
    broken.write_text(json.dumps({"data": [{"data": []}]}))

    code = main([
        "--activities", str(broken),
        "--profile", str(data_files["settings"]),
        "--resting-hr", "60",
        "--today", "2024-03-07",
    ])

    assert code == 1
    assert "Error computing training load" in capsys.readouterr().err


def test_simulated_date_must_follow_history(data_files, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(data_files["settings"]),
        "--resting-hr", "60",
        "--today", "2024-03-07",
        "--simulate", str(data_files["planned"]),
        "--sim-date", "2024-03-01",
    ])

    assert code == 1
    assert "No historical score" in capsys.readouterr().err


def write_settings(tmp_path, **overrides):
    path = tmp_path / "custom_settings.json"
    path.write_text(json.dumps({**SETTINGS, **overrides}))
    return path


def test_future_mesocycle_prints_start(data_files, tmp_path, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(write_settings(tmp_path, mesocycleStart="2024-03-10")),
        "--resting-hr", "60",
        "--today", "2024-03-07",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "Your training mesocycle will start on 10/03" in out
    assert "Training Load Summary" not in out


def test_ended_mesocycle_refuses_simulation(data_files, tmp_path, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(write_settings(tmp_path, mesocycleStart="2024-01-01")),
        "--resting-hr", "60",
        "--today", "2024-06-01",
        "--simulate", str(data_files["planned"]),
    ])

    captured = capsys.readouterr()
    assert code == 1
    assert "Your mesocycle ended on 11/02!" in captured.err
    assert "Simulated" not in captured.out


def test_ended_mesocycle_still_prints_series(data_files, tmp_path, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(write_settings(tmp_path, mesocycleStart="2024-01-01")),
        "--resting-hr", "60",
        "--today", "2024-06-01",
        "--quiet",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "Mesocycle: 2024-01-01 to 2024-02-11" in out
    assert "42 days computed" in out


def test_mesocycle_starting_today_simulates_first_day(data_files, tmp_path, capsys):
    code = main([
        "--activities", str(data_files["exercise"]),
        "--profile", str(write_settings(tmp_path, mesocycleStart="2024-03-07")),
        "--resting-hr", "60",
        "--today", "2024-03-07",
        "--simulate", str(data_files["planned"]),
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "Your training mesocycle starts today!" in out
    assert "Simulated 2024-03-07:" in out
    assert "Training Load Summary" not in out
