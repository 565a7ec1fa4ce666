from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from mapty.workout.model import MONTHS, WORKOUT_TYPES, Cycling, Running, new_workout_id


def test_running_derives_pace_and_description() -> None:
    run = Running(
        coord=(10.0, 20.0),
        distance=5,
        duration=30,
        cadence=150,
        date=datetime(2026, 3, 14, 8, 30),
    )

    assert run.type == "running"
    assert run.pace == 6
    assert run.description == "Running on 14 March"
    assert run.coord == (10.0, 20.0)


def test_cycling_derives_speed_with_duration_over_distance() -> None:
    ride = Cycling(
        coord=(48.85, 2.35),
        distance=10,
        duration=40,
        elevation_gain=200,
        date=datetime(2026, 12, 1),
    )

    assert ride.type == "cycling"
    assert ride.speed == 4
    assert ride.description == "Cycling on 1 December"


def test_description_uses_month_table_for_every_month() -> None:
    for month in range(1, 13):
        run = Running(
            coord=(0.0, 0.0),
            distance=1,
            duration=1,
            cadence=1,
            date=datetime(2026, month, 5),
        )
        assert run.description == f"Running on 5 {MONTHS[month - 1]}"


def test_workouts_are_immutable() -> None:
    run = Running(coord=(0.0, 0.0), distance=5, duration=25, cadence=170)

    with pytest.raises(dataclasses.FrozenInstanceError):
        run.distance = 10  # type: ignore[misc]


def test_default_date_and_unique_ids() -> None:
    before = datetime.now()
    workouts = [
        Cycling(coord=(0.0, 0.0), distance=1, duration=2, elevation_gain=3) for _ in range(50)
    ]

    ids = [w.id for w in workouts]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)
    assert workouts[0].date >= before


def test_new_workout_id_is_strictly_increasing() -> None:
    first = new_workout_id()
    second = new_workout_id()
    assert second > first


def test_workout_types_registry() -> None:
    assert WORKOUT_TYPES == {"running": Running, "cycling": Cycling}
