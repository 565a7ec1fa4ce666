from __future__ import annotations

import math
from datetime import datetime

import pytest

from mapty.workout.model import Cycling, Running
from mapty.workout.validation import (
    INVALID_NUMBER_MESSAGE,
    WorkoutFormData,
    WorkoutInputError,
    build_workout,
    coerce_number,
    parse_workout_type,
    validate_inputs,
)


def test_coerce_number_mirrors_browser_coercion() -> None:
    assert coerce_number(None) == 0.0
    assert coerce_number("") == 0.0
    assert coerce_number("  ") == 0.0
    assert coerce_number("5.5") == 5.5
    assert coerce_number(7) == 7.0
    assert math.isnan(coerce_number("abc"))
    assert math.isnan(coerce_number(True))
    assert math.isinf(coerce_number("inf"))
    assert coerce_number(10**400) == math.inf
    assert coerce_number(-(10**400)) == -math.inf


def test_validate_inputs_names_first_bad_field() -> None:
    validate_inputs(distance=1.0, duration=2.0)

    with pytest.raises(WorkoutInputError) as excinfo:
        validate_inputs(distance=1.0, duration=-2.0, cadence=0.0)

    assert excinfo.value.field_name == "duration"
    assert excinfo.value.message == INVALID_NUMBER_MESSAGE


def test_parse_workout_type() -> None:
    assert parse_workout_type("running") is Running
    assert parse_workout_type("Cycling") is Cycling

    with pytest.raises(WorkoutInputError) as excinfo:
        parse_workout_type("swimming")
    assert excinfo.value.field_name == "type"

    with pytest.raises(WorkoutInputError):
        parse_workout_type(None)


def test_build_running_workout_from_form() -> None:
    form = WorkoutFormData(type="running", distance="5", duration=30, cadence=150)

    workout = build_workout(form, (10.0, 20.0), now=datetime(2026, 10, 19))

    assert isinstance(workout, Running)
    assert workout.pace == 6
    assert workout.description == "Running on 19 October"


def test_build_cycling_ignores_hidden_cadence_field() -> None:
    form = WorkoutFormData(
        type="cycling",
        distance=10,
        duration=40,
        cadence=None,
        elevation_gain=200,
    )

    workout = build_workout(form, (1.0, 2.0))

    assert isinstance(workout, Cycling)
    assert workout.speed == 4
    assert workout.elevation_gain == 200


@pytest.mark.parametrize(
    "form",
    [
        WorkoutFormData(type="running", distance=-1, duration=30, cadence=150),
        WorkoutFormData(type="running", distance=5, duration=0, cadence=150),
        WorkoutFormData(type="running", distance=5, duration=30, cadence=None),
        WorkoutFormData(type="running", distance="five", duration=30, cadence=150),
        WorkoutFormData(type="running", distance=10**400, duration=30, cadence=150),
        WorkoutFormData(type="cycling", distance=5, duration=30, elevation_gain=float("inf")),
        WorkoutFormData(type="cycling", distance=5, duration=30, elevation_gain=-20),
    ],
)
def test_build_workout_rejects_invalid_numbers(form: WorkoutFormData) -> None:
    with pytest.raises(WorkoutInputError):
        build_workout(form, (0.0, 0.0))
