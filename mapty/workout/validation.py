"""Workout form coercion and validation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from mapty.workout.model import WORKOUT_TYPES, Coordinate, Cycling, Running, Workout

INVALID_NUMBER_MESSAGE = "Inputs have to be positive numbers!"


class WorkoutInputError(ValueError):
    """Raised when the workout form holds unusable values."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field_name = field_name


@dataclass(frozen=True)
class WorkoutFormData:
    type: Any
    distance: Any = None
    duration: Any = None
    cadence: Any = None
    elevation_gain: Any = None


def coerce_number(value: Any) -> float:
    """Coerce a raw form value the way a browser coerces ``+input.value``."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def validate_inputs(**values: float) -> None:
    for field_name, value in values.items():
        if not math.isfinite(value) or value <= 0:
            raise WorkoutInputError(INVALID_NUMBER_MESSAGE, field_name=field_name)


def parse_workout_type(value: Any) -> type[Running] | type[Cycling]:
    workout_cls = WORKOUT_TYPES.get(str(value).strip().lower()) if value is not None else None
    if workout_cls is None:
        raise WorkoutInputError(f"Unknown workout type '{value}'", field_name="type")
    return workout_cls


def build_workout(
    form: WorkoutFormData,
    coord: Coordinate,
    *,
    now: datetime | None = None,
) -> Workout:
    workout_cls = parse_workout_type(form.type)
    distance = coerce_number(form.distance)
    duration = coerce_number(form.duration)
    extra: dict[str, Any] = {}
    if now is not None:
        extra["date"] = now

    if workout_cls is Running:
        cadence = coerce_number(form.cadence)
        validate_inputs(distance=distance, duration=duration, cadence=cadence)
        return Running(
            coord=coord,
            distance=distance,
            duration=duration,
            cadence=cadence,
            **extra,
        )

    elevation_gain = coerce_number(form.elevation_gain)
    validate_inputs(distance=distance, duration=duration, elevation_gain=elevation_gain)
    return Cycling(
        coord=coord,
        distance=distance,
        duration=duration,
        elevation_gain=elevation_gain,
        **extra,
    )
