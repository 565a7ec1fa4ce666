"""Workout domain models."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Literal

Coordinate = tuple[float, float]
WorkoutType = Literal["running", "cycling"]

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_last_workout_id = 0


def new_workout_id() -> int:
    """Millisecond timestamp, bumped so ids stay unique within the process."""
    global _last_workout_id
    _last_workout_id = max(int(time.time() * 1000), _last_workout_id + 1)
    return _last_workout_id


@dataclass(frozen=True, kw_only=True)
class Workout:
    type: ClassVar[WorkoutType]

    coord: Coordinate
    distance: float
    duration: float
    date: datetime = field(default_factory=datetime.now)
    id: int = field(default_factory=new_workout_id)
    description: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", self._describe())

    def _describe(self) -> str:
        return f"{self.type.capitalize()} on {self.date.day} {MONTHS[self.date.month - 1]}"


@dataclass(frozen=True, kw_only=True)
class Running(Workout):
    type: ClassVar[WorkoutType] = "running"

    cadence: float
    pace: float = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        # min/km label, computed as duration / distance
        object.__setattr__(self, "pace", self.duration / self.distance)


@dataclass(frozen=True, kw_only=True)
class Cycling(Workout):
    type: ClassVar[WorkoutType] = "cycling"

    elevation_gain: float
    speed: float = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "speed", self.duration / self.distance)


WORKOUT_TYPES: dict[str, type[Running] | type[Cycling]] = {
    Running.type: Running,
    Cycling.type: Cycling,
}
