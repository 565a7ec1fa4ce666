"""List entry and map popup rendering for logged workouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mapty.core.config import AppConfig
from mapty.workout.model import Cycling, Running, Workout, WorkoutType

TYPE_ICONS: dict[WorkoutType, str] = {"running": "🏃‍♂️", "cycling": "🚴‍♀️"}


@dataclass(frozen=True)
class DetailRow:
    icon: str
    value: str
    unit: str


@dataclass(frozen=True)
class WorkoutEntry:
    workout_id: int
    type: WorkoutType
    title: str
    rows: tuple[DetailRow, ...]

    @property
    def css_class(self) -> str:
        return f"workout workout--{self.type}"


@dataclass(frozen=True)
class MarkerPopup:
    content: str
    options: dict[str, Any]


def _fmt_value(value: float) -> str:
    return f"{value:g}"


def _fmt_metric(value: float) -> str:
    return f"{value:.1f}"


def render_workout_entry(workout: Workout) -> WorkoutEntry:
    rows = [
        DetailRow(TYPE_ICONS[workout.type], _fmt_value(workout.distance), "km"),
        DetailRow("⏱", _fmt_value(workout.duration), "min"),
    ]
    if isinstance(workout, Running):
        rows.append(DetailRow("⚡️", _fmt_metric(workout.pace), "min/km"))
        rows.append(DetailRow("🦶🏼", _fmt_value(workout.cadence), "spm"))
    elif isinstance(workout, Cycling):
        # speed shares the pace formula, hence the unit
        rows.append(DetailRow("⚡️", _fmt_metric(workout.speed), "min/km"))
        rows.append(DetailRow("⛰", _fmt_value(workout.elevation_gain), "m"))
    else:
        raise TypeError(f"Unsupported workout type: {type(workout).__name__}")

    return WorkoutEntry(
        workout_id=workout.id,
        type=workout.type,
        title=workout.description,
        rows=tuple(rows),
    )


def build_marker_popup(workout: Workout, config: AppConfig | None = None) -> MarkerPopup:
    cfg = config or AppConfig()
    return MarkerPopup(
        content=workout.description,
        options={
            "maxWidth": cfg.popup_max_width,
            "maxHeight": cfg.popup_max_height,
            "autoClose": False,
            "closeOnClick": False,
            "className": f"{workout.type}-popup",
        },
    )
