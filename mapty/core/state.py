"""Mutable state owned by the workout controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mapty.workout.model import Coordinate, Workout

if TYPE_CHECKING:
    from mapty.ui.ports import MapView


@dataclass
class ControllerState:
    workouts: list[Workout] = field(default_factory=list)
    map_view: MapView | None = None
    pending_coord: Coordinate | None = None
    location_failed: bool = False
