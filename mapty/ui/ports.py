"""Collaborators the workout controller talks to.

The controller never touches NiceGUI directly. It receives these ports at
construction, which keeps it testable with plain fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from mapty.ui.rendering import MarkerPopup, WorkoutEntry
from mapty.workout.model import Coordinate
from mapty.workout.validation import WorkoutFormData


class Geolocator(Protocol):
    def get_current_position(
        self,
        on_success: Callable[[Coordinate], None],
        on_error: Callable[[], None],
    ) -> None: ...


class MapView(Protocol):
    def add_tile_layer(self, url: str, attribution: str) -> None: ...

    def on_click(self, handler: Callable[[Coordinate], None]) -> None: ...

    def add_marker(self, coord: Coordinate, popup: MarkerPopup) -> None: ...

    def set_view(self, coord: Coordinate, zoom: int) -> None: ...


class MapFactory(Protocol):
    def create_view(self, center: Coordinate, zoom: int) -> MapView: ...


class WorkoutForm(Protocol):
    def read(self) -> WorkoutFormData: ...

    def show(self) -> None: ...

    def focus_distance(self) -> None: ...

    def hide(self) -> None: ...

    def clear(self) -> None: ...

    def toggle_metric_field(self) -> None: ...

    def on_submit(self, handler: Callable[[], None]) -> None: ...

    def on_type_change(self, handler: Callable[[], None]) -> None: ...


class WorkoutList(Protocol):
    def add_entry(self, entry: WorkoutEntry) -> None: ...

    def on_entry_click(self, handler: Callable[[int | None], None]) -> None: ...


class Alerts(Protocol):
    def alert(self, message: str) -> None: ...


@dataclass(frozen=True)
class UIPorts:
    geolocator: Geolocator
    map_factory: MapFactory
    form: WorkoutForm
    workout_list: WorkoutList
    alerts: Alerts
