"""Event-driven controller behind the workout map page."""

from __future__ import annotations

import logging

from mapty.core.config import AppConfig
from mapty.core.state import ControllerState
from mapty.ui.ports import UIPorts
from mapty.ui.rendering import build_marker_popup, render_workout_entry
from mapty.workout.model import Coordinate, Workout
from mapty.workout.validation import WorkoutInputError, build_workout

logger = logging.getLogger(__name__)

LOCATION_ERROR_MESSAGE = "Could not get your position"


class WorkoutController:
    def __init__(self, ports: UIPorts, config: AppConfig | None = None) -> None:
        self._ports = ports
        self._config = config or AppConfig()
        self._state = ControllerState()

        ports.form.on_type_change(self.toggle_metric_field)
        ports.form.on_submit(self.submit_workout)
        ports.workout_list.on_entry_click(self.move_to_workout)

        self._ports.geolocator.get_current_position(self._load_map, self._on_location_error)

    def _load_map(self, coord: Coordinate) -> None:
        latitude, longitude = coord
        logger.info("Located user at https://www.google.pt/maps/@%s,%s", latitude, longitude)

        view = self._ports.map_factory.create_view(coord, self._config.map_zoom)
        view.add_tile_layer(self._config.tile_url, self._config.tile_attribution)
        view.on_click(self.show_form)
        self._state.map_view = view

    def _on_location_error(self) -> None:
        self._state.location_failed = True
        logger.warning("Geolocation unavailable, map not loaded")
        self._ports.alerts.alert(LOCATION_ERROR_MESSAGE)

    def show_form(self, coord: Coordinate) -> None:
        self._state.pending_coord = coord
        self._ports.form.show()
        self._ports.form.focus_distance()

    def toggle_metric_field(self) -> None:
        self._ports.form.toggle_metric_field()

    def submit_workout(self) -> Workout | None:
        view = self._state.map_view
        coord = self._state.pending_coord
        if view is None or coord is None:
            logger.debug("Submit ignored: no map click pending")
            return None

        form_data = self._ports.form.read()
        try:
            workout = build_workout(form_data, coord)
        except WorkoutInputError as exc:
            logger.warning("Rejected workout form (%s): %s", exc.field_name, exc.message)
            self._ports.alerts.alert(exc.message)
            return None

        self._state.workouts.append(workout)
        logger.info("Logged %s workout %d at %s", workout.type, workout.id, workout.coord)

        view.add_marker(workout.coord, build_marker_popup(workout, self._config))
        self._ports.workout_list.add_entry(render_workout_entry(workout))

        self._ports.form.clear()
        self._ports.form.hide()
        return workout

    def move_to_workout(self, workout_id: int | None) -> None:
        if workout_id is None:
            return
        view = self._state.map_view
        if view is None:
            return

        workout = next((w for w in self._state.workouts if w.id == workout_id), None)
        if workout is None:
            logger.debug("No workout with id %s", workout_id)
            return
        view.set_view(workout.coord, self._config.map_zoom)

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return tuple(self._state.workouts)

    @property
    def pending_coord(self) -> Coordinate | None:
        return self._state.pending_coord

    @property
    def map_ready(self) -> bool:
        return self._state.map_view is not None

    @property
    def location_failed(self) -> bool:
        return self._state.location_failed
