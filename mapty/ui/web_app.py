"""NiceGUI web UI for the workout map."""

from __future__ import annotations

import logging
from typing import Callable

from nicegui import Client, ui
from nicegui.events import GenericEventArguments

from mapty.core.config import AppConfig
from mapty.ui.controller import WorkoutController
from mapty.ui.geolocation import BrowserGeolocator, FixedGeolocator
from mapty.ui.ports import Geolocator, UIPorts
from mapty.ui.rendering import MarkerPopup, WorkoutEntry
from mapty.workout.model import Coordinate
from mapty.workout.validation import WorkoutFormData

logger = logging.getLogger(__name__)

PAGE_STYLE = """
<style>
  :root {
    --color-brand--1: #ffb545;
    --color-brand--2: #00c46a;
    --color-dark--1: #2d3439;
    --color-dark--2: #42484d;
    --color-light--2: #ececec;
  }
  body {
    background: var(--color-light--2);
    font-family: "Manrope", Arial, sans-serif;
  }
  .sidebar {
    background: var(--color-dark--1);
    color: var(--color-light--2);
    overflow-y: auto;
  }
  .form {
    background: var(--color-dark--2);
    color: var(--color-light--2);
    border-radius: 5px;
    transition: all 0.5s, transform 1ms;
  }
  .form.form--hidden {
    transform: translateY(-30rem);
    height: 0;
    padding: 0 2.25rem;
    margin-bottom: 0;
    opacity: 0;
  }
  .workout {
    background: var(--color-dark--2);
    color: var(--color-light--2);
    border-radius: 5px;
    cursor: pointer;
  }
  .workout--running { border-left: 5px solid var(--color-brand--2); }
  .workout--cycling { border-left: 5px solid var(--color-brand--1); }
  .workout__title { font-weight: 600; }
  .workout__unit { font-size: 0.8rem; color: #aaa; text-transform: uppercase; }
  .leaflet-popup .leaflet-popup-content-wrapper {
    background: var(--color-dark--1);
    color: var(--color-light--2);
    border-radius: 5px;
  }
  .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--color-brand--2); }
  .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--color-brand--1); }
</style>
"""


class LeafletMapView:
    def __init__(self, leaflet: ui.leaflet) -> None:
        self._map = leaflet

    def add_tile_layer(self, url: str, attribution: str) -> None:
        self._map.clear_layers()
        self._map.tile_layer(url_template=url, options={"attribution": attribution})

    def on_click(self, handler: Callable[[Coordinate], None]) -> None:
        def _on_map_click(e: GenericEventArguments) -> None:
            latlng = e.args["latlng"]
            handler((float(latlng["lat"]), float(latlng["lng"])))

        self._map.on("map-click", _on_map_click)

    def add_marker(self, coord: Coordinate, popup: MarkerPopup) -> None:
        marker = self._map.marker(latlng=coord)
        marker.run_method("bindPopup", popup.content, popup.options)
        marker.run_method("openPopup")

    def set_view(self, coord: Coordinate, zoom: int) -> None:
        self._map.run_map_method("setView", list(coord), zoom)


class LeafletMapFactory:
    def __init__(self, container: ui.element) -> None:
        self._container = container

    def create_view(self, center: Coordinate, zoom: int) -> LeafletMapView:
        with self._container:
            leaflet = ui.leaflet(center=center, zoom=zoom).classes("w-full h-full")
        return LeafletMapView(leaflet)


class NiceGUIWorkoutForm:
    def __init__(self, restore_delay_sec: float = 1.0) -> None:
        self._restore_delay_sec = restore_delay_sec
        self._restore_timer: ui.timer | None = None
        with ui.card().classes("form form--hidden w-full").mark("workout-form") as self._card:
            with ui.grid(columns=2).classes("w-full gap-2"):
                self._type = ui.select(
                    {"running": "Running", "cycling": "Cycling"},
                    value="running",
                    label="Type",
                ).mark("type")
                self._distance = ui.number("Distance (km)").mark("distance")
                self._duration = ui.number("Duration (min)").mark("duration")
                with ui.row().classes("form__row") as self._cadence_row:
                    self._cadence = ui.number("Cadence (step/min)").mark("cadence")
                with ui.row().classes("form__row") as self._elevation_row:
                    self._elevation = ui.number("Elev Gain (m)").mark("elevation")
            self._submit_btn = ui.button("OK").props("color=positive")
        self._elevation_row.set_visibility(False)

    def read(self) -> WorkoutFormData:
        return WorkoutFormData(
            type=self._type.value,
            distance=self._distance.value,
            duration=self._duration.value,
            cadence=self._cadence.value,
            elevation_gain=self._elevation.value,
        )

    def show(self) -> None:
        self._card.classes(remove="form--hidden")

    def focus_distance(self) -> None:
        self._distance.run_method("focus")

    def hide(self) -> None:
        self._card.style("display: none")
        self._card.classes(add="form--hidden")
        if self._restore_timer is not None:
            self._restore_timer.cancel()
        with self._card:
            self._restore_timer = ui.timer(
                self._restore_delay_sec, self._restore_layout, once=True
            )

    def _restore_layout(self) -> None:
        self._restore_timer = None
        self._card.style(remove="display: none")

    def clear(self) -> None:
        for field in (self._distance, self._duration, self._cadence, self._elevation):
            field.value = None

    def toggle_metric_field(self) -> None:
        self._elevation_row.set_visibility(not self._elevation_row.visible)
        self._cadence_row.set_visibility(not self._cadence_row.visible)

    def on_submit(self, handler: Callable[[], None]) -> None:
        self._submit_btn.on_click(handler)
        for field in (self._distance, self._duration, self._cadence, self._elevation):
            field.on("keydown.enter", handler)

    def on_type_change(self, handler: Callable[[], None]) -> None:
        self._type.on_value_change(handler)


class NiceGUIWorkoutList:
    def __init__(self) -> None:
        self._container = ui.column().classes("workouts w-full gap-3").mark("workouts")
        self._handler: Callable[[int | None], None] | None = None

    def on_entry_click(self, handler: Callable[[int | None], None]) -> None:
        self._handler = handler

    def add_entry(self, entry: WorkoutEntry) -> None:
        with self._container:
            with ui.card().classes(f"{entry.css_class} w-full gap-1").mark(
                f"workout-{entry.workout_id}"
            ) as card:
                ui.label(entry.title).classes("workout__title")
                with ui.row().classes("w-full gap-4"):
                    for row in entry.rows:
                        with ui.row().classes("workout__details items-baseline gap-1"):
                            ui.label(row.icon).classes("workout__icon")
                            ui.label(row.value).classes("workout__value")
                            ui.label(row.unit).classes("workout__unit")
        # Newest entry sits directly under the form.
        card.move(self._container, target_index=0)
        card.on("click", lambda workout_id=entry.workout_id: self._dispatch(workout_id))

    def _dispatch(self, workout_id: int | None) -> None:
        if self._handler is not None:
            self._handler(workout_id)


class NotifyAlerts:
    def alert(self, message: str) -> None:
        ui.notify(message, type="negative", position="top")


def build_page(
    client: Client,
    config: AppConfig,
    debug_location: Coordinate | None = None,
) -> WorkoutController:
    ui.add_head_html(PAGE_STYLE)

    with ui.row().classes("w-full h-screen no-wrap gap-0"):
        with ui.column().classes("sidebar w-[420px] h-full p-6 gap-4"):
            ui.label("MAPTY").classes("text-2xl font-bold tracking-wide")
            form = NiceGUIWorkoutForm(config.form_restore_delay_sec)
            workout_list = NiceGUIWorkoutList()
        map_container = ui.element("div").classes("grow h-full")

    geolocator: Geolocator
    if debug_location is not None:
        logger.info("Using fixed debug location %s", debug_location)
        geolocator = FixedGeolocator(debug_location)
    else:
        geolocator = BrowserGeolocator(
            client,
            timeout_sec=config.geolocation_timeout_sec,
            prompt_wait_sec=config.geolocation_prompt_wait_sec,
        )

    ports = UIPorts(
        geolocator=geolocator,
        map_factory=LeafletMapFactory(map_container),
        form=form,
        workout_list=workout_list,
        alerts=NotifyAlerts(),
    )
    return WorkoutController(ports, config)


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8088,
    config: AppConfig | None = None,
    debug_location: Coordinate | None = None,
) -> int:
    cfg = config or AppConfig()

    @ui.page("/")
    def index(client: Client) -> None:
        build_page(client, cfg, debug_location)

    ui.run(host=host, port=port, reload=False, title="Mapty")
    return 0
