"""Geolocation collaborators: the browser API and a fixed debug position."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from nicegui import Client, background_tasks

from mapty.workout.model import Coordinate

logger = logging.getLogger(__name__)

_POSITION_JS = """
new Promise((resolve) => {
  if (!navigator.geolocation) {
    resolve(null);
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (position) => resolve({
      latitude: position.coords.latitude,
      longitude: position.coords.longitude,
    }),
    () => resolve(null),
    { timeout: %d },
  );
})
"""


def coordinate_from_position(payload: Any) -> Coordinate:
    if not isinstance(payload, dict):
        raise ValueError("Position payload must be an object")
    try:
        latitude = float(payload["latitude"])
        longitude = float(payload["longitude"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid position payload: {payload!r}") from exc
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ValueError(f"Invalid position payload: {payload!r}")
    return (latitude, longitude)


class BrowserGeolocator:
    """Asks the connected browser for its position, once per call."""

    def __init__(
        self,
        client: Client,
        timeout_sec: float = 10.0,
        prompt_wait_sec: float = 600.0,
    ) -> None:
        self._client = client
        # Browser-side limit, which only starts once the permission prompt is answered.
        self._timeout_sec = timeout_sec
        self._prompt_wait_sec = prompt_wait_sec

    def get_current_position(
        self,
        on_success: Callable[[Coordinate], None],
        on_error: Callable[[], None],
    ) -> None:
        background_tasks.create(
            self._locate(on_success, on_error), name="browser-geolocation"
        )

    async def _locate(
        self,
        on_success: Callable[[Coordinate], None],
        on_error: Callable[[], None],
    ) -> None:
        try:
            await self._client.connected(timeout=self._timeout_sec)
            payload = await self._client.run_javascript(
                _POSITION_JS % int(self._timeout_sec * 1000),
                timeout=self._prompt_wait_sec + self._timeout_sec,
            )
            coord = coordinate_from_position(payload)
        except (TimeoutError, ValueError) as exc:
            logger.warning("Browser geolocation failed: %s", exc)
            with self._client:
                on_error()
            return
        with self._client:
            on_success(coord)


class FixedGeolocator:
    """Answers immediately with a configured position, or fails when it has none."""

    def __init__(self, coord: Coordinate | None) -> None:
        self._coord = coord

    def get_current_position(
        self,
        on_success: Callable[[Coordinate], None],
        on_error: Callable[[], None],
    ) -> None:
        if self._coord is None:
            on_error()
            return
        on_success(self._coord)
