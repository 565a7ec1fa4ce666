"""Runtime settings for the workout map."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TILE_URL = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
DEFAULT_TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


@dataclass(frozen=True)
class AppConfig:
    map_zoom: int = 13
    tile_url: str = DEFAULT_TILE_URL
    tile_attribution: str = DEFAULT_TILE_ATTRIBUTION
    popup_max_width: int = 250
    popup_max_height: int = 200
    # Form stays display:none this long after a submit so it does not animate out.
    form_restore_delay_sec: float = 1.0
    geolocation_timeout_sec: float = 10.0
    # Upper bound on the whole browser round trip, permission prompt included.
    geolocation_prompt_wait_sec: float = 600.0
