"""Command-line entrypoint for the Mapty workout map."""

from __future__ import annotations

import argparse
import logging

from mapty.core.config import DEFAULT_TILE_URL, AppConfig
from mapty.workout.model import Coordinate

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class MuteFrameworkNoise(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return "Event listeners changed after initial definition" not in record.getMessage()


def parse_location(text: str) -> Coordinate:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("Location must be LAT,LNG")
    try:
        latitude, longitude = float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid location '{text}'") from exc
    if not -90.0 <= latitude <= 90.0 or not -180.0 <= longitude <= 180.0:
        raise argparse.ArgumentTypeError(f"Location out of range: '{text}'")
    return (latitude, longitude)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mapty: log workouts on a map")
    parser.add_argument("--host", default="127.0.0.1", help="Host bind for the web UI")
    parser.add_argument("--port", type=int, default=8088, help="Port for the web UI")
    parser.add_argument(
        "--zoom",
        type=int,
        default=AppConfig.map_zoom,
        help="Map zoom level used on load and when jumping to a workout",
    )
    parser.add_argument(
        "--tile-url",
        default=DEFAULT_TILE_URL,
        help="Leaflet tile URL template",
    )
    parser.add_argument(
        "--debug-location",
        type=parse_location,
        default=None,
        metavar="LAT,LNG",
        help="Skip browser geolocation and center the map on this position",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    logging.getLogger("nicegui").addFilter(MuteFrameworkNoise())


def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(map_zoom=args.zoom, tile_url=args.tile_url)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    from mapty.ui.web_app import run_web_ui

    return run_web_ui(
        host=args.host,
        port=args.port,
        config=config_from_args(args),
        debug_location=args.debug_location,
    )


if __name__ == "__main__":
    raise SystemExit(main())
