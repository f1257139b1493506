"""Command line departure board for simulation snapshots."""

import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from departure_board.adapters.config import AppConfig
from departure_board.adapters.formatters import DepartureFormatter
from departure_board.adapters.snapshot import SnapshotLoader
from departure_board.application.services import DepartureBoardService
from departure_board.domain.models import DepartureBoardError, DepartureType, VehicleType

logger = logging.getLogger(__name__)

VEHICLE_TYPE_NAMES = {vehicle_type.name.lower(): vehicle_type for vehicle_type in VehicleType}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="departure-board",
        description="Show the departure or arrival board of a station in a simulation snapshot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Departures from station 3
  departure-board snapshot.toml 3

  # Arrivals at a station by name, trains only
  departure-board snapshot.toml "Central" --arrivals --types train

  # Machine readable output
  departure-board snapshot.toml 3 --json

Settings can also be given as environment variables (e.g. MAX_DEPARTURES=20) or in
the [departures] and [display] tables of the snapshot.
        """,
    )
    parser.add_argument("snapshot", help="Path to the TOML snapshot")
    parser.add_argument("station", help="Station ID or name")
    parser.add_argument("--arrivals", action="store_true", help="Show arrivals instead")
    parser.add_argument(
        "--via", action="store_true", help="Include vehicles passing without stopping"
    )
    parser.add_argument("--no-pax", action="store_true", help="Hide passenger vehicles")
    parser.add_argument("--no-freight", action="store_true", help="Hide freight vehicles")
    parser.add_argument(
        "--types",
        nargs="+",
        choices=sorted(VEHICLE_TYPE_NAMES),
        default=sorted(VEHICLE_TYPE_NAMES),
        help="Vehicle types to include (default: all)",
    )
    parser.add_argument("--max-departures", type=int, help="Maximum number of entries")
    parser.add_argument(
        "--conditionals",
        type=int,
        choices=[0, 1, 2],
        help="Conditional orders: 0 give up, 1 take the branch, 2 skip it",
    )
    parser.add_argument("--show-all-stops", action="store_true", help="Show all stops")
    parser.add_argument("--merge-identical", action="store_true", help="Merge identical entries")
    parser.add_argument("--smart-terminus", action="store_true", help="Shorten termini")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _apply_overrides(config: AppConfig, args: Any) -> None:
    """Apply command line options on top of the environment and snapshot settings."""
    if args.max_departures is not None:
        config.max_departures = config.validate_non_negative(args.max_departures)
    if args.conditionals is not None:
        config.departure_conditionals = args.conditionals
    if args.show_all_stops:
        config.departure_show_all_stops = True
    if args.merge_identical:
        config.departure_merge_identical = True
    if args.smart_terminus:
        config.departure_smart_terminus = True


def run(args: Any) -> int:
    """Compute and print the board described by ``args``."""
    config = AppConfig(snapshot_file=args.snapshot)
    snapshot = SnapshotLoader.load(config)
    _apply_overrides(config, args)

    station = snapshot.stations.find_station(args.station)
    if station is None:
        print(f"Station '{args.station}' not found in snapshot", file=sys.stderr)
        return 1

    service = DepartureBoardService(
        snapshot.vehicles, snapshot.clock, config.to_departure_settings()
    )
    departure_type = DepartureType.ARRIVAL if args.arrivals else DepartureType.DEPARTURE
    departures = service.make_departure_list(
        station.id,
        {VEHICLE_TYPE_NAMES[name] for name in args.types},
        departure_type,
        show_vehicles_via=args.via,
        show_pax=not args.no_pax,
        show_freight=not args.no_freight,
    )

    formatter = DepartureFormatter(config, snapshot.stations)
    if args.json:
        output = {
            "station": {"id": station.id, "name": station.name},
            "type": departure_type.value,
            "departures": [formatter.to_dict(d) for d in departures],
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    title = "Arrivals" if args.arrivals else "Departures"
    print(f"{title} - {station.name}")
    print("=" * 60)
    if not departures:
        print(f"No {title.lower()}")
    now = snapshot.clock.now()
    for departure in departures:
        print(formatter.format_departure(departure, now))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        exit_code = run(args)
    except (DepartureBoardError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
