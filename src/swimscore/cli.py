"""
SwimScore CLI entrypoint.

Quick local scoring and debugging without the web frontend:
- `swimscore score --input conditions.json` scores a JSON payload (`-` reads stdin)
- `swimscore score --lat 21.28 --lon -157.83 --hour 14` scores a forecast hour
- `swimscore waves --lat 21.28 --lon -157.83` prints the current sea state
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from swimscore.config.settings import get_settings
from swimscore.core.cache import FileCache
from swimscore.core.env import resolve_project_path
from swimscore.core.logging import configure_logging
from swimscore.domain.errors import InvalidInputError, UpstreamError
from swimscore.domain.models import SwimInputs, SwimScoreOutput
from swimscore.ingestion.conditions import inputs_from_hourly
from swimscore.ingestion.forecast_client import ForecastClient, parse_coordinates
from swimscore.ingestion.marine_client import MarineClient
from swimscore.scoring.swim import compute_swim_score
from swimscore.scoring.validate import parse_inputs

EXIT_INVALID_INPUT = 2
EXIT_UPSTREAM_ERROR = 3


def _build_cache() -> FileCache:
    settings = get_settings()
    return FileCache(
        resolve_project_path(settings.cache.dir),
        enabled=settings.cache.enabled,
        default_ttl_seconds=settings.cache.default_ttl_seconds,
    )


def _read_payload(source: str) -> Any:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidInputError(f"Cannot read input file: {source}") from e
    try:
        return json.loads(text)
    except ValueError as e:
        raise InvalidInputError("Invalid input data") from e


def _print_output(output: SwimScoreOutput, *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(output.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
        return
    b = output.breakdown
    print(f"Swim score: {output.total_score}/100")
    print(f"  safety={b.safety} comfort={b.comfort} performance={b.performance}")
    print(f"Recommendation: {output.recommendation}")
    print(f"Best time to swim: {output.best_time_to_swim}")
    for line in output.explanation:
        print(f"  - {line}")


def _inputs_from_args(args: argparse.Namespace) -> SwimInputs:
    if args.input:
        return parse_inputs(_read_payload(args.input))
    point = parse_coordinates(args.lat, args.lon)
    payload = ForecastClient(get_settings(), _build_cache()).get_hourly(point)
    return inputs_from_hourly(payload["hourly"], int(args.hour))


def _cmd_score(args: argparse.Namespace) -> int:
    """Handle the `score` subcommand."""
    try:
        inputs = _inputs_from_args(args)
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except UpstreamError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_UPSTREAM_ERROR

    _print_output(compute_swim_score(inputs), as_json=bool(args.json))
    return 0


def _cmd_waves(args: argparse.Namespace) -> int:
    try:
        point = parse_coordinates(args.lat, args.lon)
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        result = MarineClient(get_settings(), _build_cache()).get_wave_data(point)
    except UpstreamError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_UPSTREAM_ERROR

    if args.json:
        payload = {"data": result.data.model_dump(mode="json", by_alias=True), "message": result.message}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0
    d = result.data
    print(f"{result.message} ({d.timestamp})")
    print(f"  waves: {d.wave_height} m from {d.wave_direction}° every {d.wave_period} s")
    if d.swell_height is not None:
        print(f"  swell: {d.swell_height} m from {d.swell_direction}° every {d.swell_period} s")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the SwimScore CLI."""
    parser = argparse.ArgumentParser(prog="swimscore")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score swim conditions from a JSON payload or a forecast hour.")
    source = score.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="JSON file with the twelve inputs ('-' for stdin)")
    source.add_argument("--lat", type=float, help="Latitude; requires --lon")
    score.add_argument("--lon", type=float, default=None)
    score.add_argument("--hour", type=int, default=0, help="Index into the hourly forecast (default 0)")
    score.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    score.set_defaults(func=_cmd_score)

    waves = sub.add_parser("waves", help="Current wave data (marine API or wind estimate).")
    waves.add_argument("--lat", required=True, type=float)
    waves.add_argument("--lon", required=True, type=float)
    waves.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    waves.set_defaults(func=_cmd_waves)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m swimscore.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
