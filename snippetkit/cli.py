from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Sequence

from snippetkit.cars import Car
from snippetkit.config import AppConfig, ConfigError, load_config, resolve_profile_configs
from snippetkit.config.model import LOG_LEVELS
from snippetkit.core.clock import monotonic_ms
from snippetkit.core.errors import SnippetError
from snippetkit.observability.logging import configure_logging
from snippetkit.profiles import Profile, update_profile
from snippetkit.sequences import dedup_sort
from snippetkit.shapes import Circle, Rectangle, calculate_shape_area


logger = logging.getLogger(__name__)

_SECRET_MARKERS = ("api_key", "token", "secret", "password")


def _redact_secrets(obj: Any) -> Any:
    """Redact secret-looking keys before a config dump reaches stdout."""

    if isinstance(obj, dict):
        out = {}
        for k, v in obj.items():
            if isinstance(k, str) and any(p in k.lower() for p in _SECRET_MARKERS):
                out[k] = "<redacted>"
            else:
                out[k] = _redact_secrets(v)
        return out
    if isinstance(obj, list):
        return [_redact_secrets(x) for x in obj]
    return obj


def _number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"not a finite number: {text!r}")
    return value


def _json_object(text: str) -> dict[str, Any]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}") from None
    if not isinstance(value, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippetkit",
        description="Small pure helpers: dedup-sort, shape areas, profile updates, car ages",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING); overrides logging.level from config",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML config file (skips profile resolution)",
    )
    group.add_argument(
        "--profile",
        choices=["app", "dev"],
        default="app",
        help="Config profile under ./configs (app loads app.yaml; dev overlays dev.yaml)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    dedup_p = sub.add_parser("dedup-sort", help="Remove duplicate numbers and sort ascending")
    dedup_p.add_argument("values", nargs="*", type=_number, metavar="N")

    area_p = sub.add_parser("shape-area", help="Area of a circle or rectangle")
    shapes = area_p.add_subparsers(dest="shape", required=True)
    circle_p = shapes.add_parser("circle")
    circle_p.add_argument("--radius", type=_number, required=True)
    rect_p = shapes.add_parser("rectangle")
    rect_p.add_argument("--width", type=_number, required=True)
    rect_p.add_argument("--height", type=_number, required=True)

    car_p = sub.add_parser("car-age", help="Age of a car relative to the current year")
    car_p.add_argument("--make", required=True)
    car_p.add_argument("--model", required=True)
    car_p.add_argument("--year", type=int, required=True)
    car_p.add_argument(
        "--current-year",
        type=int,
        default=None,
        help="Pin the current year (defaults to cars.current_year, then the wall clock)",
    )

    profile_p = sub.add_parser("update-profile", help="Merge partial updates into a profile")
    profile_p.add_argument("--profile", dest="profile_json", type=_json_object, required=True)
    profile_p.add_argument("--updates", type=_json_object, default={})

    sub.add_parser(
        "print-config",
        help="Print the effective config (files, defaults and --log-level applied)",
    )

    return parser


def _resolve_config_paths(ns: argparse.Namespace) -> list[Path]:
    if ns.config is not None:
        return [ns.config]
    configs_dir = Path.cwd() / "configs"
    if not configs_dir.is_dir():
        return []
    return resolve_profile_configs(profile=ns.profile, configs_dir=configs_dir)


def _run_command(ns: argparse.Namespace, cfg: AppConfig, raw: dict[str, Any]) -> str:
    if ns.command == "dedup-sort":
        return json.dumps(dedup_sort(ns.values))

    if ns.command == "shape-area":
        if ns.shape == "circle":
            shape = Circle(radius=ns.radius)
        else:
            shape = Rectangle(width=ns.width, height=ns.height)
        return str(calculate_shape_area(shape, decimals=cfg.shapes.circle_decimals))

    if ns.command == "car-age":
        car = Car(make=ns.make, model=ns.model, year=ns.year)
        current_year = ns.current_year if ns.current_year is not None else cfg.cars.current_year
        return car.describe_age(current_year)

    if ns.command == "update-profile":
        profile = Profile.from_mapping(ns.profile_json)
        return json.dumps(update_profile(profile, ns.updates).to_dict(), ensure_ascii=False)

    if ns.command == "print-config":
        effective = {**raw, **asdict(cfg)}
        return json.dumps(_redact_secrets(effective), ensure_ascii=False, indent=2)

    raise AssertionError(f"unhandled command: {ns.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint referenced by pyproject.toml."""

    parser = _build_parser()

    try:
        ns = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as e:
        # argparse has already printed help/usage to stdout/stderr.
        code = e.code
        return int(code) if isinstance(code, int) else 1

    configure_logging(level=ns.log_level or "INFO")

    try:
        config_paths = _resolve_config_paths(ns)
        raw = load_config(config_paths) if config_paths else {}
        cfg = AppConfig.from_mapping(raw)
        if ns.log_level is not None:
            cfg = replace(cfg, logging=replace(cfg.logging, level=ns.log_level))
        configure_logging(level=cfg.logging.level, json_format=cfg.logging.json)
        logger.info("config_loaded", extra={"config_files": [str(p) for p in config_paths]})

        started = monotonic_ms()
        output = _run_command(ns, cfg, raw)
        logger.info("command_done", extra={"command": ns.command, "latency_ms": monotonic_ms() - started})

        sys.stdout.write(output)
        sys.stdout.write("\n")
        return 0

    except ConfigError as e:
        logger.error("config_error", extra={"error": str(e)})
        sys.stderr.write(f"ConfigError: {e}\n")
        return 2
    except SnippetError as e:
        logger.error("command_error", extra={"command": ns.command, "error": str(e)})
        sys.stderr.write(f"Error: {e}\n")
        return 1
    except Exception as e:  # noqa: BLE001
        logger.exception("fatal_error")
        sys.stderr.write(f"Fatal error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
