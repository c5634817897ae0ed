from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from snippetkit.config.errors import ConfigError
from snippetkit.shapes import DEFAULT_CIRCLE_DECIMALS


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    json: bool = True


@dataclass(frozen=True)
class ShapesConfig:
    circle_decimals: int = DEFAULT_CIRCLE_DECIMALS


@dataclass(frozen=True)
class CarsConfig:
    # None means "use the wall clock".
    current_year: int | None = None


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shapes: ShapesConfig = field(default_factory=ShapesConfig)
    cars: CarsConfig = field(default_factory=CarsConfig)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "AppConfig":
        """Build a typed config from an expanded YAML mapping.

        Unknown top-level sections are ignored; known sections are checked
        strictly and reported with their dotted path.
        """

        logging_raw = _section(raw, "logging")
        level = logging_raw.get("level", LoggingConfig.level)
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(f"must be one of {list(LOG_LEVELS)}", path="logging.level")
        json_format = logging_raw.get("json", LoggingConfig.json)
        if not isinstance(json_format, bool):
            raise ConfigError("must be a boolean", path="logging.json")

        shapes_raw = _section(raw, "shapes")
        decimals = shapes_raw.get("circle_decimals", ShapesConfig.circle_decimals)
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ConfigError("must be an integer >= 0", path="shapes.circle_decimals")

        cars_raw = _section(raw, "cars")
        year = cars_raw.get("current_year")
        if year is not None and (isinstance(year, bool) or not isinstance(year, int)):
            raise ConfigError("must be an integer or null", path="cars.current_year")

        return cls(
            logging=LoggingConfig(level=level.upper(), json=json_format),
            shapes=ShapesConfig(circle_decimals=decimals),
            cars=CarsConfig(current_year=year),
        )


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError("must be a mapping", path=key)
    return value
