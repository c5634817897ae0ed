"""Shape records and area calculation.

Shapes are tagged by a `shape` discriminator so that plain mappings (JSON,
YAML, CLI input) can be turned into typed records with `shape_from_mapping`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Union

from snippetkit.core.errors import ShapeError, UnknownShapeError


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float
    shape: Literal["circle"] = field(default="circle", init=False)


@dataclass(frozen=True, slots=True)
class Rectangle:
    width: float
    height: float
    shape: Literal["rectangle"] = field(default="rectangle", init=False)


Shape = Union[Circle, Rectangle]

DEFAULT_CIRCLE_DECIMALS = 2


def calculate_shape_area(shape: Shape, *, decimals: int = DEFAULT_CIRCLE_DECIMALS) -> float:
    """Area of `shape`.

    Circle areas are rounded to `decimals` places; rectangle areas are exact.

    Raises:
        UnknownShapeError: If `shape` carries an unrecognized discriminator.
    """

    kind = getattr(shape, "shape", None)
    if kind == "circle":
        return round(math.pi * shape.radius * shape.radius, decimals)  # type: ignore[union-attr]
    if kind == "rectangle":
        return shape.width * shape.height  # type: ignore[union-attr]
    raise UnknownShapeError(kind)


def _require_number(data: Mapping[str, Any], key: str) -> float:
    if key not in data:
        raise ShapeError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeError(f"field {key!r} must be a number, got {type(value).__name__}")
    return value


def shape_from_mapping(data: Mapping[str, Any]) -> Shape:
    """Build a shape from e.g. `{"shape": "circle", "radius": 2}`."""

    kind = data.get("shape")
    if kind == "circle":
        return Circle(radius=_require_number(data, "radius"))
    if kind == "rectangle":
        return Rectangle(
            width=_require_number(data, "width"),
            height=_require_number(data, "height"),
        )
    raise UnknownShapeError(kind)
