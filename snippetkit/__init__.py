"""Small pure helpers: dedup-sort, shape areas, profile updates, car ages."""

from snippetkit.cars import Car
from snippetkit.profiles import Profile, update_profile
from snippetkit.sequences import dedup_sort
from snippetkit.shapes import Circle, Rectangle, Shape, calculate_shape_area, shape_from_mapping

__all__ = [
    "Car",
    "Circle",
    "Profile",
    "Rectangle",
    "Shape",
    "calculate_shape_area",
    "dedup_sort",
    "shape_from_mapping",
    "update_profile",
]

__version__ = "0.1.0"
