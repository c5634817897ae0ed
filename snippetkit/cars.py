from __future__ import annotations

from dataclasses import dataclass

from snippetkit.core.clock import current_year as _wall_clock_year


@dataclass(frozen=True, slots=True)
class Car:
    make: str
    model: str
    year: int

    def age(self, current_year: int | None = None) -> int:
        """Years since the model year; negative for future model years."""

        if current_year is None:
            current_year = _wall_clock_year()
        return current_year - self.year

    def describe_age(self, current_year: int | None = None) -> str:
        if current_year is None:
            current_year = _wall_clock_year()
        return f"{self.age(current_year)} (assuming current year is {current_year})"
