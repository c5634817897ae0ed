from __future__ import annotations

import time
from datetime import date


def monotonic_ms() -> int:
    """Monotonic clock in milliseconds.

    Use this for latency measurements.
    """

    return int(time.monotonic() * 1000)


def current_year() -> int:
    """Calendar year from the local wall clock."""

    return date.today().year
