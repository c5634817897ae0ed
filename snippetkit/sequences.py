from __future__ import annotations

from numbers import Real
from typing import Iterable, TypeVar

N = TypeVar("N", bound=Real)


def dedup_sort(values: Iterable[N]) -> list[N]:
    """Return the distinct values of `values` in ascending numeric order.

    The first occurrence of each distinct value is the one kept, so `1` wins
    over a later `1.0`. The input is never mutated; a one-shot iterator is
    consumed exactly once.
    """

    # dict preserves insertion order, so this keeps first occurrences.
    unique = list(dict.fromkeys(values))
    unique.sort()
    return unique
