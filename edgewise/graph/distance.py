"""
Distance matrix cells: a tagged value with exactly four kinds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

CellKind = Literal["zero", "finite", "unreachable", "negative_infinity"]

UNREACHABLE_SENTINEL = -1
NEGATIVE_INFINITY_SENTINEL = "-Infinity"


@dataclass(frozen=True)
class DistanceCell:
    """
    One all-pairs distance.

    Only "finite" carries a value; the other kinds never take part in arithmetic.
    """

    kind: CellKind
    value: float | None = None

    def __post_init__(self) -> None:
        if (self.kind == "finite") != (self.value is not None):
            raise ValueError(f"DistanceCell kind {self.kind!r} with value {self.value!r}")
        if self.kind == "finite" and isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"A finite DistanceCell cannot hold {self.value!r}")

    @property
    def is_reachable(self) -> bool:
        return self.kind != "unreachable"

    def to_sentinel(self) -> float | str:
        """Interface value: 0, the distance, -1 for unreachable, "-Infinity" for negative infinity."""
        if self.kind == "zero":
            return 0
        if self.kind == "finite":
            return self.value
        if self.kind == "unreachable":
            return UNREACHABLE_SENTINEL
        return NEGATIVE_INFINITY_SENTINEL


ZERO = DistanceCell("zero")
UNREACHABLE = DistanceCell("unreachable")
NEGATIVE_INFINITY = DistanceCell("negative_infinity")


def finite(distance: float) -> DistanceCell:
    return DistanceCell("finite", distance)
