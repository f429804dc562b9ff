"""Member length from raw point geometry."""

import math
from collections.abc import Iterable, Mapping
from itertools import combinations
from typing import Any

from pydantic import BaseModel, ConfigDict


class GeometryPoint(BaseModel):
    """A 2D point in member geometry."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @classmethod
    def coerce(cls, value: Any) -> "GeometryPoint":
        """Accept a GeometryPoint, an {x, y} mapping or an (x, y) pair."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(value)
        x, y = value
        return cls(x=x, y=y)


def member_length(points: Iterable[Any]) -> float:
    """Return the largest distance between any two points of a member.

    All pairs are compared, not just neighbours, so a point path that doubles
    back still reports its full span. Fewer than two points gives 0.
    """
    pts = [GeometryPoint.coerce(p) for p in points]
    return max(
        (math.hypot(a.x - b.x, a.y - b.y) for a, b in combinations(pts, 2)),
        default=0.0,
    )
