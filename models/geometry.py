"""
Geometry Utilities.

Point value type and the pure arithmetic used by the drawing model:
- add / subtract: component-wise
- distance: Euclidean distance
- mirror: point reflection through a center

mirror() is what keeps the two control points of an anchor symmetric,
so the curve passes through the anchor without a cusp.
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """2D position on the canvas."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def mirrored(self, center: "Point") -> "Point":
        """Reflect this point through center."""
        return center + (center - self)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, xy: Tuple[float, float]) -> "Point":
        return cls(float(xy[0]), float(xy[1]))


def add(p: Point, q: Point) -> Point:
    return p + q


def subtract(p: Point, q: Point) -> Point:
    return p - q


def distance(p: Point, q: Point) -> float:
    return p.distance_to(q)


def mirror(point: Point, center: Point) -> Point:
    """
    Point reflection of point through center.

    Returns center + (center - point). Applying it twice with the same
    center gives back the original point.
    """
    return point.mirrored(center)
