from dataclasses import dataclass
from typing import Sequence

from geometry.PointFloat import PointFloat

COORD_DECIMALS = 10


@dataclass(frozen=True)
class CoordFormatter:

    @staticmethod
    def format_coord(value: float, decimals: int = COORD_DECIMALS) -> str:
        """Fixed-point with trailing zeros (and a trailing '.') removed: 1.5000000000 -> 1.5"""
        text = f"{value:.{decimals}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        # Tiny negative values such as -6e-17 print as -0
        if text == "-0":
            text = "0"
        return text

    @staticmethod
    def format_point(point: PointFloat, decimals: int = COORD_DECIMALS) -> str:
        x, y = (CoordFormatter.format_coord(c, decimals) for c in point.as_tuple())
        return f"({x}, {y})"

    @staticmethod
    def format_points(points: Sequence[PointFloat], decimals: int = COORD_DECIMALS) -> str:
        """One point renders as "(x, y)", several as "[(x, y) (x, y)]"."""
        if len(points) == 1:
            return CoordFormatter.format_point(points[0], decimals)
        return "[" + " ".join(CoordFormatter.format_point(p, decimals) for p in points) + "]"
