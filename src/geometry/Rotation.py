import math
from dataclasses import dataclass
from typing import Iterable, List

from geometry.PointFloat import PointFloat
from geometry.VectorFloat import VectorFloat


@dataclass(frozen=True)
class Rotation:
    """Counterclockwise rotation of points about a center, angles in degrees."""

    @staticmethod
    def rotate(x: float, y: float, angle: float, cx: float, cy: float) -> PointFloat:
        """Rotate (x, y) about (cx, cy) by angle degrees."""
        return Rotation.rotate_point(PointFloat(x, y), angle, PointFloat(cx, cy))

    @staticmethod
    def rotate_point(point: PointFloat, angle: float, center: PointFloat) -> PointFloat:
        # Reduce first, angle * pi overflows to inf for angles near the float limit
        radians = math.fmod(angle, 360.0) * math.pi / 180
        cos_a, sin_a = math.cos(radians), math.sin(radians)

        # A zero angle must hand back the exact input, (x - cx) + cx can round
        if cos_a == 1.0 and sin_a == 0.0:
            return point

        d = point - center
        return center + VectorFloat(cos_a * d.x - sin_a * d.y, sin_a * d.x + cos_a * d.y)

    @staticmethod
    def rotate_points(points: Iterable[PointFloat], angle: float, center: PointFloat) -> List[PointFloat]:
        return [Rotation.rotate_point(p, angle, center) for p in points]
