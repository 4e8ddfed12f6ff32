from dataclasses import dataclass

from geometry.PointFloat import PointFloat
from parsing.ParseError import CenterFormatError
from parsing.PointParser import PointParser


@dataclass(frozen=True)
class CenterParser:
    @staticmethod
    def parse_center(text: str) -> PointFloat:
        """Parse a "(cx,cy)" pivot. The error message quotes the input untrimmed."""
        if text.strip().startswith("("):
            point = PointParser.parse_point(text)
            if point is not None:
                return point

        raise CenterFormatError(text)
