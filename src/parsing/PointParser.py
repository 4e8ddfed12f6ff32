import math
import re
from dataclasses import dataclass
from typing import Optional

from geometry.PointFloat import PointFloat

# Matches a plain decimal literal, for example:
#   50   -12.5   .5   +3.   1e-3   -2.5E+4
#
# nan, inf, hex and underscore-grouped forms are not accepted.
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class PointParser:
    """Tolerant parser for a single "(x,y)" point.

    Never raises on string input: anything that is not a point yields None,
    leaving it to the caller to decide whether that is fatal.
    """

    @staticmethod
    def parse_number(text: str) -> Optional[float]:
        """Parse a whole string as a finite number, None if it is not one."""
        text = text.strip()
        if not NUMBER_RE.fullmatch(text):
            return None
        value = float(text)
        # Literals such as 1e999 overflow to inf
        if not math.isfinite(value):
            return None
        return value

    @staticmethod
    def parse_point(text: str) -> Optional[PointFloat]:
        text = text.strip()
        if not (text.startswith("(") and text.endswith(")")):
            return None

        parts = [p.strip() for p in text[1:-1].split(",")]
        if len(parts) != 2:
            return None

        x = PointParser.parse_number(parts[0])
        y = PointParser.parse_number(parts[1])
        if x is None or y is None:
            return None

        return PointFloat(x, y)
