import re
from dataclasses import dataclass
from typing import List

from geometry.PointFloat import PointFloat
from parsing.ParseError import PointsFormatError
from parsing.PointParser import PointParser

# A point-shaped candidate inside a "[...]" set: "(" up to the next ")".
# Nested parentheses are not supported, "(5,6))" yields "(5,6)".
POINT_CANDIDATE_RE = re.compile(r"\([^)]+\)")


@dataclass(frozen=True)
class PointSetParser:
    @staticmethod
    def parse_points(text: str) -> List[PointFloat]:
        """Parse "(x,y)" or "[(x,y) (x,y) ...]" into a non-empty list of points.

        Inside a set, candidates that fail to parse and any other text are
        skipped. Raises PointsFormatError if no point survives.
        """
        text = text.strip()
        points: List[PointFloat] = []

        if text.startswith("["):
            # The last character is dropped whether or not it is the closing "]"
            candidates = POINT_CANDIDATE_RE.findall(text[1:-1])
            for candidate in candidates:
                point = PointParser.parse_point(candidate)
                if point is not None:
                    points.append(point)
        elif text.startswith("("):
            point = PointParser.parse_point(text)
            if point is not None:
                points.append(point)

        if not points:
            raise PointsFormatError(text)

        return points
