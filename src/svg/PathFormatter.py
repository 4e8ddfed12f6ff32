import math
import re
from pathlib import Path as FilePath
from typing import Any, List, Tuple

from svgelements import Arc, Close, CubicBezier, Line, Move, Path, QuadraticBezier

# Matches a <path> tag carrying a d attribute, for example:
#   <path id="p1" d="m10 10 h5 v5 z" fill="none"/>
#
# Captures:
#   group(1) -> the raw path data
PATH_TAG_RE = re.compile(r'<path[^>]*\sd="([^"]+)"[^>]*>')


class PathFormatter:
    """Rewrites SVG path data as absolute, uniformly spaced commands."""

    @staticmethod
    def _num(value: float) -> str:
        value = float(value)
        if value == 0:
            return "0"
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)

    @staticmethod
    def _xy(point: Any) -> str:
        return f"{PathFormatter._num(point.x)},{PathFormatter._num(point.y)}"

    @staticmethod
    def format_segment(seg: Any) -> str:
        xy = PathFormatter._xy
        if isinstance(seg, Move):
            return f"M{xy(seg.end)}"
        if isinstance(seg, Close):
            return "Z"
        if isinstance(seg, Line):
            return f"L{xy(seg.end)}"
        if isinstance(seg, CubicBezier):
            return f"C{xy(seg.control1)} {xy(seg.control2)} {xy(seg.end)}"
        if isinstance(seg, QuadraticBezier):
            return f"Q{xy(seg.control)} {xy(seg.end)}"
        if isinstance(seg, Arc):
            num = PathFormatter._num
            large_arc = int(abs(seg.sweep) > math.pi)
            sweep = int(seg.sweep >= 0)
            rotation = seg.get_rotation().as_degrees
            return f"A{num(seg.rx)} {num(seg.ry)} {num(rotation)} {large_arc} {sweep} {xy(seg.end)}"
        raise ValueError(f"Unsupported path segment: {seg!r}")

    @staticmethod
    def format_path_data(d: str) -> str:
        """Parse path data and render every segment as an absolute command.

        Relative commands are resolved by svgelements; shorthand H/V/S/T come
        back expanded and are written as L/C/Q, so "h10 v10" becomes
        "L10,0 L10,10" rather than keeping the H/V shorthand.
        """
        segments = list(Path(d))
        if not segments:
            raise ValueError(f"No path segments in: {d!r}")
        return " ".join(PathFormatter.format_segment(seg) for seg in segments)

    @staticmethod
    def format_svg_text(text: str) -> Tuple[str, List[Tuple[str, Exception]]]:
        """Reformat the d attribute of every <path> tag in an SVG document.

        Returns the new document and (original_d, error) for each path that
        could not be formatted; those paths are left untouched.
        """
        failures: List[Tuple[str, Exception]] = []

        def replace(match: "re.Match[str]") -> str:
            tag, original_d = match.group(0), match.group(1)
            try:
                formatted_d = PathFormatter.format_path_data(original_d)
            except Exception as e:
                failures.append((original_d, e))
                return tag
            return tag.replace(f'd="{original_d}"', f'd="{formatted_d}"', 1)

        return PATH_TAG_RE.sub(replace, text), failures

    @staticmethod
    def format_file(path: str) -> List[Tuple[str, Exception]]:
        """Format an SVG file in place, returning the paths that were skipped."""
        file_path = FilePath(path)
        content = file_path.read_text(encoding="utf-8")
        formatted, failures = PathFormatter.format_svg_text(content)
        file_path.write_text(formatted, encoding="utf-8")
        return failures
