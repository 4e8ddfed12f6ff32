import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from geometry.PointFloat import PointFloat
from parsing.CenterParser import CenterParser
from parsing.ParseError import CenterFormatError, ParseError, PointsFormatError
from parsing.PointParser import PointParser
from parsing.PointSetParser import PointSetParser


def as_xy(points):
    return [p.as_tuple() for p in points]


# -----------------------------
# Single point
# -----------------------------

def test_parse_point():
    assert PointParser.parse_point("(50,96)") == PointFloat(50, 96)


def test_parse_point_whitespace():
    assert PointParser.parse_point("( 50 , 96 )") == PointFloat(50, 96)
    assert PointParser.parse_point("  (50,96)  ") == PointFloat(50, 96)


def test_parse_point_decimals_and_signs():
    assert PointParser.parse_point("(-1.5, +.25)") == PointFloat(-1.5, 0.25)
    assert PointParser.parse_point("(1e3,-2E-2)") == PointFloat(1000, -0.02)


@pytest.mark.parametrize("text", [
    "(50,abc)",
    "(50)",
    "invalid",
    "(50,96,10)",
    "(,)",
    "()",
    "",
    "(nan,1)",
    "(inf,1)",
    "(1e999,1)",
    "(1_0,2)",
    "50,96",
    "(50,96",
])
def test_parse_point_rejects(text):
    assert PointParser.parse_point(text) is None


def test_parse_number():
    assert PointParser.parse_number(" 90 ") == 90
    assert PointParser.parse_number("-45.5") == -45.5
    assert PointParser.parse_number("NaN") is None
    assert PointParser.parse_number("12abc") is None


# -----------------------------
# Point sets
# -----------------------------

def test_parse_points_single():
    assert as_xy(PointSetParser.parse_points("(50,96)")) == [(50, 96)]


def test_parse_points_set_preserves_order():
    pts = PointSetParser.parse_points("[(50,96) (510,296)]")
    assert as_xy(pts) == [(50, 96), (510, 296)]


def test_parse_points_set_with_spaces():
    pts = PointSetParser.parse_points("  [( 50 , 96 )   ( 510 , 296 )] ")
    assert as_xy(pts) == [(50, 96), (510, 296)]


def test_parse_points_keeps_duplicates():
    pts = PointSetParser.parse_points("[(1,2)(1,2) (3,4)]")
    assert as_xy(pts) == [(1, 2), (1, 2), (3, 4)]


def test_parse_points_ignores_garbage():
    assert as_xy(PointSetParser.parse_points("[ (50,96) invalid ]")) == [(50, 96)]


def test_parse_points_skips_bad_candidates():
    pts = PointSetParser.parse_points("[(1,2) (3,abc) (4) (5,6)]")
    assert as_xy(pts) == [(1, 2), (5, 6)]


def test_parse_points_unclosed_set_drops_last_char():
    # Without "]" the final ")" is cut off, so only the last candidate is lost
    assert as_xy(PointSetParser.parse_points("[(1,2) (3,4)")) == [(1, 2)]
    assert as_xy(PointSetParser.parse_points("[(1,2) (3,4) ")) == [(1, 2)]
    assert as_xy(PointSetParser.parse_points("[(1,2) (3,4) x")) == [(1, 2), (3, 4)]


def test_parse_points_unclosed_single_candidate_fails():
    with pytest.raises(PointsFormatError):
        PointSetParser.parse_points("[(1,2)")


def test_parse_points_nested_paren_best_effort():
    assert as_xy(PointSetParser.parse_points("[(5,6))]")) == [(5, 6)]


@pytest.mark.parametrize("text, shown", [
    ("", ""),
    ("   ", ""),
    ("(50,abc)", "(50,abc)"),
    ("[invalid]", "[invalid]"),
    ("[]", "[]"),
    ("50,96", "50,96"),
    ("  [ nope ]  ", "[ nope ]"),
])
def test_parse_points_errors(text, shown):
    with pytest.raises(PointsFormatError) as exc:
        PointSetParser.parse_points(text)
    assert str(exc.value) == f'Invalid points format: {shown}. Use "(x,y)" or "[(x,y) (x,y)]".'


def test_parse_points_empty_message():
    with pytest.raises(ValueError, match=r'^Invalid points format: \. Use "\(x,y\)" or "\[\(x,y\) \(x,y\)\]"\.$'):
        PointSetParser.parse_points("")


# -----------------------------
# Center
# -----------------------------

def test_parse_center():
    assert CenterParser.parse_center("(256,256)") == PointFloat(256, 256)
    assert CenterParser.parse_center("( 256 , 256 )") == PointFloat(256, 256)
    assert CenterParser.parse_center(" (1,2)") == PointFloat(1, 2)


@pytest.mark.parametrize("text", ["invalid", "(256,abc)", "[(1,2)]", "", " 5 "])
def test_parse_center_errors(text):
    with pytest.raises(CenterFormatError) as exc:
        CenterParser.parse_center(text)
    assert str(exc.value) == f'Invalid center format: {text}. Use "(cx,cy)" or pass separate cx cy.'


def test_errors_share_base():
    assert issubclass(PointsFormatError, ParseError)
    assert issubclass(CenterFormatError, ParseError)
    assert issubclass(ParseError, ValueError)
