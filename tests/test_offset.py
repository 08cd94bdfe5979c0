import pytest

from polyclip.core.bounding_box import get_bounds_paths
from polyclip.core.geometry import ClipperError, Rect64, area
from polyclip.engine.offset import (
    EndType,
    JoinType,
    inflate_paths,
    inflate_paths_d,
    is_full_open_end_type,
)

from conftest import make_path64


def test_inflate_square_miter(square):
    result = inflate_paths([square], 1, JoinType.MITER, EndType.POLYGON)
    assert len(result) == 1
    assert get_bounds_paths(result) == Rect64(-1, -1, 11, 11)
    assert abs(area(result[0])) == 144


def test_deflate_square(square):
    result = inflate_paths([square], -2, JoinType.MITER, EndType.POLYGON)
    assert get_bounds_paths(result) == Rect64(2, 2, 8, 8)
    assert abs(area(result[0])) == 36


def test_deflate_to_nothing(square):
    assert inflate_paths([square], -6, JoinType.MITER, EndType.POLYGON) == []


def test_round_join_stays_inside_miter_bounds(square):
    result = inflate_paths([square], 2, JoinType.ROUND, EndType.POLYGON)
    rect = get_bounds_paths(result)
    assert rect == Rect64(-2, -2, 12, 12)
    # rounded corners cut away part of the 14x14 square
    assert 100 + 4 * 20 < abs(area(result[0])) < 196


def test_open_line_butt_ends():
    line = make_path64([(0, 0), (10, 0)])
    result = inflate_paths([line], 1, JoinType.SQUARE, EndType.BUTT)
    assert len(result) == 1
    assert abs(area(result[0])) == 20
    assert get_bounds_paths(result) == Rect64(0, -1, 10, 1)


def test_empty_paths_are_ignored(square):
    assert inflate_paths([], 1, JoinType.MITER, EndType.POLYGON) == []
    assert len(inflate_paths([[], square], 1, JoinType.MITER, EndType.POLYGON)) == 1


def test_inflate_paths_d(square_d):
    result = inflate_paths_d([square_d], 0.5, JoinType.MITER, EndType.POLYGON, precision=2)
    assert len(result) == 1
    assert abs(area(result[0])) == pytest.approx(4.0)
    xs = [pt.x for pt in result[0]]
    assert min(xs) == pytest.approx(-0.5) and max(xs) == pytest.approx(1.5)


@pytest.mark.parametrize("precision", [9, -9])
def test_inflate_paths_d_rejects_precision(square_d, precision):
    with pytest.raises(ClipperError):
        inflate_paths_d([square_d], 1.0, JoinType.ROUND, EndType.POLYGON, precision=precision)


def test_precision_checked_before_paths_are_read():
    with pytest.raises(ClipperError):
        inflate_paths_d(None, 1.0, JoinType.ROUND, EndType.POLYGON, precision=9)


@pytest.mark.parametrize("end_type,expected", [
    (EndType.POLYGON, False),
    (EndType.JOINED, False),
    (EndType.BUTT, True),
    (EndType.SQUARE, True),
    (EndType.ROUND, True),
])
def test_is_full_open_end_type(end_type, expected):
    assert is_full_open_end_type(end_type) is expected
