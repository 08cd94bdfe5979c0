import pytest

from polyclip.core.geometry import Point64, PointD
from polyclip.utils.path_parser import make_path, make_path_d, path_to_string, paths_to_string

from conftest import make_path64, make_pathd


def test_scenario(square):
    assert make_path("0,0 10,0 10,10 0,10") == square


@pytest.mark.parametrize("text", [
    "0 0 10 0 10 10 0 10",
    "0, 0, 10, 0, 10, 10, 0, 10",
    "  0,0\t10,0\n10,10  0,10  ",
    "0 ,0 10 ,0 10, 10 0,10",
])
def test_separators(text, square):
    assert make_path(text) == square


def test_negative_numbers():
    assert make_path("-1,-2 3,-4") == make_path64([(-1, -2), (3, -4)])


def test_empty_and_blank():
    assert make_path("") == []
    assert make_path("   ") == []


@pytest.mark.parametrize("text,expected", [
    ("1,2 3", [(1, 2)]),          # dangling x
    ("1,2 x,4", [(1, 2)]),        # non-numeric token
    ("1,2 3,,4", [(1, 2)]),       # two commas are never skipped
    ("1,,2", []),
    ("1,2 - 5,6", [(1, 2)]),      # lone minus sign
    ("1.5,2", []),                # integers only
    ("7,8 9,10;11,12", [(7, 8), (9, 10)]),
])
def test_partial_parse(text, expected):
    assert make_path(text) == make_path64(expected)


def test_user_skip_chars():
    assert make_path("1,2|3,4|5,6", skip_chars="|") == make_path64([(1, 2), (3, 4), (5, 6)])
    assert make_path("(1,2)(3,4)", skip_chars="()") == make_path64([(1, 2), (3, 4)])


def test_user_skip_chars_match_once_per_run():
    assert make_path("1,2||3,4", skip_chars="|") == make_path64([(1, 2)])
    assert make_path("1,2||3,4", skip_chars="||") == make_path64([(1, 2), (3, 4)])


def test_single_space_skip_chars_means_default():
    assert make_path("1,2 3,4", skip_chars=" ") == make_path64([(1, 2), (3, 4)])


def test_make_path_d():
    assert make_path_d("0.5,1.5 -2.25,.5 3,4") == make_pathd([(0.5, 1.5), (-2.25, 0.5), (3, 4)])


@pytest.mark.parametrize("text,expected", [
    ("1.,2", []),
    ("1.2.3,4", []),
    ("1,2 .,3", [(1, 2)]),
    ("0.1,0.2 abc", [(0.1, 0.2)]),
])
def test_make_path_d_partial(text, expected):
    assert make_path_d(text) == make_pathd(expected)


def test_make_path_d_gives_floats():
    path = make_path_d("1,2")
    assert path == [PointD(1.0, 2.0)]
    assert isinstance(path[0].x, float)


def test_format_round_trip(square):
    text = path_to_string(square)
    assert text == "0,0 10,0 10,10 0,10"
    assert make_path(text) == square

    floats = make_pathd([(0.5, -1.25), (3, 0.125)])
    assert path_to_string(floats) == "0.5,-1.25 3,0.125"
    assert make_path_d(path_to_string(floats)) == floats


def test_paths_to_string():
    paths = [make_path64([(0, 0), (1, 1)]), [Point64(-2, 3)]]
    assert paths_to_string(paths) == "0,0 1,1\n-2,3"
