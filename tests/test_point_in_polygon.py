import math

import numpy as np
import pytest
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from polyclip.core.geometry import Point64, PointD
from polyclip.core.point_in_polygon import (
    PointInPolygonResult,
    point_in_polygon,
    points_in_polygon,
    warmup,
)

from conftest import make_path64, make_pathd

ON = PointInPolygonResult.IS_ON
INSIDE = PointInPolygonResult.IS_INSIDE
OUTSIDE = PointInPolygonResult.IS_OUTSIDE


def test_square_scenario(square):
    assert point_in_polygon(Point64(5, 5), square) == INSIDE
    assert point_in_polygon(Point64(15, 5), square) == OUTSIDE
    assert point_in_polygon(Point64(10, 5), square) == ON


def test_fewer_than_three_vertices_is_outside():
    assert point_in_polygon(Point64(0, 0), []) == OUTSIDE
    assert point_in_polygon(Point64(0, 0), make_path64([(0, 0)])) == OUTSIDE
    assert point_in_polygon(Point64(0, 0), make_path64([(0, 0), (5, 0)])) == OUTSIDE


@pytest.mark.parametrize("pt,expected", [
    ((5, 3), INSIDE),
    ((5, 7), OUTSIDE),
    ((5, 5), ON),
    ((2, 6), INSIDE),
    ((8, 5), INSIDE),   # query line passes through the notch vertex
    ((3, 5), INSIDE),
    ((12, 5), OUTSIDE),
    ((-1, 5), OUTSIDE),
    ((7, 7), ON),
])
def test_concave_notch(pt, expected):
    notch = make_path64([(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)])
    assert point_in_polygon(Point64(*pt), notch) == expected


@pytest.mark.parametrize("pt,expected", [
    ((15, 5), ON),        # on a horizontal edge
    ((10, 5), ON),
    ((20, 5), ON),
    ((5, 5), INSIDE),
    ((25, 5), OUTSIDE),
    ((-5, 5), OUTSIDE),
    ((15, 7), INSIDE),
    ((15, 3), OUTSIDE),
])
def test_horizontal_edge_on_query_line(pt, expected):
    step = make_path64([(0, 0), (10, 0), (10, 5), (20, 5), (20, 10), (0, 10)])
    assert point_in_polygon(Point64(*pt), step) == expected


def test_duplicate_vertices_terminate():
    poly = make_path64([(0, 0), (0, 0), (10, 0), (10, 0), (10, 10), (0, 10), (0, 10)])
    assert point_in_polygon(Point64(5, 5), poly) == INSIDE
    assert point_in_polygon(Point64(0, 5), poly) == ON
    assert point_in_polygon(Point64(20, 20), poly) == OUTSIDE


def test_flat_polygon():
    flat = make_path64([(0, 0), (10, 0), (5, 0)])
    assert point_in_polygon(Point64(3, 0), flat) == ON
    assert point_in_polygon(Point64(11, 0), flat) == OUTSIDE
    assert point_in_polygon(Point64(3, 1), flat) == OUTSIDE


def test_orientation_does_not_matter(square):
    clockwise = list(reversed(square))
    for pt in [(5, 5), (15, 5), (10, 5), (0, 0)]:
        assert point_in_polygon(Point64(*pt), clockwise) == point_in_polygon(Point64(*pt), square)


def test_huge_coordinates_are_exact():
    big = 2 ** 70
    poly = make_path64([(0, 0), (big, 0), (big, big), (0, big)])
    assert point_in_polygon(Point64(big // 2, big // 2), poly) == INSIDE
    assert point_in_polygon(Point64(big, big // 3), poly) == ON
    assert point_in_polygon(Point64(big + 1, big // 3), poly) == OUTSIDE


def test_floating_domain():
    poly = make_pathd([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert point_in_polygon(PointD(0.5, 0.5), poly) == INSIDE
    assert point_in_polygon(PointD(1.5, 0.5), poly) == OUTSIDE
    assert point_in_polygon(PointD(1.0, 0.25), poly) == ON


# =============================================================================
# PROPERTIES AGAINST SHAPELY
# =============================================================================

def _random_star_polygon(rng):
    """Simple integer polygon: sorted angles around a centre."""
    k = int(rng.integers(3, 12))
    angles = np.sort(rng.uniform(0, 2 * math.pi, k))
    radii = rng.integers(10, 50, k)
    return make_path64([
        (int(round(50 + r * math.cos(a))), int(round(50 + r * math.sin(a))))
        for a, r in zip(angles, radii)
    ])


def _shapely_classify(poly, x, y):
    pt = ShapelyPoint(x, y)
    if poly.boundary.intersects(pt):
        return ON
    if poly.contains(pt):
        return INSIDE
    return OUTSIDE


def test_matches_shapely_on_random_polygons(rng):
    checked = 0
    for _ in range(60):
        path = _random_star_polygon(rng)
        poly = ShapelyPolygon([(p.x, p.y) for p in path])
        if not poly.is_valid or poly.area == 0:
            continue
        checked += 1

        queries = rng.integers(0, 101, size=(40, 2))
        for x, y in queries:
            expected = _shapely_classify(poly, int(x), int(y))
            assert point_in_polygon(Point64(int(x), int(y)), path) == expected, (path, x, y)

    assert checked > 30


def test_every_vertex_is_on_boundary(rng):
    for _ in range(30):
        path = _random_star_polygon(rng)
        for v in path:
            assert point_in_polygon(v, path) == ON


# =============================================================================
# BATCH KERNEL
# =============================================================================

def test_batch_matches_scalar(rng):
    warmup()
    for _ in range(20):
        path = _random_star_polygon(rng)
        queries = rng.integers(0, 101, size=(100, 2)).astype(np.int64)
        batch = points_in_polygon(queries, path)
        scalar = [point_in_polygon(Point64(int(x), int(y)), path) for x, y in queries]
        assert batch.tolist() == [int(r) for r in scalar]


def test_batch_accepts_arrays(square):
    poly = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=np.int64)
    result = points_in_polygon([[5, 5], [15, 5], [10, 5]], poly)
    assert result.dtype == np.int8
    assert result.tolist() == [INSIDE, OUTSIDE, ON]


def test_batch_falls_back_outside_jit_range():
    big = 2 ** 40
    poly = make_path64([(0, 0), (big, 0), (big, big), (0, big)])
    result = points_in_polygon(np.array([[big // 2, big // 2], [big, 7], [-1, 0]]), poly)
    assert result.tolist() == [INSIDE, ON, OUTSIDE]


def test_batch_float_points(square_d):
    result = points_in_polygon(np.array([[0.5, 0.5], [2.0, 2.0]]), square_d)
    assert result.tolist() == [INSIDE, OUTSIDE]


def test_batch_degenerate_inputs(square):
    assert points_in_polygon(np.empty((0, 2), dtype=np.int64), square).size == 0
    result = points_in_polygon([[0, 0]], make_path64([(0, 0), (1, 1)]))
    assert result.tolist() == [OUTSIDE]
