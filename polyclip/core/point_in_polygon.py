"""
Point-in-polygon classification - exact crossing-number test.

The classifier never computes intersection coordinates. Every decision is an
exact comparison or the sign of an exact cross product, so a point reported
as on the boundary agrees with the integer clipping engine's own edges.

Two entry points:
1. point_in_polygon - scalar, arbitrary precision (Python ints)
2. points_in_polygon - numba batch kernel over int64 arrays, for query sets
   whose coordinates fit the overflow-free range (CONFIG.jit.max_coordinate)
"""

import logging
from enum import IntEnum
from typing import Sequence

import numpy as np
from numba import njit, prange

from ..config import CONFIG
from .geometry import Point, Point64, PointD, cross_product, path_to_array

logger = logging.getLogger(__name__)


class PointInPolygonResult(IntEnum):
    """Where a point lies relative to a closed polygon."""
    IS_ON = 0
    IS_INSIDE = 1
    IS_OUTSIDE = 2


# =============================================================================
# SCALAR CLASSIFIER
# =============================================================================

def _classify_flat(pt: Point, polygon: Sequence[Point]) -> PointInPolygonResult:
    """Every vertex lies on the query's horizontal line."""
    min_x = min(v.x for v in polygon)
    max_x = max(v.x for v in polygon)
    if min_x <= pt.x <= max_x:
        return PointInPolygonResult.IS_ON
    return PointInPolygonResult.IS_OUTSIDE


def point_in_polygon(pt: Point, polygon: Sequence[Point]) -> PointInPolygonResult:
    """
    Classify a point against a closed polygon.

    A leftward ray from pt is tested against each edge that crosses pt's
    horizontal line. is_above tracks which side of that line the walk is
    currently on (is_above means smaller y), so runs of vertices that stay on
    one side are skipped without looking at them.

    Args:
        pt: Query point
        polygon: Polygon vertices; the last vertex connects back to the first

    Returns:
        IS_ON, IS_INSIDE or IS_OUTSIDE. Polygons with fewer than 3
        vertices are always IS_OUTSIDE.
    """
    n = len(polygon)
    if n < 3:
        return PointInPolygonResult.IS_OUTSIDE

    # Start the walk on a vertex that is strictly off the horizontal line
    first = 0
    while first < n and polygon[first].y == pt.y:
        first += 1
    if first == n:
        return _classify_flat(pt, polygon)

    val = 0
    is_above = polygon[first].y < pt.y

    # Visit every vertex once, finishing back on `first`
    i = first + 1
    stop = first + n + 1
    while i < stop:
        if is_above:
            while i < stop and polygon[i % n].y < pt.y:
                i += 1
        else:
            while i < stop and polygon[i % n].y > pt.y:
                i += 1
        if i == stop:
            break

        curr = polygon[i % n]
        prev = polygon[(i - 1) % n]

        if curr.y == pt.y:
            if curr.x == pt.x or (
                    curr.y == prev.y and (pt.x < prev.x) != (pt.x < curr.x)):
                return PointInPolygonResult.IS_ON
            i += 1
            continue

        if pt.x < curr.x and pt.x < prev.x:
            # we're only interested in edges crossing on the left
            pass
        elif pt.x > prev.x and pt.x > curr.x:
            val = 1 - val
        else:
            d = cross_product(prev, curr, pt)
            if d == 0:
                return PointInPolygonResult.IS_ON
            if (d < 0) == is_above:
                val = 1 - val

        is_above = not is_above
        i += 1

    if val == 0:
        return PointInPolygonResult.IS_OUTSIDE
    return PointInPolygonResult.IS_INSIDE


# =============================================================================
# NUMBA BATCH CLASSIFIER
# =============================================================================

@njit(cache=True)
def _classify_jit(px: np.int64, py: np.int64, poly: np.ndarray) -> int:
    """int64 twin of point_in_polygon. Caller guarantees the coordinate bound."""
    n = len(poly)
    if n < 3:
        return 2

    first = 0
    while first < n and poly[first, 1] == py:
        first += 1
    if first == n:
        min_x = poly[0, 0]
        max_x = poly[0, 0]
        for j in range(1, n):
            if poly[j, 0] < min_x:
                min_x = poly[j, 0]
            if poly[j, 0] > max_x:
                max_x = poly[j, 0]
        if min_x <= px and px <= max_x:
            return 0
        return 2

    val = 0
    is_above = poly[first, 1] < py

    i = first + 1
    stop = first + n + 1
    while i < stop:
        if is_above:
            while i < stop and poly[i % n, 1] < py:
                i += 1
        else:
            while i < stop and poly[i % n, 1] > py:
                i += 1
        if i == stop:
            break

        c = i % n
        p = (i - 1) % n
        cx = poly[c, 0]
        cy = poly[c, 1]
        qx = poly[p, 0]
        qy = poly[p, 1]

        if cy == py:
            if cx == px or (cy == qy and (px < qx) != (px < cx)):
                return 0
            i += 1
            continue

        if px < cx and px < qx:
            pass
        elif px > qx and px > cx:
            val = 1 - val
        else:
            d = (cx - qx) * (py - cy) - (cy - qy) * (px - cx)
            if d == 0:
                return 0
            if (d < 0) == is_above:
                val = 1 - val

        is_above = not is_above
        i += 1

    if val == 0:
        return 2
    return 1


@njit(cache=True, parallel=True)
def _classify_batch_jit(points: np.ndarray, poly: np.ndarray) -> np.ndarray:
    """
    Classify many points against one polygon in parallel.

    Args:
        points: (m, 2) int64 array of query points
        poly: (n, 2) int64 array of polygon vertices

    Returns:
        (m,) int8 array of PointInPolygonResult values
    """
    m = len(points)
    result = np.empty(m, dtype=np.int8)
    for k in prange(m):
        result[k] = _classify_jit(points[k, 0], points[k, 1], poly)
    return result


def _fits_jit(points: np.ndarray, poly: np.ndarray) -> bool:
    """True if both arrays are integer and inside the overflow-free range."""
    if not CONFIG.jit.enabled:
        return False
    if not (np.issubdtype(points.dtype, np.integer) and
            np.issubdtype(poly.dtype, np.integer)):
        return False
    limit = CONFIG.jit.max_coordinate
    if points.size and np.abs(points).max() > limit:
        return False
    if poly.size and np.abs(poly).max() > limit:
        return False
    return True


def points_in_polygon(points, polygon) -> np.ndarray:
    """
    Classify many points against one polygon.

    Args:
        points: (m, 2) array-like of query points
        polygon: Path of Point64/PointD or an (n, 2) array

    Returns:
        (m,) int8 array of PointInPolygonResult values
    """
    pts = np.asarray(points)
    if pts.size == 0:
        return np.empty(0, dtype=np.int8)
    pts = pts.reshape(-1, 2)

    if isinstance(polygon, np.ndarray):
        poly = polygon.reshape(-1, 2)
    else:
        poly = path_to_array(polygon)

    if len(poly) < 3:
        return np.full(len(pts), PointInPolygonResult.IS_OUTSIDE, dtype=np.int8)

    if _fits_jit(pts, poly):
        return _classify_batch_jit(pts.astype(np.int64), poly.astype(np.int64))

    logger.debug("points_in_polygon: %d points outside JIT range, using exact path", len(pts))
    if np.issubdtype(pts.dtype, np.integer) and np.issubdtype(poly.dtype, np.integer):
        point_cls, cast = Point64, int
    else:
        point_cls, cast = PointD, float
    ring = [point_cls(cast(x), cast(y)) for x, y in poly]
    return np.array(
        [point_in_polygon(point_cls(cast(x), cast(y)), ring) for x, y in pts],
        dtype=np.int8,
    )


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    square = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=np.int64)
    pts = np.array([[5, 5], [15, 5], [10, 5]], dtype=np.int64)

    _ = _classify_jit(np.int64(5), np.int64(5), square)
    _ = _classify_batch_jit(pts, square)

    logger.info("JIT warmup complete for point_in_polygon module")
