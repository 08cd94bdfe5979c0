"""
Bounding Box Computation - Axis-aligned bounds of paths.

Bounds are folded with min/max seeded by the first point absorbed, so integer
coordinates of any magnitude stay exact. A fold that never absorbs a point
yields the canonical empty rect (all zeros).
"""

import logging
from typing import Iterable, Sequence, Tuple, Union

import numpy as np
from numba import njit

from .geometry import (
    Point,
    Point64,
    Rect64,
    RectD,
)

logger = logging.getLogger(__name__)

Rect = Union[Rect64, RectD]


@njit(cache=True)
def compute_bounds_array(vertices: np.ndarray) -> Tuple[float, float, float, float]:
    """
    Compute axis-aligned bounding box of an (N, 2) vertex array, N >= 1.

    Returns:
        (min_x, min_y, max_x, max_y)
    """
    min_x = vertices[0, 0]
    max_x = vertices[0, 0]
    min_y = vertices[0, 1]
    max_y = vertices[0, 1]

    for i in range(1, len(vertices)):
        x = vertices[i, 0]
        y = vertices[i, 1]

        if x < min_x:
            min_x = x
        if x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        if y > max_y:
            max_y = y

    return min_x, min_y, max_x, max_y


def _bounds_from_array(vertices: np.ndarray) -> Rect:
    vertices = np.asarray(vertices).reshape(-1, 2)
    if len(vertices) == 0:
        return Rect64()
    min_x, min_y, max_x, max_y = compute_bounds_array(vertices)
    if np.issubdtype(vertices.dtype, np.integer):
        return Rect64(int(min_x), int(min_y), int(max_x), int(max_y))
    return RectD(float(min_x), float(min_y), float(max_x), float(max_y))


def _fold_bounds(paths: Iterable[Sequence[Point]]) -> Rect:
    """Min/max fold over every point of every path."""
    rect_cls = None
    left = top = right = bottom = None

    for path in paths:
        for pt in path:
            if rect_cls is None:
                # The first point fixes the domain and seeds the fold
                rect_cls = Rect64 if isinstance(pt, Point64) else RectD
                left = right = pt.x
                top = bottom = pt.y
                continue

            if pt.x < left:
                left = pt.x
            if pt.x > right:
                right = pt.x
            if pt.y < top:
                top = pt.y
            if pt.y > bottom:
                bottom = pt.y

    if rect_cls is None:
        return Rect64()
    return rect_cls(left, top, right, bottom)


def get_bounds(path) -> Rect:
    """
    Bounding rect of a single path.

    Args:
        path: Sequence of Point64/PointD, or an (N, 2) numpy array

    Returns:
        Rect64 for integer input, RectD for floating input,
        Rect64() when the path is empty.
    """
    if isinstance(path, np.ndarray):
        return _bounds_from_array(path)
    return _fold_bounds([path])


def get_bounds_paths(paths: Iterable[Sequence[Point]]) -> Rect:
    """Bounding rect of a collection of paths; Rect64() if it holds no points."""
    return _fold_bounds(paths)


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    _ = compute_bounds_array(np.array([[0, 0], [10, 5]], dtype=np.int64))
    _ = compute_bounds_array(np.array([[0.0, 0.0], [1.5, 2.5]], dtype=np.float64))

    logger.info("JIT warmup complete for bounding_box module")
