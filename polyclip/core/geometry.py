"""
Geometry primitives - Points, rects, exact cross products and scaling.

Two coordinate domains exist side by side:
- Integer ("64") coordinates: Point64, Rect64. All predicates on these are
  exact because Python ints never overflow.
- Floating coordinates: PointD, RectD.

They are never mixed implicitly. Moving between them always goes through an
explicit power-of-ten scale (see scale_path_to_int / scale_path_to_float).
"""

import math
import sys
from dataclasses import dataclass
from typing import List, Sequence, Union

import numpy as np

from ..config import CONFIG, precision_in_range


# =============================================================================
# ERRORS
# =============================================================================

class ClipperError(Exception):
    """Fatal configuration error (bad precision, unusable engine input)."""


# =============================================================================
# NUMERIC LIMITS
# =============================================================================

INT64_MAX = 2 ** 63 - 1
INT64_MIN = -(2 ** 63)

DOUBLE_MAX = sys.float_info.max
DOUBLE_LOWEST = -sys.float_info.max


# =============================================================================
# POINTS AND PATHS
# =============================================================================

@dataclass(frozen=True, slots=True)
class Point64:
    """Point in the integer coordinate domain."""
    x: int
    y: int

    def __repr__(self) -> str:
        return f"Point64({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class PointD:
    """Point in the floating coordinate domain."""
    x: float
    y: float

    def __repr__(self) -> str:
        return f"PointD({self.x}, {self.y})"


Point = Union[Point64, PointD]

Path64 = List[Point64]
Paths64 = List[Path64]
PathD = List[PointD]
PathsD = List[PathD]


def cross_product(pt1: Point, pt2: Point, pt3: Point):
    """
    Signed area of the parallelogram (pt1 -> pt2, pt2 -> pt3).

    Zero iff the three points are collinear. For Point64 input the result
    is an exact int.
    """
    return ((pt2.x - pt1.x) * (pt3.y - pt2.y) -
            (pt2.y - pt1.y) * (pt3.x - pt2.x))


def area(path: Sequence[Point]) -> float:
    """
    Signed polygon area using the shoelace formula.

    Positive for counter-clockwise paths (y axis pointing up).
    """
    n = len(path)
    if n < 3:
        return 0.0

    total = 0
    prev = path[-1]
    for pt in path:
        total += prev.x * pt.y - pt.x * prev.y
        prev = pt
    return total / 2.0


def translate_path(path: Sequence[Point], dx, dy) -> list:
    """Shift every point of a path by (dx, dy), keeping its domain."""
    return [type(pt)(pt.x + dx, pt.y + dy) for pt in path]


def translate_paths(paths: Sequence[Sequence[Point]], dx, dy) -> list:
    """Shift every path by (dx, dy)."""
    return [translate_path(path, dx, dy) for path in paths]


# =============================================================================
# RECTANGLES
# =============================================================================

class _RectMixin:
    """Behaviour shared by Rect64 and RectD."""

    __slots__ = ()

    def is_empty(self) -> bool:
        """True for inverted rects, including the accumulation sentinel."""
        return self.left > self.right or self.top > self.bottom

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def contains(self, pt: Point) -> bool:
        """Point containment, boundary inclusive."""
        return self.left <= pt.x <= self.right and self.top <= pt.y <= self.bottom

    def intersects(self, other) -> bool:
        """Check if two rects overlap (touching counts)."""
        return not (
            self.right < other.left or other.right < self.left or
            self.bottom < other.top or other.bottom < self.top
        )


@dataclass(frozen=True, slots=True)
class Rect64(_RectMixin):
    """Axis-aligned rectangle in the integer domain."""
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def mid_point(self) -> Point64:
        return Point64((self.left + self.right) // 2, (self.top + self.bottom) // 2)

    def as_path(self) -> Path64:
        """The four corners, starting at (left, top)."""
        return [
            Point64(self.left, self.top),
            Point64(self.right, self.top),
            Point64(self.right, self.bottom),
            Point64(self.left, self.bottom),
        ]


@dataclass(frozen=True, slots=True)
class RectD(_RectMixin):
    """Axis-aligned rectangle in the floating domain."""
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def mid_point(self) -> PointD:
        return PointD((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def as_path(self) -> PathD:
        """The four corners, starting at (left, top)."""
        return [
            PointD(self.left, self.top),
            PointD(self.right, self.top),
            PointD(self.right, self.bottom),
            PointD(self.left, self.bottom),
        ]


def max_invalid_rect64() -> Rect64:
    """Identity element for min/max bounds folding in the integer domain."""
    return Rect64(INT64_MAX, INT64_MAX, INT64_MIN, INT64_MIN)


def max_invalid_rectd() -> RectD:
    """Identity element for min/max bounds folding in the floating domain."""
    return RectD(DOUBLE_MAX, DOUBLE_MAX, DOUBLE_LOWEST, DOUBLE_LOWEST)


# =============================================================================
# SCALING BETWEEN DOMAINS
# =============================================================================

def check_precision(precision: int) -> None:
    """
    Validate a decimal precision exponent.

    Raises:
        ClipperError: if precision is outside the configured range.
    """
    if not precision_in_range(precision):
        raise ClipperError(
            f"Precision {precision} exceeds the allowed range "
            f"[{CONFIG.precision.min_precision}, {CONFIG.precision.max_precision}]."
        )


def precision_scale(precision: int) -> float:
    """Validated 10**precision."""
    check_precision(precision)
    return math.pow(10, precision)


def round_half_away(value: float) -> int:
    """Round to the nearest int, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def scale_path_to_int(path: Sequence[Point], scale: float) -> Path64:
    """Multiply by scale and round into the integer domain."""
    return [Point64(round_half_away(pt.x * scale), round_half_away(pt.y * scale))
            for pt in path]


def scale_path_to_float(path: Sequence[Point], scale: float) -> PathD:
    """Multiply by scale into the floating domain."""
    return [PointD(pt.x * scale, pt.y * scale) for pt in path]


def scale_paths_to_int(paths: Sequence[Sequence[Point]], scale: float) -> Paths64:
    return [scale_path_to_int(path, scale) for path in paths]


def scale_paths_to_float(paths: Sequence[Sequence[Point]], scale: float) -> PathsD:
    return [scale_path_to_float(path, scale) for path in paths]


# =============================================================================
# NUMPY INTEROP
# =============================================================================

def path_to_array(path: Sequence[Point]) -> np.ndarray:
    """
    Convert a path to an (N, 2) array.

    Point64 paths become int64 arrays, PointD paths float64 arrays.
    """
    if path and isinstance(path[0], Point64):
        dtype = np.int64
    else:
        dtype = np.float64
    arr = np.empty((len(path), 2), dtype=dtype)
    for i, pt in enumerate(path):
        arr[i, 0] = pt.x
        arr[i, 1] = pt.y
    return arr


def path_from_array(vertices: np.ndarray) -> list:
    """
    Convert an (N, 2) array to a path.

    Integer arrays give Point64 paths, anything else PointD paths.
    """
    vertices = np.asarray(vertices)
    if np.issubdtype(vertices.dtype, np.integer):
        return [Point64(int(x), int(y)) for x, y in vertices]
    return [PointD(float(x), float(y)) for x, y in vertices]
