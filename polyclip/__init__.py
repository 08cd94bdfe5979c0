"""
polyclip - Exact 2-D polygon primitives around a clipping engine.

Point-in-polygon classification, collinear trimming, bounds, integer/floating
scaling, path literals, and Boolean/offset facades over pyclipper.
"""

from .config import CONFIG
from .core import (
    ClipperError,
    Point64,
    PointD,
    PointInPolygonResult,
    Rect64,
    RectD,
    get_bounds,
    get_bounds_paths,
    point_in_polygon,
    points_in_polygon,
    trim_collinear,
    trim_collinear_d,
)
from .engine import (
    ClipType,
    EndType,
    FillRule,
    JoinType,
    boolean_op,
    difference,
    inflate_paths,
    inflate_paths_d,
    intersect,
    union,
    xor,
)
from .utils import make_path, make_path_d

__version__ = "0.1.0"


def warmup():
    """Compile all numba kernels ahead of first use."""
    from .core.bounding_box import warmup as warmup_bounds
    from .core.point_in_polygon import warmup as warmup_pip

    warmup_pip()
    warmup_bounds()


__all__ = [
    'CONFIG',
    'ClipperError',
    'Point64',
    'PointD',
    'PointInPolygonResult',
    'Rect64',
    'RectD',
    'get_bounds',
    'get_bounds_paths',
    'point_in_polygon',
    'points_in_polygon',
    'trim_collinear',
    'trim_collinear_d',
    'ClipType',
    'EndType',
    'FillRule',
    'JoinType',
    'boolean_op',
    'difference',
    'inflate_paths',
    'inflate_paths_d',
    'intersect',
    'union',
    'xor',
    'make_path',
    'make_path_d',
    'warmup',
]
