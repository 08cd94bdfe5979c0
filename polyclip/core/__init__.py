"""
Core module - Exact geometric primitives, containment, trimming and bounds.
"""

from .geometry import (
    ClipperError,
    Point64,
    PointD,
    Rect64,
    RectD,
    area,
    check_precision,
    cross_product,
    max_invalid_rect64,
    max_invalid_rectd,
    path_from_array,
    path_to_array,
    scale_path_to_float,
    scale_path_to_int,
    scale_paths_to_float,
    scale_paths_to_int,
    translate_path,
    translate_paths,
)

from .point_in_polygon import (
    PointInPolygonResult,
    point_in_polygon,
    points_in_polygon,
)

from .trim import (
    trim_collinear,
    trim_collinear_d,
)

from .bounding_box import (
    compute_bounds_array,
    get_bounds,
    get_bounds_paths,
)

__all__ = [
    'ClipperError',
    'Point64',
    'PointD',
    'Rect64',
    'RectD',
    'area',
    'check_precision',
    'cross_product',
    'max_invalid_rect64',
    'max_invalid_rectd',
    'path_from_array',
    'path_to_array',
    'scale_path_to_float',
    'scale_path_to_int',
    'scale_paths_to_float',
    'scale_paths_to_int',
    'translate_path',
    'translate_paths',
    'PointInPolygonResult',
    'point_in_polygon',
    'points_in_polygon',
    'trim_collinear',
    'trim_collinear_d',
    'compute_bounds_array',
    'get_bounds',
    'get_bounds_paths',
]
