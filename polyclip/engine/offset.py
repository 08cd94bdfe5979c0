"""
Path Offsetting - Inflate/deflate paths through pyclipper's offset engine.

The floating-domain entry point validates its precision before doing any
work, rescales into the integer domain, delegates and rescales the result.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

import pyclipper

from ..config import CONFIG, get_default_precision
from ..core.geometry import (
    Path64,
    Paths64,
    PathsD,
    precision_scale,
    scale_paths_to_float,
    scale_paths_to_int,
)
from .boolean import from_engine_path, to_engine_path

logger = logging.getLogger(__name__)


class JoinType(Enum):
    """Corner treatment where two offset edges meet."""
    SQUARE = pyclipper.JT_SQUARE
    ROUND = pyclipper.JT_ROUND
    MITER = pyclipper.JT_MITER


class EndType(Enum):
    """How path ends are treated."""
    POLYGON = pyclipper.ET_CLOSEDPOLYGON   # closed, filled
    JOINED = pyclipper.ET_CLOSEDLINE       # closed polyline outline
    BUTT = pyclipper.ET_OPENBUTT
    SQUARE = pyclipper.ET_OPENSQUARE
    ROUND = pyclipper.ET_OPENROUND


def is_full_open_end_type(end_type: EndType) -> bool:
    """True for end types that treat the path as an open polyline."""
    return end_type not in (EndType.POLYGON, EndType.JOINED)


def inflate_paths(
    paths: Sequence[Path64],
    delta: float,
    join_type: JoinType,
    end_type: EndType,
    miter_limit: Optional[float] = None,
    arc_tolerance: Optional[float] = None,
) -> Paths64:
    """
    Offset integer paths by delta (negative delta shrinks closed paths).

    Args:
        paths: Input paths
        delta: Offset distance in integer units
        join_type: Corner style
        end_type: End style, also decides open vs closed treatment
        miter_limit: Max miter length as a multiple of delta
        arc_tolerance: Max deviation of rounded joins from the true arc

    Returns:
        Offset paths
    """
    if miter_limit is None:
        miter_limit = CONFIG.offset.miter_limit
    if arc_tolerance is None:
        arc_tolerance = CONFIG.offset.arc_tolerance

    offsetter = pyclipper.PyclipperOffset(miter_limit, arc_tolerance)
    for path in paths:
        if path:
            offsetter.AddPath(to_engine_path(path), join_type.value, end_type.value)

    solution = offsetter.Execute(delta)
    logger.debug("inflate_paths: %d paths in, %d out (delta=%s)",
                 len(paths), len(solution), delta)
    return [from_engine_path(path) for path in solution]


def inflate_paths_d(
    paths: PathsD,
    delta: float,
    join_type: JoinType,
    end_type: EndType,
    miter_limit: Optional[float] = None,
    precision: Optional[int] = None,
) -> PathsD:
    """
    Floating-domain inflate_paths.

    Raises:
        ClipperError: if precision is outside [-8, 8]. Checked before any
            path is touched.
    """
    if precision is None:
        precision = get_default_precision()
    scale = precision_scale(precision)

    result = inflate_paths(
        scale_paths_to_int(paths, scale),
        delta * scale,
        join_type,
        end_type,
        miter_limit,
    )
    return scale_paths_to_float(result, 1 / scale)
