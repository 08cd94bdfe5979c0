"""
Collinear Trimming - Remove vertices lying exactly on their neighbours' segment.

Boolean and offset operations downstream are sensitive to zero-area edges,
so paths are conditioned here before they reach the engine. Removal cascades:
dropping one vertex can leave its kept neighbour collinear, which is then
dropped as well. Collinearity is decided by exact integer cross products.
"""

import logging
from typing import Sequence

from .geometry import (
    Path64,
    PathD,
    Point,
    cross_product,
    precision_scale,
    scale_path_to_float,
    scale_path_to_int,
)

logger = logging.getLogger(__name__)


def trim_collinear(path: Sequence[Point], is_open_path: bool = False) -> Path64:
    """
    Return a copy of path without exactly collinear vertices.

    Args:
        path: Input vertices (Point64 for exact results)
        is_open_path: Treat the path as an open polyline. Open paths keep
            their first and last vertex; closed paths are trimmed across
            the seam between the last and the first vertex.

    Returns:
        New list of vertices. Empty if the path degenerates (a closed path
        with fewer than 3 surviving vertices, or an open path whose two
        remaining points coincide).
    """
    n = len(path)
    if n < 3:
        if not is_open_path or n < 2 or path[0] == path[1]:
            return []
        return list(path)

    start = 0
    stop = n - 1

    if not is_open_path:
        # Move both ends inward until neither sits on a collinear seam
        while start != stop and cross_product(path[stop], path[start], path[start + 1]) == 0:
            start += 1
        while start != stop and cross_product(path[stop - 1], path[stop], path[start]) == 0:
            stop -= 1
        if start == stop:
            return []

    dst = [path[start]]
    for i in range(start + 1, stop):
        candidate = path[i]
        following = path[i + 1]
        if cross_product(dst[-1], candidate, following) != 0:
            dst.append(candidate)
            continue

        # candidate dropped; the kept tail may now be collinear with `following`
        while len(dst) > 1 and cross_product(dst[-2], dst[-1], following) == 0:
            dst.pop()

    if is_open_path:
        dst.append(path[stop])
        if len(dst) == 2 and dst[0] == dst[1]:
            return []
        return dst

    if cross_product(dst[-1], path[stop], dst[0]) != 0:
        dst.append(path[stop])

    # Seam triples may have become collinear after the scan
    while len(dst) >= 3:
        if cross_product(dst[-2], dst[-1], dst[0]) == 0:
            dst.pop()
        elif cross_product(dst[-1], dst[0], dst[1]) == 0:
            dst.pop(0)
        else:
            break

    if len(dst) < 3:
        return []
    return dst


def trim_collinear_d(path: Sequence[Point], precision: int,
                     is_open_path: bool = False) -> PathD:
    """
    Floating-domain trim_collinear.

    The path is scaled by 10**precision into the integer domain, trimmed
    exactly, and scaled back.

    Raises:
        ClipperError: if precision is outside [-8, 8].
    """
    scale = precision_scale(precision)
    scaled = scale_path_to_int(path, scale)
    trimmed = trim_collinear(scaled, is_open_path)
    logger.debug("trim_collinear_d: %d -> %d vertices (precision=%d)",
                 len(path), len(trimmed), precision)
    return scale_path_to_float(trimmed, 1 / scale)
