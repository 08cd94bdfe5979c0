"""
Boolean Operations - Thin facade over the pyclipper engine.

Each call builds a fresh engine, feeds it subject and clip paths and converts
the result back to Point64 paths. No clipping geometry lives here.

Floating-domain variants scale by 10**precision into the integer domain,
clip there, and scale back.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence

import pyclipper

from ..config import get_default_precision
from ..core.geometry import (
    Path64,
    Paths64,
    PathsD,
    Point,
    Point64,
    precision_scale,
    scale_paths_to_float,
    scale_paths_to_int,
)

logger = logging.getLogger(__name__)


class ClipType(Enum):
    """Boolean operation applied to subjects and clips."""
    INTERSECTION = pyclipper.CT_INTERSECTION
    UNION = pyclipper.CT_UNION
    DIFFERENCE = pyclipper.CT_DIFFERENCE
    XOR = pyclipper.CT_XOR


class FillRule(Enum):
    """Winding rule deciding which regions are filled."""
    EVEN_ODD = pyclipper.PFT_EVENODD
    NON_ZERO = pyclipper.PFT_NONZERO
    POSITIVE = pyclipper.PFT_POSITIVE
    NEGATIVE = pyclipper.PFT_NEGATIVE


# =============================================================================
# CONVERSION
# =============================================================================

def to_engine_path(path: Sequence[Point]) -> List[tuple]:
    """Point64 path -> list of (x, y) tuples for pyclipper."""
    return [(pt.x, pt.y) for pt in path]


def from_engine_path(path) -> Path64:
    """pyclipper contour -> Point64 path."""
    return [Point64(int(x), int(y)) for x, y in path]


def _add_paths(engine, paths, poly_type, closed: bool = True) -> int:
    """
    Add paths one at a time, skipping the ones the engine rejects.

    pyclipper raises ClipperException for a path it cannot use (too few
    vertices, zero area); such paths contribute nothing to the result.

    Returns:
        Number of paths accepted
    """
    added = 0
    for path in paths or ():
        if not path:
            continue
        try:
            engine.AddPath(to_engine_path(path), poly_type, closed)
            added += 1
        except pyclipper.ClipperException as exc:
            logger.debug("Skipping degenerate path (%d vertices): %s", len(path), exc)
    return added


# =============================================================================
# INTEGER DOMAIN
# =============================================================================

def boolean_op(
    clip_type: ClipType,
    fill_rule: FillRule,
    subjects: Sequence[Path64],
    clips: Optional[Sequence[Path64]] = None,
) -> Paths64:
    """
    Run one Boolean operation.

    Args:
        clip_type: Operation to perform
        fill_rule: Fill rule for both subjects and clips
        subjects: Closed subject paths
        clips: Closed clip paths (may be None for union)

    Returns:
        Result paths, in the engine's deterministic order
    """
    engine = pyclipper.Pyclipper()
    _add_paths(engine, subjects, pyclipper.PT_SUBJECT)
    _add_paths(engine, clips, pyclipper.PT_CLIP)

    solution = engine.Execute(clip_type.value, fill_rule.value, fill_rule.value)
    return [from_engine_path(path) for path in solution]


def intersect(subjects, clips, fill_rule: FillRule = FillRule.NON_ZERO) -> Paths64:
    return boolean_op(ClipType.INTERSECTION, fill_rule, subjects, clips)


def union(subjects, clips=None, fill_rule: FillRule = FillRule.NON_ZERO) -> Paths64:
    return boolean_op(ClipType.UNION, fill_rule, subjects, clips)


def difference(subjects, clips, fill_rule: FillRule = FillRule.NON_ZERO) -> Paths64:
    return boolean_op(ClipType.DIFFERENCE, fill_rule, subjects, clips)


def xor(subjects, clips, fill_rule: FillRule = FillRule.NON_ZERO) -> Paths64:
    return boolean_op(ClipType.XOR, fill_rule, subjects, clips)


# =============================================================================
# POLY TREE
# =============================================================================

def boolean_op_tree(
    clip_type: ClipType,
    fill_rule: FillRule,
    subjects: Sequence[Path64],
    clips: Optional[Sequence[Path64]] = None,
    open_subjects: Optional[Sequence[Path64]] = None,
):
    """
    Boolean operation returning the engine's nested polygon tree.

    Outer contours own their holes, holes own the islands inside them.
    Open subject paths are clipped too and appear as open leaf nodes.

    Returns:
        pyclipper.PyPolyNode root (its own Contour is empty)
    """
    engine = pyclipper.Pyclipper()
    _add_paths(engine, subjects, pyclipper.PT_SUBJECT)
    _add_paths(engine, open_subjects, pyclipper.PT_SUBJECT, closed=False)
    _add_paths(engine, clips, pyclipper.PT_CLIP)
    return engine.Execute2(clip_type.value, fill_rule.value, fill_rule.value)


def _walk_tree(tree):
    """Depth-first, parents before children, without recursion."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.Childs))


def polytree_to_paths(tree) -> Paths64:
    """Flatten the closed contours of a poly tree into a path list."""
    return [
        from_engine_path(node.Contour)
        for node in _walk_tree(tree)
        if node.Contour and not node.IsOpen
    ]


def open_paths_from_tree(tree) -> Paths64:
    """Open (polyline) results held in a poly tree."""
    return [
        from_engine_path(node.Contour)
        for node in _walk_tree(tree)
        if node.Contour and node.IsOpen
    ]


# =============================================================================
# FLOATING DOMAIN
# =============================================================================

def boolean_op_d(
    clip_type: ClipType,
    fill_rule: FillRule,
    subjects: PathsD,
    clips: Optional[PathsD] = None,
    precision: Optional[int] = None,
) -> PathsD:
    """
    Floating-domain boolean_op.

    Raises:
        ClipperError: if precision is outside [-8, 8].
    """
    if precision is None:
        precision = get_default_precision()
    scale = precision_scale(precision)

    result = boolean_op(
        clip_type,
        fill_rule,
        scale_paths_to_int(subjects, scale),
        scale_paths_to_int(clips or [], scale),
    )
    return scale_paths_to_float(result, 1 / scale)


def intersect_d(subjects, clips, fill_rule: FillRule = FillRule.NON_ZERO,
                precision: Optional[int] = None) -> PathsD:
    return boolean_op_d(ClipType.INTERSECTION, fill_rule, subjects, clips, precision)


def union_d(subjects, clips=None, fill_rule: FillRule = FillRule.NON_ZERO,
            precision: Optional[int] = None) -> PathsD:
    return boolean_op_d(ClipType.UNION, fill_rule, subjects, clips, precision)


def difference_d(subjects, clips, fill_rule: FillRule = FillRule.NON_ZERO,
                 precision: Optional[int] = None) -> PathsD:
    return boolean_op_d(ClipType.DIFFERENCE, fill_rule, subjects, clips, precision)


def xor_d(subjects, clips, fill_rule: FillRule = FillRule.NON_ZERO,
          precision: Optional[int] = None) -> PathsD:
    return boolean_op_d(ClipType.XOR, fill_rule, subjects, clips, precision)
