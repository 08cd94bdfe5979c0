"""
Engine module - Boolean and offset facades over pyclipper.
"""

from .boolean import (
    ClipType,
    FillRule,
    boolean_op,
    boolean_op_d,
    boolean_op_tree,
    difference,
    difference_d,
    intersect,
    intersect_d,
    open_paths_from_tree,
    polytree_to_paths,
    union,
    union_d,
    xor,
    xor_d,
)

from .offset import (
    EndType,
    JoinType,
    inflate_paths,
    inflate_paths_d,
    is_full_open_end_type,
)

__all__ = [
    'ClipType',
    'FillRule',
    'boolean_op',
    'boolean_op_d',
    'boolean_op_tree',
    'difference',
    'difference_d',
    'intersect',
    'intersect_d',
    'open_paths_from_tree',
    'polytree_to_paths',
    'union',
    'union_d',
    'xor',
    'xor_d',
    'EndType',
    'JoinType',
    'inflate_paths',
    'inflate_paths_d',
    'is_full_open_end_type',
]
