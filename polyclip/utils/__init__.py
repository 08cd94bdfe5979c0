"""
Utilities module - Path literals, shapely interop and plotting.
"""

from .path_parser import make_path, make_path_d, path_to_string, paths_to_string
from .shapely_interop import (
    path_to_polygon,
    paths_from_shapely,
    paths_to_shapely,
    polytree_to_shapely,
)
from .visualization import plot_paths, plot_point_classification

__all__ = [
    'make_path',
    'make_path_d',
    'path_to_string',
    'paths_to_string',
    'path_to_polygon',
    'paths_from_shapely',
    'paths_to_shapely',
    'polytree_to_shapely',
    'plot_paths',
    'plot_point_classification',
]
