"""
Visualization - Plot paths and point classifications for debugging.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from ..core.bounding_box import get_bounds_paths
from ..core.geometry import Point, path_to_array
from ..core.point_in_polygon import PointInPolygonResult, point_in_polygon

logger = logging.getLogger(__name__)

# Marker colour per classification result
RESULT_COLORS = {
    PointInPolygonResult.IS_INSIDE: 'green',
    PointInPolygonResult.IS_OUTSIDE: 'red',
    PointInPolygonResult.IS_ON: 'orange',
}


def plot_paths(
    paths: Sequence[Sequence[Point]],
    ax=None,
    title: Optional[str] = None,
    closed: bool = True,
    show_bounds: bool = True,
    show_vertices: bool = False,
    colors: Optional[List[str]] = None,
    figsize: Tuple[int, int] = (8, 8),
):
    """
    Plot a collection of paths.

    Args:
        paths: Paths to draw
        ax: Matplotlib axes (creates new if None)
        title: Plot title
        closed: Draw as filled polygons, otherwise as polylines
        show_bounds: Draw the bounding rect of all paths
        show_vertices: Mark each vertex
        colors: Custom colour per path
        figsize: Figure size if creating new figure

    Returns:
        ax: Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)

    patches = []
    facecolors = []
    n = len(paths)
    for i, path in enumerate(paths):
        if not path:
            continue
        verts = path_to_array(path).astype(np.float64)
        color = colors[i] if colors is not None else plt.cm.viridis(i / max(n - 1, 1))

        if closed and len(verts) >= 3:
            patches.append(MplPolygon(verts, closed=True))
            facecolors.append(color)
        else:
            ax.plot(verts[:, 0], verts[:, 1], color=color, linewidth=1.5)

        if show_vertices:
            ax.scatter(verts[:, 0], verts[:, 1], s=12, color='black', zorder=3)

    if patches:
        collection = PatchCollection(
            patches,
            facecolors=facecolors,
            edgecolors='black',
            linewidths=0.8,
            alpha=0.5,
        )
        ax.add_collection(collection)

    rect = get_bounds_paths(paths)
    if not rect.is_empty() and (rect.width or rect.height):
        if show_bounds:
            ax.add_patch(plt.Rectangle(
                (rect.left, rect.top),
                rect.width, rect.height,
                fill=False,
                edgecolor='blue',
                linestyle='--',
                linewidth=1,
            ))
        padding = 0.05 * max(rect.width, rect.height)
        ax.set_xlim(rect.left - padding, rect.right + padding)
        ax.set_ylim(rect.top - padding, rect.bottom + padding)

    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.set_title(title if title is not None else f"{n} paths")
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    return ax


def plot_point_classification(
    polygon: Sequence[Point],
    points: Sequence[Point],
    ax=None,
    save_path: Optional[str] = None,
):
    """
    Draw a polygon and colour each query point by its classification.

    Returns:
        ax: Matplotlib axes
    """
    ax = plot_paths([polygon], ax=ax, title="Point classification", show_bounds=False)

    for pt in points:
        result = point_in_polygon(pt, polygon)
        ax.scatter([pt.x], [pt.y], s=30, color=RESULT_COLORS[result], zorder=4)

    if save_path:
        ax.figure.savefig(save_path, dpi=150, bbox_inches='tight')
        logger.info("Saved figure to %s", save_path)

    return ax
