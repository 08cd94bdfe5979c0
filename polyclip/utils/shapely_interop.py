"""
Shapely Interop - Move paths and poly trees in and out of shapely geometries.
"""

from typing import Sequence

from shapely.geometry import MultiPolygon, Polygon

from ..core.geometry import PathD, PathsD, Point, PointD


def path_to_polygon(path: Sequence[Point], scale: float = 1.0) -> Polygon:
    """Closed path -> shapely Polygon (no holes)."""
    return Polygon([(pt.x * scale, pt.y * scale) for pt in path])


def paths_to_shapely(paths: Sequence[Sequence[Point]], scale: float = 1.0) -> MultiPolygon:
    """
    Closed paths -> MultiPolygon, one polygon per path.

    Paths are taken as independent shells; use polytree_to_shapely when
    holes must be attached to their owners.
    """
    return MultiPolygon([path_to_polygon(path, scale) for path in paths if len(path) >= 3])


def polytree_to_shapely(tree, scale: float = 1.0) -> MultiPolygon:
    """
    pyclipper poly tree -> MultiPolygon with holes.

    Every outer contour becomes a shell, its children become its holes,
    and islands nested inside those holes become further polygons.
    """
    def ring(contour):
        return [(x * scale, y * scale) for x, y in contour]

    polygons = []
    stack = list(reversed(tree.Childs))
    while stack:
        outer = stack.pop()
        if outer.IsOpen or not outer.Contour:
            continue
        holes = [ring(hole.Contour) for hole in outer.Childs]
        polygons.append(Polygon(ring(outer.Contour), holes))
        for hole in reversed(outer.Childs):
            stack.extend(reversed(hole.Childs))
    return MultiPolygon(polygons)


def _ring_to_path(coords) -> PathD:
    pts = [PointD(float(x), float(y)) for x, y in coords]
    # shapely repeats the first coordinate at the end
    if len(pts) > 1 and pts[0] == pts[-1]:
        pts.pop()
    return pts


def paths_from_shapely(geom) -> PathsD:
    """
    Polygonal shapely geometry -> floating paths.

    Exterior rings come first, each followed by its interior rings.
    """
    if geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        polygons = [geom]
    elif hasattr(geom, 'geoms'):
        polygons = [g for g in geom.geoms if isinstance(g, Polygon)]
    else:
        raise TypeError(f"Expected a polygonal geometry, got {geom.geom_type}")

    paths = []
    for poly in polygons:
        paths.append(_ring_to_path(poly.exterior.coords))
        for interior in poly.interiors:
            paths.append(_ring_to_path(interior.coords))
    return paths
