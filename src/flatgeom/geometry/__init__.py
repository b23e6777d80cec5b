"""Concrete geometry types.

Key Components:
    - Point, MultiPoint: single coordinates and sets of them
    - LineString, LinearRing: flat coordinate paths
    - Polygon: rings stored back-to-back with end offsets
    - GeometryCollection: ordered, nestable aggregate of any geometries

Example:
    from flatgeom.geometry import GeometryCollection, LineString, Point
    from flatgeom.layout import Layout

    ls = LineString(Layout.XYM).set_coords([(1, 2, 0), (2, 4, 1), (3, 8, 2)])
    ls.interpolate(1.5, ls.layout.m_index)  # (1, 0.5)

    gc = GeometryCollection(Point(Layout.XY, (1, 2)), ls)
    gc.bounds()  # Bounds(XYM, min=(1.0, 2.0, 0.0), max=(3.0, 8.0, 2.0))
"""

from flatgeom.geometry.collection import GeometryCollection
from flatgeom.geometry.line_string import LineString
from flatgeom.geometry.linear_ring import LinearRing
from flatgeom.geometry.multi_point import MultiPoint
from flatgeom.geometry.point import Point
from flatgeom.geometry.polygon import Polygon

__all__ = [
    "GeometryCollection",
    "LineString",
    "LinearRing",
    "MultiPoint",
    "Point",
    "Polygon",
]
