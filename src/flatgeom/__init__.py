"""flatgeom: coordinate layouts, flat coordinate buffers and bounding boxes.

This package is the data model that geometry codecs, predicates and spatial
indexes build on. It provides:

    - Layout: which axes (X, Y, Z, M) a coordinate carries, and their order
    - Bounds: axis-aligned boxes with layout-promoting extension
    - Flat geometries: points, paths, rings and polygons stored in one
      contiguous buffer each
    - GeometryCollection: nestable aggregates with derived layout and bounds

Example:
    from flatgeom import Bounds, Layout, LineString

    ls = LineString(Layout.XY).set_coords([(1, 2), (3, 4), (5, 6)])
    ls.bounds() == Bounds(Layout.XY).set(1, 2, 5, 6)  # True
"""

from flatgeom.bounds import Bounds
from flatgeom.exceptions import (
    ArityError,
    CollectionCycleError,
    EmptyGeometryError,
    GeomError,
    GeometryIntegrityError,
    LayoutMismatchError,
    SRIDMismatchError,
    StrideMismatchError,
)
from flatgeom.flat import FlatGeometry, FlatPath
from flatgeom.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiPoint,
    Point,
    Polygon,
)
from flatgeom.layout import Layout
from flatgeom.types import Coord, Geometry

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "Bounds",
    "CollectionCycleError",
    "Coord",
    "EmptyGeometryError",
    "FlatGeometry",
    "FlatPath",
    "GeomError",
    "Geometry",
    "GeometryCollection",
    "GeometryIntegrityError",
    "LayoutMismatchError",
    "LineString",
    "LinearRing",
    "Layout",
    "MultiPoint",
    "Point",
    "Polygon",
    "SRIDMismatchError",
    "StrideMismatchError",
    "__version__",
]
