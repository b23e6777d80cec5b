"""Multi-points."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

from flatgeom.exceptions import LayoutMismatchError
from flatgeom.flat import FlatGeometry
from flatgeom.geometry.point import Point
from flatgeom.types import CoordLike
from flatgeom.utils.logging import get_logger


class MultiPoint(FlatGeometry):
    """An unordered set of points sharing one layout."""

    def set_coords(self, coords: Sequence[CoordLike]) -> Self:
        """Replace all points, one coordinate per point.

        Raises:
            StrideMismatchError: On the first coordinate of the wrong length.
        """
        self._set_flat_from(coords)
        return self

    @property
    def num_points(self) -> int:
        return self.num_coords

    def point(self, i: int) -> Point:
        """Return point ``i`` as a new Point."""
        return Point(self._layout, self.coord(i)).set_srid(self._srid)

    def push(self, point: Point) -> Self:
        """Append a point.

        Raises:
            LayoutMismatchError: If the point's layout differs.
        """
        if point.layout is not self._layout:
            get_logger(__name__).debug(
                "layout_mismatch",
                got=point.layout.name,
                want=self._layout.name,
            )
            raise LayoutMismatchError(got=point.layout, want=self._layout)
        if not point.is_empty():
            self._append(point.coord(0))
        return self
