"""Points."""

from __future__ import annotations

from typing import Self

import numpy as np

from flatgeom.flat import FlatGeometry
from flatgeom.layout import Layout
from flatgeom.types import CoordLike


class Point(FlatGeometry):
    """A single coordinate.

    A new Point sits at the origin of its layout (all zeros). Use
    ``Point.new_empty`` for a point with no coordinate at all.

    Attributes:
        x: First axis value.
        y: Second axis value.
        z: Z value, or 0.0 if the layout has no Z axis.
        m: M value, or 0.0 if the layout has no M axis.
    """

    def __init__(self, layout: Layout, coord: CoordLike | None = None) -> None:
        super().__init__(layout)
        if coord is None:
            self._replace_buffer(np.zeros(self._stride, dtype=np.float64))
        else:
            self.set_coords(coord)

    @classmethod
    def new_empty(cls, layout: Layout) -> Self:
        """Create a point that holds no coordinate."""
        point = cls(layout)
        point._replace_buffer(np.empty(0, dtype=np.float64))
        return point

    def set_coords(self, coord: CoordLike) -> Self:
        """Replace the point's coordinate.

        Raises:
            StrideMismatchError: If the coordinate has the wrong length.
        """
        self._set_flat_from([coord])
        return self

    def _axis(self, index: int | None) -> float:
        if index is None or self._size == 0:
            return 0.0
        return float(self._buf[index])

    @property
    def x(self) -> float:
        return self._axis(0)

    @property
    def y(self) -> float:
        return self._axis(1)

    @property
    def z(self) -> float:
        return self._axis(self._layout.z_index)

    @property
    def m(self) -> float:
        return self._axis(self._layout.m_index)
