"""Axis-aligned bounding boxes over a coordinate layout.

A Bounds is mutable and owned by whoever holds it; geometries hand out
clones of their cached box rather than the box itself. All comparisons are
exact: there is no epsilon tolerance anywhere in this module.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from flatgeom.exceptions import ArityError, StrideMismatchError
from flatgeom.layout import Layout
from flatgeom.types import Coord, CoordLike, Geometry

if TYPE_CHECKING:
    from flatgeom.geometry.polygon import Polygon


class Bounds:
    """A bounding box with one [min, max] interval per axis of its layout.

    A freshly created box has min = +inf and max = -inf on every axis, so it
    is empty until extended or set. Emptiness is decided per axis: the box is
    empty if any axis has min > max. A zero-extent box (min == max) is not
    empty.

    Example:
        >>> b = Bounds(Layout.XY).set_coords((20, 0), (0, 20))
        >>> b.min, b.max
        ((0.0, 0.0), (20.0, 20.0))
    """

    __slots__ = ("_layout", "_max", "_min")

    def __init__(self, layout: Layout = Layout.NO_LAYOUT) -> None:
        self._layout = layout
        self._min: list[float] = [math.inf] * layout.stride
        self._max: list[float] = [-math.inf] * layout.stride

    @property
    def layout(self) -> Layout:
        """Return the layout of the box."""
        return self._layout

    @property
    def stride(self) -> int:
        """Return the number of axes of the box."""
        return self._layout.stride

    @property
    def min(self) -> Coord:
        """Return the minimum corner."""
        return tuple(self._min)

    @property
    def max(self) -> Coord:
        """Return the maximum corner."""
        return tuple(self._max)

    def min_at(self, axis: int) -> float:
        """Return the lower bound on one axis."""
        return self._min[axis]

    def max_at(self, axis: int) -> float:
        """Return the upper bound on one axis."""
        return self._max[axis]

    def clone(self) -> Bounds:
        """Return an independent copy of this box."""
        other = Bounds.__new__(Bounds)
        other._layout = self._layout
        other._min = list(self._min)
        other._max = list(self._max)
        return other

    def set(self, *values: float) -> Bounds:
        """Set the box from 2 * stride scalars: the min corner, then the max.

        Values are stored as given, without reordering.

        Raises:
            ArityError: If the number of values is not exactly 2 * stride.
        """
        stride = self._layout.stride
        if len(values) != 2 * stride:
            raise ArityError(got=len(values), want=2 * stride)
        self._min = [float(v) for v in values[:stride]]
        self._max = [float(v) for v in values[stride:]]
        return self

    def set_coords(self, min_coord: CoordLike, max_coord: CoordLike) -> Bounds:
        """Set the box to span two corner coordinates.

        The corners may be given in any order: each axis takes the smaller
        value as its min and the larger as its max. A NO_LAYOUT box adopts
        the layout implied by the corners' length.

        Raises:
            StrideMismatchError: If the corners differ in length, or their
                length differs from the stride of the box's layout.
        """
        if len(min_coord) != len(max_coord):
            raise StrideMismatchError(got=len(max_coord), want=len(min_coord))
        stride = len(min_coord)
        if self._layout is Layout.NO_LAYOUT:
            self._layout = Layout.from_stride(stride)
        elif stride != self._layout.stride:
            raise StrideMismatchError(got=stride, want=self._layout.stride)
        pairs = [(float(a), float(b)) for a, b in zip(min_coord, max_coord, strict=True)]
        self._min = [min(a, b) for a, b in pairs]
        self._max = [max(a, b) for a, b in pairs]
        return self

    def extend(self, geometry: Geometry) -> Bounds:
        """Grow the box to cover a geometry, promoting the layout if needed.

        Axes the box already carried are widened by the geometry's extent on
        that axis, or left alone if the geometry lacks the axis. Axes that
        only the geometry carries are born at exactly the geometry's extent.

        Returns:
            This box, so extensions can be chained.
        """
        other = geometry.bounds()
        return self._extend_axes(other._layout, other._min, other._max)

    def extend_flat_coords(self, flat_coords: ArrayLike, layout: Layout) -> Bounds:
        """Grow the box to cover a flat coordinate buffer of a given layout.

        Raises:
            StrideMismatchError: If the buffer length is not a multiple of
                the layout's stride.
        """
        stride = layout.stride
        values = np.asarray(flat_coords, dtype=np.float64).ravel()
        if stride == 0 or values.size == 0:
            return self._extend_axes(layout, [math.inf] * stride, [-math.inf] * stride)
        if values.size % stride:
            raise StrideMismatchError(got=values.size % stride, want=stride)
        points = values.reshape(-1, stride)
        return self._extend_axes(
            layout,
            points.min(axis=0).tolist(),
            points.max(axis=0).tolist(),
        )

    def _extend_axes(
        self,
        layout: Layout,
        mins: Sequence[float],
        maxs: Sequence[float],
    ) -> Bounds:
        merged = self._layout.merge(layout)
        new_min: list[float] = []
        new_max: list[float] = []
        for axis in merged.axes:
            own = self._layout.axis_index(axis)
            incoming = layout.axis_index(axis)
            if own is not None:
                lo, hi = self._min[own], self._max[own]
                if incoming is not None:
                    lo = min(lo, mins[incoming])
                    hi = max(hi, maxs[incoming])
            elif incoming is not None:
                lo, hi = mins[incoming], maxs[incoming]
            else:
                lo, hi = math.inf, -math.inf
            new_min.append(lo)
            new_max.append(hi)
        self._layout = merged
        self._min = new_min
        self._max = new_max
        return self

    def is_empty(self) -> bool:
        """Return True if the box covers no point.

        A NO_LAYOUT box has never been given coordinates and is empty.
        """
        if self._layout is Layout.NO_LAYOUT:
            return True
        return any(lo > hi for lo, hi in zip(self._min, self._max, strict=True))

    def overlaps(self, layout: Layout, other: Bounds) -> bool:
        """Check whether two boxes intersect on every axis of a layout.

        Touching boxes overlap; a gap of any nonzero size does not.
        """
        for i in range(layout.stride):
            if self._min[i] > other._max[i] or other._min[i] > self._max[i]:
                return False
        return True

    def overlaps_point(self, layout: Layout, coord: CoordLike) -> bool:
        """Check whether a coordinate lies inside the box on every axis of a layout."""
        return all(
            self._min[i] <= coord[i] <= self._max[i] for i in range(layout.stride)
        )

    def polygon(self) -> Polygon:
        """Return the XY rectangle of this box as a single-ring polygon.

        Z and M are dropped. An empty box yields a polygon with no rings.
        """
        from flatgeom.geometry.polygon import Polygon

        if self.is_empty():
            return Polygon(Layout.XY)
        x1, y1 = self._min[0], self._min[1]
        x2, y2 = self._max[0], self._max[1]
        ring = [(x1, y1), (x1, y2), (x2, y2), (x2, y1), (x1, y1)]
        return Polygon(Layout.XY).set_coords([ring])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return (
            self._layout is other._layout
            and self._min == other._min
            and self._max == other._max
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bounds({self._layout.name}, min={self.min}, max={self.max})"
