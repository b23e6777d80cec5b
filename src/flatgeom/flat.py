"""Flat coordinate storage shared by the concrete geometry types.

Every flat geometry keeps all of its coordinates back-to-back in a single
numpy float64 buffer it owns exclusively. The buffer may be larger than the
logical coordinate count (see reserve); only the first ``num_coords * stride``
slots are meaningful.

The cached bounds are recomputed whenever the coordinates are replaced, so
they always match a from-scratch computation (see verify).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Self

import numpy as np
from numpy.typing import ArrayLike, NDArray

from flatgeom.bounds import Bounds
from flatgeom.exceptions import (
    EmptyGeometryError,
    GeometryIntegrityError,
    StrideMismatchError,
)
from flatgeom.layout import Layout
from flatgeom.types import Coord, CoordLike
from flatgeom.utils.logging import get_logger


def check_coords(coords: Sequence[CoordLike], stride: int) -> None:
    """Validate that every coordinate has the given stride.

    Raises:
        StrideMismatchError: On the first coordinate of the wrong length.
    """
    for coord in coords:
        if len(coord) != stride:
            get_logger(__name__).debug(
                "stride_mismatch",
                got=len(coord),
                want=stride,
                num_coords=len(coords),
            )
            raise StrideMismatchError(got=len(coord), want=stride)


def flatten(coords: Sequence[CoordLike], stride: int) -> NDArray[np.float64]:
    """Flatten already-validated coordinates into a new float64 buffer."""
    if len(coords) == 0:
        return np.empty(0, dtype=np.float64)
    return np.array(coords, dtype=np.float64).reshape(len(coords) * stride)


class FlatGeometry:
    """Base class for geometries stored in one contiguous coordinate buffer.

    Attributes are private; use the accessors. Subclasses decide how caller
    input maps onto the buffer by providing their own set_coords.
    """

    def __init__(self, layout: Layout) -> None:
        if layout is Layout.NO_LAYOUT:
            raise ValueError(f"{type(self).__name__} requires a layout with axes")
        self._layout = layout
        self._stride = layout.stride
        self._buf: NDArray[np.float64] = np.empty(0, dtype=np.float64)
        self._size = 0
        self._srid = 0
        self._bounds = Bounds(layout)

    @classmethod
    def from_flat(cls, layout: Layout, flat_coords: ArrayLike) -> Self:
        """Create a geometry from a flat sequence of scalars.

        The values are copied; the caller keeps ownership of its input.

        Raises:
            StrideMismatchError: If the length is not a multiple of the stride.
                ``got`` is the length of the trailing partial coordinate.
        """
        geometry = cls(layout)
        values = np.array(flat_coords, dtype=np.float64).ravel()
        if values.size % geometry._stride:
            raise StrideMismatchError(
                got=values.size % geometry._stride, want=geometry._stride
            )
        geometry._replace_buffer(values)
        return geometry

    @property
    def layout(self) -> Layout:
        """Return the coordinate layout."""
        return self._layout

    @property
    def stride(self) -> int:
        """Return the number of scalars per coordinate."""
        return self._stride

    @property
    def srid(self) -> int:
        """Return the spatial reference identifier."""
        return self._srid

    def set_srid(self, srid: int) -> Self:
        """Set the spatial reference identifier."""
        self._srid = srid
        return self

    @property
    def num_coords(self) -> int:
        """Return the number of stored coordinates."""
        return self._size // self._stride

    @property
    def capacity(self) -> int:
        """Return the number of scalar slots allocated."""
        return int(self._buf.size)

    def flat_coords(self) -> NDArray[np.float64]:
        """Return a read-only view of the stored scalars."""
        view = self._buf[: self._size]
        view.flags.writeable = False
        return view

    def coord(self, i: int) -> Coord:
        """Return coordinate ``i`` as a tuple.

        Raises:
            IndexError: If ``i`` is outside [0, num_coords).
        """
        if not 0 <= i < self.num_coords:
            raise IndexError(f"coordinate {i} out of range [0, {self.num_coords})")
        start = i * self._stride
        return tuple(self._buf[start : start + self._stride].tolist())

    def coords(self) -> list[Coord]:
        """Return all coordinates as tuples."""
        points = self._buf[: self._size].reshape(-1, self._stride)
        return [tuple(row) for row in points.tolist()]

    def bounds(self) -> Bounds:
        """Return a copy of the cached bounding box."""
        return self._bounds.clone()

    def is_empty(self) -> bool:
        """Return True if no coordinates are stored."""
        return self._size == 0

    def reserve(self, n: int) -> None:
        """Allocate room for ``n`` more coordinates.

        The coordinate count does not change.
        """
        self._ensure_capacity(self._size + n * self._stride)

    def _append(self, coord: CoordLike) -> None:
        check_coords([coord], self._stride)
        needed = self._size + self._stride
        if needed > self._buf.size:
            self._ensure_capacity(max(needed, 2 * self._buf.size))
        self._buf[self._size : needed] = coord
        self._size = needed
        self._bounds.extend_flat_coords(coord, self._layout)

    def clone(self) -> Self:
        """Return a copy that shares no storage with this geometry."""
        other = type(self)(self._layout)
        other._replace_buffer(self._buf[: self._size].copy())
        other._srid = self._srid
        return other

    def verify(self) -> None:
        """Check internal consistency.

        Raises:
            GeometryIntegrityError: If the buffer length is not a whole number
                of coordinates or the cached bounds are stale.
        """
        if self.num_coords * self._stride != self._size:
            raise GeometryIntegrityError(
                f"{self._size} scalars is not a whole number of "
                f"stride-{self._stride} coordinates"
            )
        expected = Bounds(self._layout).extend_flat_coords(
            self._buf[: self._size], self._layout
        )
        if expected != self._bounds:
            raise GeometryIntegrityError(
                f"cached bounds {self._bounds!r} differ from {expected!r}"
            )

    def _set_flat_from(self, coords: Sequence[CoordLike]) -> None:
        """Validate and store coordinates, committing nothing on failure."""
        check_coords(coords, self._stride)
        self._replace_buffer(flatten(coords, self._stride))

    def _replace_buffer(self, values: NDArray[np.float64]) -> None:
        self._buf = values
        self._size = int(values.size)
        self._bounds = Bounds(self._layout).extend_flat_coords(values, self._layout)

    def _ensure_capacity(self, slots: int) -> None:
        if slots <= self._buf.size:
            return
        grown = np.empty(slots, dtype=np.float64)
        grown[: self._size] = self._buf[: self._size]
        self._buf = grown

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatGeometry) or type(other) is not type(self):
            return NotImplemented
        return (
            self._layout is other._layout
            and self._srid == other._srid
            and np.array_equal(self._buf[: self._size], other._buf[: other._size])
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._layout.name}, {self.coords()!r})"


class FlatPath(FlatGeometry):
    """An ordered sequence of coordinates shared by line strings and rings."""

    def set_coords(self, coords: Sequence[CoordLike]) -> Self:
        """Replace all coordinates.

        Every coordinate is checked before anything is stored, so a failed
        call leaves the previous coordinates in place.

        Raises:
            StrideMismatchError: On the first coordinate of the wrong length.
        """
        self._set_flat_from(coords)
        return self

    def push_coord(self, coord: CoordLike) -> Self:
        """Append one coordinate, growing the buffer if needed.

        Raises:
            StrideMismatchError: If the coordinate has the wrong length.
        """
        self._append(coord)
        return self

    def length(self) -> float:
        """Return the planar (XY) length of the path."""
        if self.num_coords < 2:
            return 0.0
        xy = self._buf[: self._size].reshape(-1, self._stride)[:, :2]
        steps = np.diff(xy, axis=0)
        return float(np.hypot(steps[:, 0], steps[:, 1]).sum())

    def interpolate(self, value: float, axis: int) -> tuple[int, float]:
        """Locate a value along an axis whose values never decrease.

        Args:
            value: The value to locate.
            axis: Index of the axis to search (e.g. ``layout.m_index``).

        Returns:
            ``(i, fraction)`` such that the value lies ``fraction`` of the way
            from coordinate ``i`` to coordinate ``i + 1``. Values at or before
            the first coordinate give ``(0, 0.0)``; values at or past the last
            give ``(num_coords - 1, 0.0)``.

        Raises:
            EmptyGeometryError: If the path has no coordinates.
            ValueError: If ``value`` is NaN.
        """
        if math.isnan(value):
            raise ValueError("cannot interpolate a NaN value")
        if self._size == 0:
            raise EmptyGeometryError("cannot interpolate along an empty path")
        values = self._buf[: self._size].reshape(-1, self._stride)[:, axis]
        if value <= values[0]:
            return 0, 0.0
        last = len(values) - 1
        if values[last] <= value:
            return last, 0.0
        i = int(np.searchsorted(values, value, side="right")) - 1
        start = float(values[i])
        if value == start:
            return i, 0.0
        return i, (value - start) / (float(values[i + 1]) - start)
