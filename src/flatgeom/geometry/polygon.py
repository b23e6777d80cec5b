"""Polygons.

A polygon stores all of its rings back-to-back in one flat buffer, with an
``ends`` list giving the scalar offset just past each ring. The first ring
is the outer boundary; any further rings are holes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

import numpy as np
from numpy.typing import ArrayLike

from flatgeom.exceptions import GeometryIntegrityError, LayoutMismatchError
from flatgeom.flat import FlatGeometry, check_coords, flatten
from flatgeom.geometry.linear_ring import LinearRing
from flatgeom.layout import Layout
from flatgeom.types import Coord, CoordLike
from flatgeom.utils.logging import get_logger


class Polygon(FlatGeometry):
    """A surface bounded by an outer ring and zero or more holes."""

    def __init__(self, layout: Layout) -> None:
        super().__init__(layout)
        self._ends: list[int] = []

    @classmethod
    def from_flat(
        cls,
        layout: Layout,
        flat_coords: ArrayLike,
        ends: Sequence[int] | None = None,
    ) -> Self:
        """Create a polygon from a flat buffer and ring end offsets.

        Without ``ends`` a non-empty buffer is treated as a single ring.
        """
        polygon = super().from_flat(layout, flat_coords)
        if ends is None:
            ends = [polygon._size] if polygon._size else []
        polygon._ends = list(ends)
        polygon.verify()
        return polygon

    @property
    def ends(self) -> tuple[int, ...]:
        """Return the scalar offset just past each ring."""
        return tuple(self._ends)

    @property
    def num_linear_rings(self) -> int:
        return len(self._ends)

    def set_coords(self, rings: Sequence[Sequence[CoordLike]]) -> Self:
        """Replace all rings.

        Every coordinate of every ring is checked before anything is stored.

        Raises:
            StrideMismatchError: On the first coordinate of the wrong length.
        """
        for ring in rings:
            check_coords(ring, self._stride)
        ends: list[int] = []
        offset = 0
        for ring in rings:
            offset += len(ring) * self._stride
            ends.append(offset)
        parts = [flatten(ring, self._stride) for ring in rings]
        self._replace_buffer(
            np.concatenate(parts) if parts else np.empty(0, dtype=np.float64)
        )
        self._ends = ends
        return self

    def coords(self) -> list[list[Coord]]:  # type: ignore[override]
        """Return the coordinates of every ring."""
        return [self.linear_ring(i).coords() for i in range(self.num_linear_rings)]

    def linear_ring(self, i: int) -> LinearRing:
        """Return ring ``i`` as a new LinearRing owning a copy of its coordinates.

        Raises:
            IndexError: If ``i`` is outside [0, num_linear_rings).
        """
        if not 0 <= i < len(self._ends):
            raise IndexError(f"ring {i} out of range [0, {len(self._ends)})")
        start = self._ends[i - 1] if i > 0 else 0
        return LinearRing.from_flat(self._layout, self._buf[start : self._ends[i]])

    def push(self, ring: LinearRing) -> Self:
        """Append a ring.

        Raises:
            LayoutMismatchError: If the ring's layout differs.
        """
        if ring.layout is not self._layout:
            get_logger(__name__).debug(
                "layout_mismatch",
                got=ring.layout.name,
                want=self._layout.name,
            )
            raise LayoutMismatchError(got=ring.layout, want=self._layout)
        self.reserve(ring.num_coords)
        for coord in ring.coords():
            self._append(coord)
        self._ends.append(self._size)
        return self

    def area(self) -> float:
        """Return the area of the outer ring minus the area of its holes."""
        if not self._ends:
            return 0.0
        rings = [self.linear_ring(i).area() for i in range(self.num_linear_rings)]
        return rings[0] - sum(rings[1:])

    def length(self) -> float:
        """Return the total length of all rings."""
        return sum(self.linear_ring(i).length() for i in range(self.num_linear_rings))

    def clone(self) -> Self:
        other = super().clone()
        other._ends = list(self._ends)
        return other

    def verify(self) -> None:
        super().verify()
        previous = 0
        for end in self._ends:
            if end < previous or end % self._stride:
                raise GeometryIntegrityError(f"invalid ring ends {self._ends}")
            previous = end
        if previous != self._size:
            raise GeometryIntegrityError(
                f"ring ends {self._ends} do not cover {self._size} scalars"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return super().__eq__(other) and self._ends == other._ends

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polygon({self._layout.name}, {self.coords()!r})"

