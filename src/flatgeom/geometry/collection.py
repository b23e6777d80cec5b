"""Geometry collections.

A collection holds an ordered list of arbitrary geometries, including other
collections. Its layout and bounds are never stored: they are folded from
the members each time they are asked for.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Self

from flatgeom.bounds import Bounds
from flatgeom.config import SRIDPolicy, settings
from flatgeom.exceptions import CollectionCycleError, SRIDMismatchError
from flatgeom.layout import Layout
from flatgeom.types import Geometry
from flatgeom.utils.logging import get_logger


class GeometryCollection:
    """An ordered, heterogeneous collection of geometries.

    Members whose SRID differs from the collection's are handled according
    to ``srid_policy``:

    - ``"ignore"``: append silently.
    - ``"warn"``: log a warning and append.
    - ``"error"``: raise SRIDMismatchError and append nothing.

    When ``srid_policy`` is None the policy is read from
    ``settings.SRID_MISMATCH_POLICY`` at each push.

    Example:
        >>> gc = GeometryCollection(
        ...     Point(Layout.XY, (1, 2)),
        ...     Point(Layout.XYM, (3, 4, 5)),
        ... )
        >>> gc.layout
        <Layout.XYM: 3>
    """

    def __init__(
        self,
        *geometries: Geometry,
        srid: int = 0,
        srid_policy: SRIDPolicy | None = None,
    ) -> None:
        self._geoms: list[Geometry] = []
        self._srid = srid
        self._srid_policy = srid_policy
        if geometries:
            self.push(*geometries)

    @property
    def srid(self) -> int:
        return self._srid

    def set_srid(self, srid: int) -> Self:
        self._srid = srid
        return self

    @property
    def layout(self) -> Layout:
        """Return the smallest layout covering every member's layout."""
        layout = Layout.NO_LAYOUT
        for geometry in self._geoms:
            layout = layout.merge(geometry.layout)
        return layout

    @property
    def stride(self) -> int:
        return self.layout.stride

    @property
    def num_geoms(self) -> int:
        return len(self._geoms)

    def geom(self, i: int) -> Geometry:
        """Return member ``i``."""
        return self._geoms[i]

    def geoms(self) -> list[Geometry]:
        """Return the members in insertion order."""
        return list(self._geoms)

    def bounds(self) -> Bounds:
        """Return the bounds of all members, promoting layouts as needed."""
        bounds = Bounds(Layout.NO_LAYOUT)
        for geometry in self._geoms:
            bounds.extend(geometry)
        return bounds

    def is_empty(self) -> bool:
        """Return True if there are no members or every member is empty."""
        return all(geometry.is_empty() for geometry in self._geoms)

    def push(self, *geometries: Geometry) -> Self:
        """Append geometries in order.

        The whole batch is checked before anything is appended.

        Raises:
            CollectionCycleError: If a geometry is this collection or contains
                it at any depth.
            SRIDMismatchError: If the SRID policy is ``"error"`` and a
                geometry's SRID differs from the collection's.
        """
        policy = self._srid_policy or settings.SRID_MISMATCH_POLICY
        mismatched: list[Geometry] = []
        for geometry in geometries:
            if geometry is self or (
                isinstance(geometry, GeometryCollection) and geometry.contains(self)
            ):
                raise CollectionCycleError("a geometry collection cannot contain itself")
            if geometry.srid != self._srid:
                if policy == "error":
                    raise SRIDMismatchError(got=geometry.srid, want=self._srid)
                mismatched.append(geometry)

        if policy == "warn":
            logger = get_logger(__name__)
            for geometry in mismatched:
                logger.warning(
                    "srid_mismatch",
                    got=geometry.srid,
                    want=self._srid,
                    geometry_type=type(geometry).__name__,
                )
        self._geoms.extend(geometries)
        return self

    def contains(self, geometry: Geometry) -> bool:
        """Check whether a geometry is a member at any depth (by identity)."""
        for member in self._geoms:
            if member is geometry:
                return True
            if isinstance(member, GeometryCollection) and member.contains(geometry):
                return True
        return False

    def clone(self) -> Self:
        """Return a copy whose members are clones of this collection's members."""
        other = type(self)(srid=self._srid, srid_policy=self._srid_policy)
        other._geoms = [geometry.clone() for geometry in self._geoms]
        return other

    def __len__(self) -> int:
        return len(self._geoms)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self._geoms)

    def __repr__(self) -> str:
        return f"GeometryCollection(srid={self._srid}, geoms={self._geoms!r})"
