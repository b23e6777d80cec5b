"""Type definitions shared across the geometry model.

Contains the Coord value type and the Geometry protocol that every concrete
geometry, including collections, satisfies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, Self, TypeAlias

if TYPE_CHECKING:
    from flatgeom.bounds import Bounds
    from flatgeom.layout import Layout

# A coordinate is a plain tuple of floats. It carries no layout of its own;
# its length must match the stride of whichever layout is in force.
Coord: TypeAlias = tuple[float, ...]

# Anything accepted where a coordinate is read from caller input.
CoordLike: TypeAlias = Sequence[float]


class Geometry(Protocol):
    """Protocol for values that can be members of a GeometryCollection.

    Bounds.extend and GeometryCollection only rely on this interface, so
    external geometry types can take part as long as they provide it.
    Coordinate access (num_coords, coord) is not part of it: collection
    members may have different layouts, so only flat geometries offer it.
    """

    @property
    def layout(self) -> Layout:
        """Return the coordinate layout."""
        ...

    @property
    def stride(self) -> int:
        """Return the number of scalars per coordinate."""
        ...

    @property
    def srid(self) -> int:
        """Return the spatial reference identifier."""
        ...

    def bounds(self) -> Bounds:
        """Return a bounding box the caller may mutate freely."""
        ...

    def is_empty(self) -> bool:
        """Return True if the geometry holds no coordinates."""
        ...

    def clone(self) -> Self:
        """Return a deep copy sharing no storage with this geometry."""
        ...
