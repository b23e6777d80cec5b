"""Custom exceptions for geometry operations.

Every exception derives from GeomError and also from the builtin exception
that describes the failure, so callers may catch either one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flatgeom.layout import Layout


class GeomError(Exception):
    """Base exception for all geometry errors."""


class ArityError(GeomError, TypeError):
    """Raised when Bounds.set receives the wrong number of scalars.

    This is a caller bug, not bad input data.
    """

    def __init__(self, got: int, want: int) -> None:
        """Initialize arity error.

        Args:
            got: Number of scalar arguments received.
            want: Number of scalar arguments required (2 * stride).
        """
        self.got = got
        self.want = want
        super().__init__(f"expected {want} scalar arguments, got {got}")


class StrideMismatchError(GeomError, ValueError):
    """Raised when a coordinate's length disagrees with the layout stride.

    Attributes:
        got: Observed coordinate length.
        want: Stride required by the layout in force.
    """

    def __init__(self, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(f"stride mismatch, got {got}, want {want}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrideMismatchError):
            return NotImplemented
        return (self.got, self.want) == (other.got, other.want)

    def __hash__(self) -> int:
        return hash((type(self), self.got, self.want))


class LayoutMismatchError(GeomError, ValueError):
    """Raised when a component's layout differs from its container's."""

    def __init__(self, got: Layout, want: Layout) -> None:
        self.got = got
        self.want = want
        super().__init__(f"layout mismatch, got {got.name}, want {want.name}")


class SRIDMismatchError(GeomError, ValueError):
    """Raised when a collection member's SRID differs from the collection's."""

    def __init__(self, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(f"SRID mismatch, got {got}, want {want}")


class CollectionCycleError(GeomError, ValueError):
    """Raised when a collection would end up containing itself."""


class EmptyGeometryError(GeomError, ValueError):
    """Raised when an operation needs at least one coordinate."""


class GeometryIntegrityError(GeomError):
    """Raised by verify() when a geometry's internal state is inconsistent."""
