"""Unit tests for geometry exceptions."""

from __future__ import annotations

import pytest

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
from flatgeom.layout import Layout


class TestStrideMismatchError:
    """Tests for StrideMismatchError."""

    def test_carries_got_and_want(self) -> None:
        """Test the error exposes observed and expected stride."""
        error = StrideMismatchError(got=3, want=2)
        assert error.got == 3
        assert error.want == 2
        assert str(error) == "stride mismatch, got 3, want 2"

    def test_equality(self) -> None:
        """Test errors compare by got and want."""
        assert StrideMismatchError(got=3, want=2) == StrideMismatchError(got=3, want=2)
        assert StrideMismatchError(got=1, want=2) != StrideMismatchError(got=3, want=2)

    def test_is_value_error(self) -> None:
        """Test callers can catch it as ValueError."""
        with pytest.raises(ValueError, match="got 0, want 4"):
            raise StrideMismatchError(got=0, want=4)


class TestArityError:
    """Tests for ArityError."""

    def test_is_type_error(self) -> None:
        """Test ArityError is both a GeomError and a TypeError."""
        error = ArityError(got=5, want=4)
        assert isinstance(error, GeomError)
        assert isinstance(error, TypeError)
        assert "expected 4 scalar arguments, got 5" in str(error)


class TestMismatchErrors:
    """Tests for layout and SRID mismatch errors."""

    def test_layout_mismatch_message(self) -> None:
        """Test the message names both layouts."""
        error = LayoutMismatchError(got=Layout.XYZ, want=Layout.XY)
        assert error.got is Layout.XYZ
        assert error.want is Layout.XY
        assert str(error) == "layout mismatch, got XYZ, want XY"

    def test_srid_mismatch_message(self) -> None:
        """Test the message names both SRIDs."""
        error = SRIDMismatchError(got=3857, want=4326)
        assert (error.got, error.want) == (3857, 4326)
        assert "got 3857, want 4326" in str(error)


@pytest.mark.parametrize(
    "error_type",
    [
        ArityError,
        CollectionCycleError,
        EmptyGeometryError,
        GeometryIntegrityError,
        LayoutMismatchError,
        SRIDMismatchError,
        StrideMismatchError,
    ],
)
def test_all_errors_derive_from_geom_error(error_type: type[Exception]) -> None:
    """Test every exception can be caught as GeomError."""
    assert issubclass(error_type, GeomError)
