"""Unit tests for Bounds.

Tests Bounds including:
- Extension with layout promotion
- Exact emptiness and overlap predicates
- set() / set_coords() construction
- Derivation of the rectangle polygon
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from flatgeom import (
    ArityError,
    Bounds,
    GeometryCollection,
    Layout,
    LineString,
    MultiPoint,
    Point,
    Polygon,
    StrideMismatchError,
)
from flatgeom.types import Geometry


def _box(layout: Layout, lo: tuple[float, ...], hi: tuple[float, ...]) -> Bounds:
    """Build a box with min/max stored exactly as given."""
    return Bounds(layout).set(*lo, *hi)


class TestBoundsExtend:
    """Tests for Bounds.extend."""

    @pytest.mark.parametrize(
        ("bounds", "geometry", "expected"),
        [
            (
                Bounds(Layout.XY).set_coords((0, 0), (0, 0)),
                Point(Layout.XY, (10, -10)),
                Bounds(Layout.XY).set_coords((0, -10), (10, 0)),
            ),
            (
                Bounds(Layout.XY).set_coords((-100, -100), (100, 100)),
                Point(Layout.XY, (-10, 10)),
                Bounds(Layout.XY).set_coords((-100, -100), (100, 100)),
            ),
            (
                Bounds(Layout.XYZ).set_coords((0, 0, -1), (10, 10, 1)),
                Point(Layout.XY, (5, -10)),
                Bounds(Layout.XYZ).set_coords((0, -10, -1), (10, 10, 1)),
            ),
            (
                Bounds(Layout.XYZ).set_coords((0, 0, 0), (10, 10, 10)),
                Point(Layout.XYZ, (5, -10, 3)),
                Bounds(Layout.XYZ).set_coords((0, -10, 0), (10, 10, 10)),
            ),
            (
                Bounds(Layout.XYZ).set_coords((0, 0, 0), (10, 10, 10)),
                MultiPoint(Layout.XYM).set_coords([(-1, -1, -1), (11, 11, 11)]),
                Bounds(Layout.XYZM).set_coords((-1, -1, 0, -1), (11, 11, 10, 11)),
            ),
            (
                Bounds(Layout.XY).set_coords((0, 0), (10, 10)),
                MultiPoint(Layout.XYM).set_coords([(-1, -1, -1), (11, 11, 11)]),
                _box(Layout.XYM, (-1, -1, -1), (11, 11, 11)),
            ),
            (
                Bounds(Layout.XY).set_coords((0, 0), (10, 10)),
                MultiPoint(Layout.XYZ).set_coords([(-1, -1, -1), (11, 11, 11)]),
                Bounds(Layout.XYZ).set_coords((-1, -1, -1), (11, 11, 11)),
            ),
            (
                _box(Layout.XYM, (0, 0, 0), (10, 10, 10)),
                MultiPoint(Layout.XYZ).set_coords([(-1, -1, -1), (11, 11, 11)]),
                Bounds(Layout.XYZM).set_coords((-1, -1, -1, 0), (11, 11, 11, 10)),
            ),
        ],
    )
    def test_extend(
        self, bounds: Bounds, geometry: Geometry, expected: Bounds
    ) -> None:
        """Test extension widens existing axes and births new ones."""
        assert bounds.clone().extend(geometry) == expected

    def test_extend_returns_receiver(self) -> None:
        """Test extend mutates in place and returns the same box."""
        bounds = Bounds(Layout.XY)
        assert bounds.extend(Point(Layout.XY, (1, 2))) is bounds
        assert bounds.min == (1.0, 2.0)

    def test_extend_no_layout_with_nothing(self) -> None:
        """Test extending an empty NO_LAYOUT box with an empty collection."""
        bounds = Bounds().extend(GeometryCollection())
        assert bounds == Bounds(Layout.NO_LAYOUT)

    def test_extend_with_empty_geometry_promotes_layout(self) -> None:
        """Test an empty geometry still promotes the layout."""
        bounds = Bounds(Layout.XY).set(0, 0, 1, 1)
        bounds.extend(LineString(Layout.XYZ))
        assert bounds.layout is Layout.XYZ
        assert bounds.min == (0.0, 0.0, math.inf)
        assert bounds.max == (1.0, 1.0, -math.inf)

    def test_extend_flat_coords(self) -> None:
        """Test extension from a raw flat buffer."""
        bounds = Bounds(Layout.XY).extend_flat_coords([3, 1, -2, 5], Layout.XY)
        assert bounds == Bounds(Layout.XY).set(-2, 1, 3, 5)

    def test_extend_flat_coords_rejects_partial_coordinate(self) -> None:
        """Test a buffer that is not a whole number of coordinates."""
        with pytest.raises(StrideMismatchError) as exc_info:
            Bounds(Layout.XY).extend_flat_coords([1, 2, 3], Layout.XY)
        assert exc_info.value == StrideMismatchError(got=1, want=2)

    @given(
        box=st.tuples(
            st.floats(-1e6, 1e6), st.floats(-1e6, 1e6),
            st.floats(-1e6, 1e6), st.floats(-1e6, 1e6),
        ),
        coord=st.tuples(
            st.floats(-1e6, 1e6), st.floats(-1e6, 1e6), st.floats(-1e6, 1e6)
        ),
        layout=st.sampled_from([Layout.XYZ, Layout.XYM]),
    )
    def test_extend_never_shrinks(
        self,
        box: tuple[float, float, float, float],
        coord: tuple[float, float, float],
        layout: Layout,
    ) -> None:
        """Test previously constrained axes only ever grow."""
        before = Bounds(Layout.XY).set_coords(box[:2], box[2:])
        after = before.clone().extend(Point(layout, coord))
        for axis in range(2):
            assert after.min_at(axis) <= before.min_at(axis)
            assert after.max_at(axis) >= before.max_at(axis)


class TestBoundsIsEmpty:
    """Tests for Bounds.is_empty."""

    @pytest.mark.parametrize(
        ("bounds", "is_empty"),
        [
            (_box(Layout.XY, (0, 0), (-1, -1)), True),
            (_box(Layout.XY, (0, 0), (0, 0)), False),
            (_box(Layout.XY, (-100, -100), (100, 100)), False),
            (_box(Layout.XYZ, (0, 0, 1), (1, 1, 0)), True),
            (Bounds(Layout.XY), True),
            (Bounds(Layout.NO_LAYOUT), True),
        ],
    )
    def test_is_empty(self, bounds: Bounds, is_empty: bool) -> None:
        """Test emptiness is decided per axis without side effects."""
        snapshot = bounds.clone()
        for _ in range(10):
            assert bounds.is_empty() is is_empty
            assert bounds == snapshot


class TestBoundsOverlaps:
    """Tests for Bounds.overlaps and Bounds.overlaps_point."""

    @pytest.mark.parametrize(
        ("bounds", "other", "overlaps"),
        [
            (_box(Layout.XY, (0, 0), (0, 0)), _box(Layout.XY, (-10, 0), (-5, 10)), False),
            (
                _box(Layout.XY, (-100, -100), (100, 100)),
                _box(Layout.XY, (-10, 0), (-5, 10)),
                True,
            ),
            (_box(Layout.XY, (1, 1), (5, 5)), _box(Layout.XY, (-5, -5), (-1, -1)), False),
            (
                _box(Layout.XYZ, (-100, -100, -100), (100, 100, 100)),
                _box(Layout.XYZ, (-10, 0, 0), (-5, 10, 10)),
                True,
            ),
            (
                _box(Layout.XYZ, (0, 0, 0), (100, 100, 100)),
                _box(Layout.XYZ, (5, 5, -10), (10, 10, -5)),
                False,
            ),
            (
                _box(Layout.XY, (0, 0), (0, 0)),
                _box(Layout.XY, (-10, -10), (-1e-30, 0)),
                False,
            ),
            (_box(Layout.XY, (0, 0), (1, 1)), _box(Layout.XY, (1, 1), (2, 2)), True),
        ],
    )
    def test_overlaps(self, bounds: Bounds, other: Bounds, overlaps: bool) -> None:
        """Test overlap uses exact comparison without side effects."""
        snapshot = bounds.clone()
        for _ in range(10):
            assert bounds.overlaps(bounds.layout, other) is overlaps
            assert bounds == snapshot

    def test_overlaps_uses_supplied_layout(self) -> None:
        """Test only the axes of the supplied layout are compared."""
        bounds = _box(Layout.XYZ, (0, 0, 0), (10, 10, 10))
        other = _box(Layout.XYZ, (5, 5, 50), (6, 6, 60))
        assert bounds.overlaps(Layout.XY, other) is True
        assert bounds.overlaps(Layout.XYZ, other) is False

    @pytest.mark.parametrize(
        ("bounds", "point", "overlaps"),
        [
            (_box(Layout.XY, (0, 0), (0, 0)), (-10, 0), False),
            (_box(Layout.XY, (-100, -100), (100, 100)), (-10, 0), True),
            (_box(Layout.XYZ, (-100, -100, -100), (100, 100, 100)), (-5, 10, 10), True),
            (_box(Layout.XYZ, (0, 0, 0), (100, 100, 100)), (5, 5, -10), False),
            (_box(Layout.XY, (0, 0), (10, 10)), (-1e-30, 0), False),
            (_box(Layout.XY, (0, 0), (10, 10)), (10, 10), True),
        ],
    )
    def test_overlaps_point(
        self, bounds: Bounds, point: tuple[float, ...], overlaps: bool
    ) -> None:
        """Test point containment uses exact comparison."""
        snapshot = bounds.clone()
        for _ in range(10):
            assert bounds.overlaps_point(bounds.layout, point) is overlaps
            assert bounds == snapshot


class TestBoundsPolygon:
    """Tests for Bounds.polygon."""

    unit_square = [[(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]]

    @pytest.mark.parametrize(
        ("bounds", "rings"),
        [
            (Bounds(Layout.XY).set(0, 0, 1, 1), unit_square),
            (Bounds(Layout.XYZ).set(0, 0, 0, 1, 1, 1), unit_square),
            (Bounds(Layout.XYM).set(0, 0, 0, 1, 1, 1), unit_square),
            (Bounds(Layout.XYZM).set(0, 0, 0, 0, 1, 1, 1, 1), unit_square),
            (
                Bounds(Layout.XY).set(1, 2, 3, 4),
                [[(1, 2), (1, 4), (3, 4), (3, 2), (1, 2)]],
            ),
            (
                Bounds(Layout.XYZ).set(1, 2, 3, 4, 5, 6),
                [[(1, 2), (1, 5), (4, 5), (4, 2), (1, 2)]],
            ),
        ],
    )
    def test_polygon(self, bounds: Bounds, rings: list[list[tuple[float, ...]]]) -> None:
        """Test the rectangle is an XY ring regardless of the box layout."""
        assert bounds.polygon() == Polygon(Layout.XY).set_coords(rings)

    def test_no_layout_polygon_is_empty(self) -> None:
        """Test a box never given coordinates yields a polygon with no rings."""
        polygon = Bounds(Layout.NO_LAYOUT).polygon()
        assert polygon == Polygon(Layout.XY)
        assert polygon.num_linear_rings == 0


class TestBoundsSet:
    """Tests for Bounds.set and Bounds.set_coords."""

    def test_set(self) -> None:
        """Test set replaces min and max."""
        bounds = _box(Layout.XY, (0, 0), (10, 10))
        bounds.set(0, 0, 20, 20)
        assert bounds == _box(Layout.XY, (0, 0), (20, 20))

    def test_set_wrong_arity(self) -> None:
        """Test set rejects any count other than 2 * stride."""
        bounds = Bounds(Layout.XY)
        with pytest.raises(ArityError):
            bounds.set(2, 2, 2, 2, 2)
        with pytest.raises(TypeError):
            bounds.set(1, 2, 3)

    def test_set_coords(self) -> None:
        """Test set_coords on an existing box."""
        bounds = _box(Layout.XY, (0, 0), (10, 10))
        bounds.set_coords((0, 0), (20, 20))
        assert bounds == _box(Layout.XY, (0, 0), (20, 20))

    def test_set_coords_normalizes_order(self) -> None:
        """Test swapped corners still yield a valid min/max."""
        bounds = Bounds(Layout.XY).set_coords((20, 0), (0, 20))
        assert bounds.min == (0.0, 0.0)
        assert bounds.max == (20.0, 20.0)

    def test_set_coords_infers_layout(self) -> None:
        """Test a NO_LAYOUT box adopts the layout implied by the corners."""
        bounds = Bounds().set_coords((0, 0), (1, 1))
        assert bounds.layout is Layout.XY

    def test_set_coords_rejects_stride_mismatch(self) -> None:
        """Test corners that disagree with the layout are rejected."""
        with pytest.raises(StrideMismatchError) as exc_info:
            Bounds(Layout.XY).set_coords((0, 0, 0), (1, 1, 1))
        assert exc_info.value == StrideMismatchError(got=3, want=2)

    def test_clone_is_independent(self) -> None:
        """Test mutating a clone leaves the original untouched."""
        original = Bounds(Layout.XY).set(0, 0, 1, 1)
        clone = original.clone()
        clone.extend(Point(Layout.XY, (5, 5)))
        assert original == Bounds(Layout.XY).set(0, 0, 1, 1)
        assert clone.max == (5.0, 5.0)
