"""Coordinate layouts.

A layout names the axes a coordinate carries and their order. X and Y are
always present (except for NO_LAYOUT), Z always sits immediately after Y,
and M is always last.
"""

from __future__ import annotations

from enum import Enum


class Layout(Enum):
    """Supported axis sets."""

    NO_LAYOUT = 0
    XY = 1
    XYZ = 2
    XYM = 3
    XYZM = 4

    @property
    def has_z(self) -> bool:
        """Return True if coordinates carry a Z axis."""
        return self in (Layout.XYZ, Layout.XYZM)

    @property
    def has_m(self) -> bool:
        """Return True if coordinates carry an M axis."""
        return self in (Layout.XYM, Layout.XYZM)

    @property
    def stride(self) -> int:
        """Return the number of scalars per coordinate."""
        if self is Layout.NO_LAYOUT:
            return 0
        return 2 + int(self.has_z) + int(self.has_m)

    @property
    def z_index(self) -> int | None:
        """Return the index of the Z axis, or None if absent."""
        return 2 if self.has_z else None

    @property
    def m_index(self) -> int | None:
        """Return the index of the M axis, or None if absent."""
        return self.stride - 1 if self.has_m else None

    @property
    def axes(self) -> tuple[str, ...]:
        """Return the axis names in storage order."""
        if self is Layout.NO_LAYOUT:
            return ()
        names = ["x", "y"]
        if self.has_z:
            names.append("z")
        if self.has_m:
            names.append("m")
        return tuple(names)

    def axis_index(self, name: str) -> int | None:
        """Return the storage index of a named axis, or None if absent."""
        try:
            return self.axes.index(name)
        except ValueError:
            return None

    def merge(self, other: Layout) -> Layout:
        """Return the smallest layout carrying the axes of both layouts.

        Example:
            >>> Layout.XYZ.merge(Layout.XYM)
            <Layout.XYZM: 4>
        """
        if self is Layout.NO_LAYOUT:
            return other
        if other is Layout.NO_LAYOUT:
            return self
        return Layout.from_flags(
            has_z=self.has_z or other.has_z,
            has_m=self.has_m or other.has_m,
        )

    @classmethod
    def from_flags(cls, *, has_z: bool, has_m: bool) -> Layout:
        """Return the XY-based layout with the given optional axes."""
        if has_z and has_m:
            return cls.XYZM
        if has_z:
            return cls.XYZ
        if has_m:
            return cls.XYM
        return cls.XY

    @classmethod
    def from_stride(cls, stride: int) -> Layout:
        """Return the default layout for a stride.

        A stride of 3 is ambiguous; it resolves to XYZ.

        Raises:
            ValueError: If no layout has the given stride.
        """
        layouts = {0: cls.NO_LAYOUT, 2: cls.XY, 3: cls.XYZ, 4: cls.XYZM}
        if stride not in layouts:
            raise ValueError(f"no layout has stride {stride}")
        return layouts[stride]
