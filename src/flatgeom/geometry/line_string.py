"""Line strings."""

from __future__ import annotations

from flatgeom.flat import FlatPath


class LineString(FlatPath):
    """An ordered sequence of coordinates forming a path.

    Example:
        >>> ls = LineString(Layout.XYM).set_coords([(1, 2, 0), (2, 4, 1)])
        >>> ls.interpolate(0.5, ls.layout.m_index)
        (0, 0.5)
    """

    def sub_line_string(self, start: int, stop: int) -> LineString:
        """Return a new line string holding coordinates [start, stop).

        The result owns a copy of the selected coordinates.
        """
        start, stop, _ = slice(start, stop).indices(self.num_coords)
        sub = LineString.from_flat(
            self._layout,
            self._buf[start * self._stride : max(start, stop) * self._stride],
        )
        return sub.set_srid(self._srid)
