"""Linear rings.

A ring is stored exactly like a line string. By convention its first and
last coordinates are equal, but closure is not checked here.
"""

from __future__ import annotations

import numpy as np

from flatgeom.flat import FlatPath


class LinearRing(FlatPath):
    """A closed path used as the boundary of a polygon."""

    def signed_area(self) -> float:
        """Return the shoelace area; positive for counter-clockwise rings."""
        if self.num_coords < 3:
            return 0.0
        xy = self._buf[: self._size].reshape(-1, self._stride)[:, :2]
        x, y = xy[:, 0], xy[:, 1]
        twice = np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)
        return float(twice) / 2.0

    def area(self) -> float:
        """Return the planar (XY) area enclosed by the ring."""
        return abs(self.signed_area())
