"""Per-row scanline fill test.

A Scanline holds the sorted x coordinates where a shape's boundary crosses
one horizontal line. Fill uses the even-odd rule: a point is inside when an
odd number of crossings lie at or left of it.

Contours that self-intersect or wind inconsistently get whatever the parity
rule yields; that classification is undefined but never raises.
"""

from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Scanline:
    """Sorted boundary crossings of a single row.

    Attributes:
        y: Height of the row in shape space
        crossings: Ascending crossing x coordinates
    """

    y: float
    crossings: tuple[float, ...]

    @classmethod
    def from_crossings(cls, y: float, crossings: Iterable[float]) -> "Scanline":
        """Build a scanline from unsorted crossings."""
        return cls(y=y, crossings=tuple(sorted(crossings)))

    def crossing_index(self, x: float) -> int:
        """Number of crossings at or left of x."""
        return bisect_right(self.crossings, x)

    def is_filled(self, x: float) -> bool:
        """Even-odd fill test at x."""
        return self.crossing_index(x) & 1 == 1

    def cursor(self) -> "ScanlineCursor":
        """Create a query cursor for sequential lookups along this row."""
        return ScanlineCursor(self)

    def __len__(self) -> int:
        return len(self.crossings)


class ScanlineCursor:
    """Incremental fill queries along one scanline.

    Remembers the crossing index of the previous query and walks from there,
    so queries with steadily increasing x cost amortized O(1). Any query
    order returns the same answers as Scanline.is_filled.

    The cursor belongs to whoever created it; do not share one between
    independent row computations.
    """

    def __init__(self, scanline: Scanline) -> None:
        self._crossings = scanline.crossings
        self._index = 0

    def reset(self) -> None:
        """Move the cursor back to the start of the row."""
        self._index = 0

    def locate(self, x: float) -> int:
        """Number of crossings at or left of x, updating the cursor."""
        crossings = self._crossings
        index = self._index
        while index > 0 and (index > len(crossings) or x < crossings[index - 1]):
            index -= 1
        while index < len(crossings) and x >= crossings[index]:
            index += 1
        self._index = index
        return index

    def is_filled(self, x: float) -> bool:
        """Even-odd fill test at x."""
        return self.locate(x) & 1 == 1
