"""
CanonicalShape: corner-aligned shape used as the unit of shape equality.

Provides:
- CanonicalShape.from_raw: crop a RawGrid to its bounding box origin
- Equality over the full aligned grid, hashing over the occupied sub-rectangle
- fingerprint: run-stable 64-bit hash of the same sub-rectangle

Hash/equality contract: only the rows 0..height and columns 0..width take
part in hashing. Cells past the true width are never read by __hash__, so
equal shapes can never hash unequal because of data outside the box.
"""

from dataclasses import dataclass

from .order_hash import Hash64, hash64
from .raw_grid import RawGrid
from .types import BoolMatrix


@dataclass(frozen=True, eq=False)
class CanonicalShape:
    """
    Corner-aligned occupancy pattern plus its (width, height).

    size is a cached view of raw.size() and is checked against it on
    construction; build instances with from_raw().
    """
    size: tuple[int, int]
    raw: RawGrid

    def __post_init__(self):
        if self.raw.move_to_corner() != self.raw:
            raise ValueError(f"CanonicalShape grid is not corner-aligned: {self.raw}")
        if tuple(self.size) != self.raw.size():
            raise ValueError(
                f"CanonicalShape size {self.size} does not match grid size {self.raw.size()}"
            )

    @classmethod
    def from_raw(cls, raw: RawGrid) -> "CanonicalShape":
        return cls(size=raw.size(), raw=raw.move_to_corner())

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def occupied_rect(self) -> BoolMatrix:
        """Occupied sub-rectangle: rows 0..height, columns 0..width."""
        width, height = self.size
        return tuple(self.raw.cells[r][:width] for r in range(height))

    def fingerprint(self) -> Hash64:
        """Deterministic 64-bit hash, stable across interpreter runs."""
        return hash64(self.occupied_rect())

    def sort_key(self) -> tuple:
        """(height, width, flattened sub-rectangle) for display ordering."""
        flat = tuple(v for row in self.occupied_rect() for v in row)
        return (self.height, self.width, flat)

    def __eq__(self, other):
        if not isinstance(other, CanonicalShape):
            return NotImplemented
        return self.raw.cells == other.raw.cells

    def __hash__(self):
        return hash(self.occupied_rect())

    def __str__(self) -> str:
        width, height = self.size
        if not height:
            return "<empty>"
        return "/".join(
            "".join("O" if v else "x" for v in row) for row in self.occupied_rect()
        )
