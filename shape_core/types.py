"""
Core type definitions for shape canonicalization.

Every grid in the system is a fixed GRID_SIZE × GRID_SIZE occupancy matrix.
"""

from dataclasses import dataclass

# Fixed frame: all grids are 3×3, no resizing
GRID_SIZE = 3

# Quarter turns in a full rotation
NUM_ROTATIONS = 4

# Occupancy matrix: BoolMatrix[r][c] = True if the cell is occupied
BoolMatrix = tuple[tuple[bool, ...], ...]


# Cell coordinates (row, col)
@dataclass(frozen=True, order=True)
class Cell:
    """Cell coordinates in row-major order."""
    row: int
    col: int

    def __iter__(self):
        """Allow tuple unpacking: r, c = cell"""
        return iter((self.row, self.col))


@dataclass(frozen=True)
class BoundingBox:
    """
    Minimal rectangle enclosing all occupied cells (inclusive bounds).

    Only exists for grids with at least one occupied cell; an empty grid
    has no bounding box at all.
    """
    top: int
    left: int
    bottom: int
    right: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def corner(self) -> Cell:
        return Cell(self.top, self.left)
