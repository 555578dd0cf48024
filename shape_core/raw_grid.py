"""
RawGrid: fixed 3×3 occupancy grid and its geometric primitives.

Provides:
- RawGrid: immutable occupancy matrix (value semantics)
- Bounding-box projections (left/right/top/bottom), corner, size
- move_to_corner: translate the occupied region to origin (0, 0)
- rotate_right: 90° clockwise rotation on the full 3×3 frame

Every transformation returns a new RawGrid; nothing mutates in place.
A projection over an empty grid is None, never 0, so "no corner" stays
distinguishable from an occupied (0, 0) cell.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

import numpy as np

from .types import GRID_SIZE, NUM_ROTATIONS, BoolMatrix, BoundingBox, Cell

OCCUPIED_GLYPHS = frozenset("O#")
EMPTY_GLYPHS = frozenset("x.")


def _coerce(rows: Sequence[Sequence[object]]) -> BoolMatrix:
    """Convert a nested sequence to a 3×3 tuple-of-tuples of bools."""
    if len(rows) != GRID_SIZE:
        raise ValueError(f"RawGrid needs {GRID_SIZE} rows, got {len(rows)}")

    cells = []
    for r, row in enumerate(rows):
        if len(row) != GRID_SIZE:
            raise ValueError(
                f"RawGrid row {r} needs {GRID_SIZE} columns, got {len(row)}"
            )
        cells.append(tuple(bool(v) for v in row))
    return tuple(cells)


@dataclass(frozen=True)
class RawGrid:
    """
    Fixed 3×3 boolean occupancy matrix, indexed cells[row][col].

    Equality and hashing cover the full frame, so two grids holding the
    same shape at different offsets are different RawGrids. Use
    CanonicalShape to compare shapes independent of position.
    """
    cells: BoolMatrix

    def __post_init__(self):
        object.__setattr__(self, "cells", _coerce(self.cells))

    # --------------------------------------------------------------------------
    # Constructors / adapters
    # --------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[object]]) -> "RawGrid":
        """Wrap a literal 3×3 matrix (lists, tuples or a numpy array)."""
        return cls(rows)

    @classmethod
    def from_string(cls, text: str) -> "RawGrid":
        """
        Parse a grid literal.

        'O' (or '#') marks an occupied cell, 'x' (or '.') an empty one.
        Rows are separated by '/' or newlines; whitespace inside a row is
        ignored, so "O x x / x O x / x O x" and "Oxx/xOx/xOx" are equal.

        Raises:
            ValueError: On an unknown glyph or a non-3×3 layout
        """
        raw_rows = text.split("/") if "/" in text else text.splitlines()
        rows = []
        for raw_row in raw_rows:
            glyphs = "".join(raw_row.split())
            if not glyphs:
                continue
            row = []
            for glyph in glyphs:
                if glyph in OCCUPIED_GLYPHS:
                    row.append(True)
                elif glyph in EMPTY_GLYPHS:
                    row.append(False)
                else:
                    raise ValueError(f"Unknown grid glyph {glyph!r} in {text!r}")
            rows.append(row)
        return cls(rows)

    @classmethod
    def empty(cls) -> "RawGrid":
        return cls([[False] * GRID_SIZE for _ in range(GRID_SIZE)])

    def to_rows(self) -> list[list[bool]]:
        return [list(row) for row in self.cells]

    def to_array(self) -> np.ndarray:
        return np.array(self.cells, dtype=bool)

    def occupied_cells(self) -> list[Cell]:
        """Occupied cells in row-major order."""
        return [
            Cell(r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if self.cells[r][c]
        ]

    def __str__(self) -> str:
        return "/".join(
            "".join("O" if v else "x" for v in row) for row in self.cells
        )

    # --------------------------------------------------------------------------
    # Bounding box
    # --------------------------------------------------------------------------

    def _project(
        self,
        coord: Callable[[Cell], int],
        fold: Callable[[int, int], int],
    ) -> Optional[int]:
        """Fold min/max over one coordinate of every occupied cell."""
        result: Optional[int] = None
        for cell in self.occupied_cells():
            value = coord(cell)
            result = value if result is None else fold(result, value)
        return result

    def box_left(self) -> Optional[int]:
        return self._project(lambda cell: cell.col, min)

    def box_right(self) -> Optional[int]:
        return self._project(lambda cell: cell.col, max)

    def box_top(self) -> Optional[int]:
        return self._project(lambda cell: cell.row, min)

    def box_bottom(self) -> Optional[int]:
        return self._project(lambda cell: cell.row, max)

    def bounding_box(self) -> Optional[BoundingBox]:
        """Minimal bounding box, or None if any projection is absent."""
        top, left = self.box_top(), self.box_left()
        bottom, right = self.box_bottom(), self.box_right()
        if top is None or left is None or bottom is None or right is None:
            return None
        return BoundingBox(top=top, left=left, bottom=bottom, right=right)

    def corner(self) -> Optional[Cell]:
        """
        Top-left corner of the bounding box.

        Returns None when the top or left projection is absent (empty grid).
        Callers needing a definite origin must check this, not size().
        """
        top = self.box_top()
        if top is None:
            return None
        left = self.box_left()
        if left is None:
            return None
        return Cell(top, left)

    def size(self) -> tuple[int, int]:
        """
        (width, height) of the bounding box.

        Each axis is computed independently and contributes 0 when its
        projections are absent, so this never fails: (0, 0) for an empty grid.
        """
        left, right = self.box_left(), self.box_right()
        top, bottom = self.box_top(), self.box_bottom()
        width = right - left + 1 if left is not None and right is not None else 0
        height = bottom - top + 1 if top is not None and bottom is not None else 0
        return (width, height)

    # --------------------------------------------------------------------------
    # Transformations
    # --------------------------------------------------------------------------

    def move_to_corner(self) -> "RawGrid":
        """
        Translate the occupied region so its bounding box starts at (0, 0).

        Cells outside the translated region are empty. An empty grid has no
        corner and comes back as an equal empty grid.
        """
        corner = self.corner()
        if corner is None:
            return self

        corner_r, corner_c = corner
        result = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]
        for r in range(corner_r, GRID_SIZE):
            for c in range(corner_c, GRID_SIZE):
                result[r - corner_r][c - corner_c] = self.cells[r][c]
        return RawGrid(result)

    def rotate_right(self) -> "RawGrid":
        """
        Rotate 90° clockwise within the fixed frame.

        result[r][c] = grid[GRID_SIZE-1-c][r]. No cropping: the rotation acts
        on the whole frame, so four applications give back the original.
        """
        result = []
        for r in range(GRID_SIZE):
            row = []
            for c in range(GRID_SIZE):
                row.append(self.cells[GRID_SIZE - 1 - c][r])
            result.append(row)
        return RawGrid(result)

    def rotations(self) -> Iterator["RawGrid"]:
        """Yield the 0°, 90°, 180° and 270° clockwise rotations, in order."""
        grid = self
        for _ in range(NUM_ROTATIONS):
            yield grid
            grid = grid.rotate_right()
