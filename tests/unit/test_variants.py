"""
Unit tests for shape_core/variants.py.

Acceptance criteria:
- Variant-set size is 1, 2 or 4 (never 3) and matches rotational symmetry
- Single cells and fully symmetric shapes give exactly one variant
- Empty grid gives exactly one degenerate (0, 0) variant
- Result is independent of the starting rotation and position
"""

import itertools
import logging

import pytest

from shape_core.canonical import CanonicalShape
from shape_core.raw_grid import RawGrid
from shape_core.variants import available_shapes, representative, sorted_shapes, symmetry_order


def grid(text: str) -> RawGrid:
    return RawGrid.from_string(text)


def all_grids():
    for bits in itertools.product([False, True], repeat=9):
        yield RawGrid([bits[0:3], bits[3:6], bits[6:9]])


class TestAvailableShapes:
    """Test the quarter-turn canonicalization pipeline."""

    @pytest.mark.parametrize(
        "text, expected_count",
        [
            ("xxx/xxx/xxx", 1),  # empty
            ("OOO/OOO/OOO", 1),  # full
            ("xOx/OOO/xOx", 1),  # plus
            ("OxO/xxx/OxO", 1),  # four corners
            ("OOx/OOx/xxx", 1),  # 2×2 square
            ("OOx/xxx/xxx", 2),  # domino
            ("OOO/xxx/xxx", 2),  # bar
            ("xOO/OOx/xxx", 2),  # S tetromino
            ("Oxx/xOx/xxO", 2),  # diagonal
            ("OOx/Oxx/xxx", 4),  # L tromino
            ("OOO/xOx/xxx", 4),  # T tetromino
            ("Oxx/xOx/xOx", 4),
        ],
    )
    def test_variant_count(self, text, expected_count):
        assert len(available_shapes(grid(text))) == expected_count

    @pytest.mark.parametrize("row, col", list(itertools.product(range(3), range(3))))
    def test_single_cell_anywhere(self, row, col):
        """A single occupied cell has one variant: the 1×1 shape."""
        rows = [[False] * 3 for _ in range(3)]
        rows[row][col] = True
        shapes = available_shapes(RawGrid(rows))
        assert len(shapes) == 1
        (only,) = shapes
        assert only.size == (1, 1)
        assert only.raw == grid("Oxx/xxx/xxx")

    def test_empty_grid(self):
        shapes = available_shapes(RawGrid.empty())
        assert len(shapes) == 1
        (only,) = shapes
        assert only.size == (0, 0)

    def test_domino_variants(self):
        shapes = available_shapes(grid("OOx/xxx/xxx"))
        assert shapes == {
            CanonicalShape.from_raw(grid("OOx/xxx/xxx")),
            CanonicalShape.from_raw(grid("Oxx/Oxx/xxx")),
        }
        assert {s.size for s in shapes} == {(2, 1), (1, 2)}

    def test_l_tromino_variants(self):
        shapes = available_shapes(grid("OOx/Oxx/xxx"))
        expected = {
            CanonicalShape.from_raw(grid(text))
            for text in ["OOx/Oxx/xxx", "OOx/xOx/xxx", "xOx/OOx/xxx", "Oxx/OOx/xxx"]
        }
        assert shapes == expected

    def test_returns_frozenset(self):
        assert isinstance(available_shapes(grid("OOx/Oxx/xxx")), frozenset)

    def test_cardinality_exhaustive(self):
        """Every grid yields 1, 2 or 4 variants; never 3."""
        counts = {len(available_shapes(g)) for g in all_grids()}
        assert counts == {1, 2, 4}

    def test_rotation_invariant_exhaustive(self):
        """Starting from any rotation of a grid gives the same set."""
        for g in all_grids():
            assert available_shapes(g.rotate_right()) == available_shapes(g), str(g)

    def test_translation_invariant(self):
        assert available_shapes(grid("xxx/xOO/xOx")) == available_shapes(grid("OOx/Oxx/xxx"))

    def test_contains_own_shape_exhaustive(self):
        for g in all_grids():
            assert CanonicalShape.from_raw(g) in available_shapes(g), str(g)

    def test_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="shape_core.variants"):
            available_shapes(grid("OOx/xxx/xxx"))
        assert "2 distinct shape(s)" in caplog.text


class TestSymmetryOrder:
    """Test symmetry_order (size of the rotational stabilizer)."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("xOx/OOO/xOx", 4),
            ("xxx/xxx/xxx", 4),
            ("OOx/xxx/xxx", 2),
            ("OOx/Oxx/xxx", 1),
        ],
    )
    def test_symmetry_order(self, text, expected):
        assert symmetry_order(grid(text)) == expected

    def test_orbit_stabilizer_exhaustive(self):
        for g in all_grids():
            assert symmetry_order(g) * len(available_shapes(g)) == 4


class TestOrdering:
    """Test deterministic display ordering helpers."""

    def test_sorted_shapes(self):
        shapes = sorted_shapes(available_shapes(grid("OOx/xxx/xxx")))
        assert [s.size for s in shapes] == [(2, 1), (1, 2)]

    def test_representative_is_rotation_independent(self):
        g = grid("OOx/Oxx/xxx")
        rep = representative(g)
        for r in g.rotations():
            assert representative(r) == rep

    def test_representative_is_lex_min(self):
        # Among the four L-tromino variants (all 2×2), the flattened pattern
        # (False, True, True, True) is smallest.
        assert representative(grid("OOx/Oxx/xxx")) == CanonicalShape.from_raw(grid("xOx/OOx/xxx"))
