"""
Quarter-turn variant sets.

Provides:
- available_shapes: deduplicated CanonicalShapes over 0/90/180/270° rotations
- symmetry_order: size of the grid's rotational stabilizer (1, 2 or 4)
- sorted_shapes / representative: deterministic ordering for display

The variant set is a frozenset; no rotation is privileged in it. Rotation
has order 4, so the set always holds 1, 2 or 4 shapes, never 3.
"""

import logging
from typing import Iterable

from .canonical import CanonicalShape
from .order_hash import lex_min
from .raw_grid import RawGrid
from .types import NUM_ROTATIONS

logger = logging.getLogger(__name__)


def available_shapes(raw: RawGrid) -> frozenset[CanonicalShape]:
    """
    Canonical shapes of every quarter-turn rotation of raw.

    Args:
        raw: Input grid (any occupancy, including empty)

    Returns:
        frozenset of 1, 2 or 4 CanonicalShape values

    Examples:
        >>> len(available_shapes(RawGrid.from_string("Oxx/xxx/xxx")))
        1
        >>> len(available_shapes(RawGrid.from_string("OOx/xxx/xxx")))
        2
    """
    shapes = set()
    grid = raw
    for _ in range(NUM_ROTATIONS):
        shapes.add(CanonicalShape.from_raw(grid))
        grid = grid.rotate_right()

    logger.debug("Variants of %s: %d distinct shape(s)", raw, len(shapes))
    return frozenset(shapes)


def symmetry_order(raw: RawGrid) -> int:
    """Number of quarter turns (out of 4) that leave the shape unchanged."""
    return NUM_ROTATIONS // len(available_shapes(raw))


def sorted_shapes(shapes: Iterable[CanonicalShape]) -> list[CanonicalShape]:
    return sorted(shapes, key=CanonicalShape.sort_key)


def representative(raw: RawGrid) -> CanonicalShape:
    """Lex-min variant by CanonicalShape.sort_key."""
    return lex_min(available_shapes(raw), key=CanonicalShape.sort_key)
