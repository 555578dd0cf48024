"""
shape_core: Shape canonicalization for 3×3 game pieces.

Provides:
- types: Cell, BoundingBox, grid constants
- order_hash: Deterministic hashing (SHA-256) and global order
- raw_grid: RawGrid occupancy grid with bounding box, rotation, corner alignment
- canonical: CanonicalShape (corner-aligned shape, equality + hashing)
- variants: Quarter-turn variant sets (available_shapes)
- ingredient: Color and Ingredient records
"""

from .canonical import CanonicalShape
from .ingredient import Color, Ingredient
from .raw_grid import RawGrid
from .variants import available_shapes

__all__ = [
    "CanonicalShape",
    "Color",
    "Ingredient",
    "RawGrid",
    "available_shapes",
]
