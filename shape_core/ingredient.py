"""
Ingredient: a colored piece and the shapes it can present.
"""

from dataclasses import dataclass
from enum import Enum

from .canonical import CanonicalShape
from .raw_grid import RawGrid
from .variants import available_shapes


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"


@dataclass(frozen=True)
class Ingredient:
    """
    Color plus the variant set of one raw grid.

    Consumers compare shapes only through CanonicalShape equality/hashing.
    """
    color: Color
    shapes: frozenset[CanonicalShape]

    @classmethod
    def from_raw_grid(cls, color: Color, raw: RawGrid) -> "Ingredient":
        return cls(color=color, shapes=available_shapes(raw))
