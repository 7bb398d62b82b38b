"""Grid positions, dimensions, and the rotations/flips applied to pieces.

Origin is in the upper left.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import product


@dataclass(frozen=True, order=True)
class Position:
    """A position on the board or in a piece."""

    x: int
    y: int

    def __post_init__(self):
        assert self.x >= 0 and self.y >= 0, f"Negative position ({self.x}, {self.y})"

    def translate(self, other: Position) -> Position:
        """Translate relative to *other* (like vector addition)."""
        return Position(self.x + other.x, self.y + other.y)


@dataclass(frozen=True, order=True)
class Dimension:
    """The width and height of a board or piece."""

    width: int
    height: int

    @classmethod
    def square(cls, size: int) -> Dimension:
        return cls(size, size)

    def contains(self, p: Position) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def transpose(self) -> Dimension:
        return Dimension(self.height, self.width)


class Rotation(Enum):
    """Clockwise rotation, in degrees."""

    NONE = 0
    CW90 = 90
    CW180 = 180
    CW270 = 270

    def is_even(self) -> bool:
        return self in (Rotation.NONE, Rotation.CW180)

    def apply_dim(self, d: Dimension) -> Dimension:
        return d if self.is_even() else d.transpose()

    def apply(self, d: Dimension, p: Position) -> Position:
        """Rotate *p*, a cell of *d*, into the rotated dimension."""
        if self is Rotation.CW90:
            return Position(d.height - p.y - 1, p.x)
        if self is Rotation.CW180:
            return Position(d.width - p.x - 1, d.height - p.y - 1)
        if self is Rotation.CW270:
            return Position(p.y, d.width - p.x - 1)
        return p


class Flip(Enum):
    IDENTITY = "identity"
    HORIZONTAL = "horizontal"

    def apply(self, d: Dimension, p: Position) -> Position:
        if self is Flip.HORIZONTAL:
            return Position(d.width - p.x - 1, p.y)
        return p


@dataclass(frozen=True)
class Transformation:
    """A rotation followed by a flip.

    The flip is relative to the dimension *after* rotating.
    """

    rotation: Rotation = Rotation.NONE
    flip: Flip = Flip.IDENTITY

    @classmethod
    def identity(cls) -> Transformation:
        return cls()

    @classmethod
    def all(cls) -> list[Transformation]:
        """Every rotation/flip combination, identity first."""
        return [cls(r, f) for f, r in product(Flip, Rotation)]

    def apply_dim(self, d: Dimension) -> Dimension:
        # Flipping never changes the extents.
        return self.rotation.apply_dim(d)

    def apply(self, d: Dimension, p: Position) -> Position:
        p = self.rotation.apply(d, p)
        return self.flip.apply(self.rotation.apply_dim(d), p)
