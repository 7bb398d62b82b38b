"""Game pieces, representing quilt patches."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from quilting.position import Dimension, Position, Transformation


class Piece:
    """An immutable game piece.

    Invariant: the positions are sorted, unique, and fit tightly within
    the dimension.
    """

    __slots__ = ("_dimension", "_positions", "_cost", "_distance", "_collect")

    def __init__(
        self,
        positions: Iterable[Position],
        cost: int,
        distance: int,
        collect: int = 0,
    ):
        self._positions: tuple[Position, ...] = tuple(sorted(set(positions)))
        self._dimension = _compute_dimension(self._positions)
        self._cost = cost
        self._distance = distance
        self._collect = collect

    @classmethod
    def single_position(cls) -> Piece:
        """The small square piece granted by the time board."""
        return cls([Position(0, 0)], 0, 0, 0)

    @property
    def cost(self) -> int:
        return self._cost

    @property
    def distance(self) -> int:
        """How far to move on the time board when taking the piece."""
        return self._distance

    @property
    def collect(self) -> int:
        """Currency earned per collection while the piece is on a quilt."""
        return self._collect

    def size(self) -> int:
        return len(self._positions)

    def dimension(self, transformation: Transformation | None = None) -> Dimension:
        return (transformation or Transformation()).apply_dim(self._dimension)

    def width(self, transformation: Transformation | None = None) -> int:
        return self.dimension(transformation).width

    def height(self, transformation: Transformation | None = None) -> int:
        return self.dimension(transformation).height

    def positions(self, transformation: Transformation | None = None) -> Iterator[Position]:
        """Yield the piece's positions under *transformation*.

        Positions come out in the piece's canonical order, which is the
        order the untransformed positions are sorted in. Every call starts
        over from the stored positions.
        """
        transformation = transformation or Transformation()
        return (transformation.apply(self._dimension, p) for p in self._positions)

    def _key(self) -> tuple:
        return (self._positions, self._cost, self._distance, self._collect)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        cells = ", ".join(f"({p.x}, {p.y})" for p in self._positions)
        return (
            f"Piece([{cells}], cost={self._cost}, "
            f"distance={self._distance}, collect={self._collect})"
        )


def _compute_dimension(positions: Iterable[Position]) -> Dimension:
    """The smallest dimension holding every position."""
    width = height = 0
    for p in positions:
        width = max(width, p.x + 1)
        height = max(height, p.y + 1)
    return Dimension(width, height)
