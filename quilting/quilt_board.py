"""The board on which each player's quilt is constructed."""

from __future__ import annotations

import logging

from quilting.piece import Piece
from quilting.position import Dimension, Position, Transformation
from quilting.result import PlayerError, QuiltingError

logger = logging.getLogger(__name__)

# The width and height of the default quilt board.
DEFAULT_DIMENSION = 9


class QuiltBoard:
    """A grid tracking which cells are covered by pieces.

    Invariant: ``len(rows) == height`` and every row has ``width`` cells.
    Cells only ever go from uncovered to covered.
    """

    def __init__(self, dimension: Dimension | None = None):
        self._dimension = dimension or Dimension.square(DEFAULT_DIMENSION)
        self._rows = [
            [False] * self._dimension.width for _ in range(self._dimension.height)
        ]

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def width(self) -> int:
        return self._dimension.width

    @property
    def height(self) -> int:
        return self._dimension.height

    def positions_covered(self) -> int:
        """Number of cells covered by pieces."""
        return sum(sum(row) for row in self._rows)

    def is_position_in_bounds(self, position: Position) -> bool:
        return self._dimension.contains(position)

    def is_position_covered(self, position: Position) -> bool:
        return self.is_position_in_bounds(position) and self._rows[position.y][position.x]

    # ── Bonus squares ────────────────────────────────────────────────

    def is_square_covered(self, size: int) -> bool:
        """Is there a *size*-by-*size* square fully covered?"""
        for y in range(self.height - size + 1):
            for x in range(self.width - size + 1):
                if self._is_square_covered_at(Position(x, y), size):
                    return True
        return False

    def _is_square_covered_at(self, corner: Position, size: int) -> bool:
        for y in range(corner.y, corner.y + size):
            for x in range(corner.x, corner.x + size):
                if not self._rows[y][x]:
                    return False
        return True

    # ── Placement ────────────────────────────────────────────────────

    def can_add_piece(
        self,
        position: Position,
        piece: Piece,
        transformation: Transformation | None = None,
    ) -> PlayerError | None:
        """Check whether *piece* fits with its upper left at *position*.

        Returns the problem with the first offending cell, in the piece's
        canonical order, or ``None`` if the piece fits.
        """
        for p in piece.positions(transformation):
            p = p.translate(position)
            if p.x >= self.width:
                return PlayerError.PLACEMENT_OVERHANGS_RIGHT
            if p.y >= self.height:
                return PlayerError.PLACEMENT_OVERHANGS_BOTTOM
            if self._rows[p.y][p.x]:
                return PlayerError.PLACEMENT_OVERLAPS_PIECE
        return None

    def add_piece(
        self,
        position: Position,
        piece: Piece,
        transformation: Transformation | None = None,
    ) -> None:
        """Cover the cells of *piece* placed at *position*.

        Raises QuiltingError, without touching the board, if it doesn't fit.
        """
        error = self.can_add_piece(position, piece, transformation)
        if error is not None:
            logger.debug("Rejected %r at %s: %s", piece, position, error.name)
            raise QuiltingError(error)

        for p in piece.positions(transformation):
            self._rows[position.y + p.y][position.x + p.x] = True
        logger.debug("Placed %r at %s (%s covered)", piece, position, self.positions_covered())

    def visualize(self) -> str:
        """Render the board, ``#`` for covered cells and ``-`` for free ones."""
        return "".join(
            "".join("#" if covered else "-" for covered in row) + "\n"
            for row in self._rows
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuiltBoard):
            return NotImplemented
        return self._dimension == other._dimension and self._rows == other._rows

    def __repr__(self) -> str:
        return f"QuiltBoard({self._dimension}, covered={self.positions_covered()})"
