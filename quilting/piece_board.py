"""The queue of pieces players choose from."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator

from quilting.piece import Piece
from quilting.result import PlayerError, QuiltingError
from quilting.shuffle import shuffle

logger = logging.getLogger(__name__)

# How deep into the queue a piece may be taken from (0-based).
DEFAULT_DEPTH = 2


class PieceBoardBuilder:
    """Configures and constructs a PieceBoard."""

    def __init__(self, pieces: Iterable[Piece] = (), depth: int = DEFAULT_DEPTH):
        self._pieces = list(pieces)
        self._depth = depth

    @classmethod
    def new(cls) -> PieceBoardBuilder:
        """A builder holding the default set of pieces."""
        from quilting.data import default_pieces

        return cls(default_pieces())

    @classmethod
    def empty(cls) -> PieceBoardBuilder:
        return cls()

    def depth(self, depth: int) -> PieceBoardBuilder:
        self._depth = depth
        return self

    def extend(self, pieces: Iterable[Piece]) -> PieceBoardBuilder:
        self._pieces.extend(pieces)
        return self

    def extend_from_json(self, text: str | bytes) -> PieceBoardBuilder:
        """Add pieces from a JSON array of piece records."""
        from quilting.data import load_pieces

        return self.extend(load_pieces(text))

    def clear(self) -> PieceBoardBuilder:
        self._pieces = []
        return self

    def build(self, rng: random.Random | None = None) -> PieceBoard:
        """Build the board with the pieces shuffled."""
        pieces = list(self._pieces)
        shuffle(pieces, rng)
        logger.debug("Shuffled %d pieces", len(pieces))
        return PieceBoard(pieces, self._depth)

    def build_in_order(self) -> PieceBoard:
        """Build the board with the pieces in the order they were added."""
        return PieceBoard(list(self._pieces), self._depth)


class PieceBoard:
    """The queue of pieces to be taken.

    Only the first ``depth + 1`` pieces are within reach. Taking a piece
    leaves the rest of the queue in its original order.
    """

    def __init__(self, pieces: list[Piece], depth: int = DEFAULT_DEPTH):
        self._queue = pieces
        self._depth = depth

    @property
    def depth(self) -> int:
        return self._depth

    def is_empty(self) -> bool:
        return not self._queue

    def pieces(self) -> Iterator[Piece]:
        """The remaining pieces, front of the queue first."""
        return iter(self._queue)

    def take(self, depth: int) -> Piece:
        """Take the piece *depth* places from the front of the queue."""
        assert depth >= 0, "depth must be non-negative"
        error = None
        if depth > self._depth:
            error = PlayerError.TAKE_OVER_DEPTH
        elif depth >= len(self._queue):
            error = PlayerError.OUT_OF_PIECES
        if error is not None:
            logger.debug("Rejected take at depth %d: %s", depth, error.name)
            raise QuiltingError(error)

        piece = self._queue.pop(depth)
        logger.debug("Took %r from depth %d, %d left", piece, depth, len(self._queue))
        return piece

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Piece]:
        return self.pieces()
