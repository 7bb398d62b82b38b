"""The track along which players' tokens move, keeping time.

The time board also decides whose turn it is: the player furthest behind
goes next, and of several players on the same square, the one who got
there last.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from quilting.piece import Piece
from quilting.player import Player, PlayOrder

logger = logging.getLogger(__name__)


@dataclass
class Square:
    """A single square on the time board."""

    # Granted to the first player to cross the square, then gone.
    piece: Piece | None = None
    # Players crossing the square collect income every time.
    collect: bool = False
    players: PlayOrder = field(default_factory=PlayOrder.empty, repr=False)


@dataclass
class MoveResult:
    """What a player picked up while moving."""

    pieces: list[Piece] = field(default_factory=list)
    collect: int = 0
    # May fall short of the requested distance at the end of the board.
    distance: int = 0


class TimeBoardBuilder:
    """Holds a square layout and builds TimeBoards from it."""

    def __init__(self, squares: Iterable[Square] = ()):
        self._squares = list(squares)

    @classmethod
    def new(cls) -> TimeBoardBuilder:
        """A builder holding the default square layout."""
        from quilting.data import default_squares

        return cls(default_squares())

    @classmethod
    def empty(cls) -> TimeBoardBuilder:
        return cls()

    def extend(self, squares: Iterable[Square]) -> TimeBoardBuilder:
        self._squares.extend(squares)
        return self

    def extend_from_json(self, text: str | bytes) -> TimeBoardBuilder:
        """Add squares from a JSON array of square records."""
        from quilting.data import load_squares

        return self.extend(load_squares(text))

    def build(self, play_order: PlayOrder) -> TimeBoard:
        """Build a board with every player on the first square.

        Each build gets its own squares, so boards never share grants.
        """
        squares = [Square(piece=s.piece, collect=s.collect) for s in self._squares]
        return TimeBoard(squares, play_order)


class TimeBoard:
    """The time board.

    Invariant: every player's token is on exactly one square.
    """

    def __init__(self, squares: list[Square], play_order: PlayOrder):
        assert squares, "The time board needs at least one square."
        self._squares = squares
        self._squares[0].players = play_order

    @property
    def squares(self) -> Sequence[Square]:
        """Snapshots of the squares; changing them leaves the board alone."""
        return tuple(
            Square(piece=s.piece, collect=s.collect, players=s.players.copy())
            for s in self._squares
        )

    @property
    def last_index(self) -> int:
        return len(self._squares) - 1

    def __len__(self) -> int:
        return len(self._squares)

    # ── Turn order ───────────────────────────────────────────────────

    def current_index(self) -> int:
        """Index of the earliest square with a player on it."""
        for i, square in enumerate(self._squares):
            if not square.players.is_empty():
                return i
        raise AssertionError("No players on the time board.")

    def current_player(self) -> Player | None:
        """The player whose turn it is, or None once the game is over."""
        i = self.current_index()
        if i == self.last_index:
            return None
        return self._squares[i].players.peek()

    def index_of_next_player(self) -> int:
        """Index of the square of the player who goes after the current one.

        If the current player shares a square, the player below them on
        that square goes next; otherwise it's the next occupied square.
        """
        i = self.current_index()
        if len(self._squares[i].players) > 1:
            return i
        for j in range(i + 1, len(self._squares)):
            if not self._squares[j].players.is_empty():
                return j
        raise AssertionError("Only one player on the time board.")

    def player_index(self, player: Player) -> int:
        """Index of the square *player*'s token is on."""
        for i, square in enumerate(self._squares):
            if player in square.players:
                return i
        raise AssertionError(f"{player} is not on the time board.")

    def is_game_over(self) -> bool:
        return self.current_index() == self.last_index

    # ── Movement ─────────────────────────────────────────────────────

    def move_player(self, distance: int) -> MoveResult:
        """Move the current player *distance* squares forward.

        Stops at the last square. Every square passed or landed on hands
        over its piece, if it still has one, and counts towards collect if
        it is a collect square.
        """
        assert distance > 0, "Must move a positive distance."
        assert not self.is_game_over(), "Cannot move after the game is over."

        start = self.current_index()
        player = self._squares[start].players.pop()
        end = min(start + distance, self.last_index)
        self._squares[end].players.push(player)

        result = MoveResult(distance=end - start)
        for square in self._squares[start + 1 : end + 1]:
            if square.piece is not None:
                result.pieces.append(square.piece)
                square.piece = None
            if square.collect:
                result.collect += 1

        logger.debug(
            "%s moved %d -> %d: collect=%d, pieces=%d",
            player, start, end, result.collect, len(result.pieces),
        )
        return result
