"""The state of a whole quilting game, and how to set one up."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from quilting.piece import Piece
from quilting.piece_board import DEFAULT_DEPTH, PieceBoard, PieceBoardBuilder
from quilting.player import (
    DEFAULT_NPLAYERS,
    DEFAULT_STARTING_CURRENCY,
    Player,
    PlayerState,
    PlayOrder,
)
from quilting.position import Dimension, Position, Transformation
from quilting.quilt_board import DEFAULT_DIMENSION
from quilting.time_board import MoveResult, Square, TimeBoard, TimeBoardBuilder

logger = logging.getLogger(__name__)

# Side of the square a player must cover to earn the bonus.
DEFAULT_BONUS_SQUARE_SIZE = 7
# Points awarded for the bonus square.
BONUS_VALUE = 7


# ── Configuration ────────────────────────────────────────────────────

@dataclass(frozen=True)
class GameConfig:
    """Everything needed to set up a new game.

    ``pieces`` and ``squares`` of None mean the bundled defaults.
    """

    nplayers: int = DEFAULT_NPLAYERS
    starting_currency: int = DEFAULT_STARTING_CURRENCY
    quilt_dimension: Dimension = Dimension.square(DEFAULT_DIMENSION)
    bonus_square_size: int | None = DEFAULT_BONUS_SQUARE_SIZE
    depth: int = DEFAULT_DEPTH
    shuffle: bool = True
    pieces: tuple[Piece, ...] | None = None
    squares: tuple[Square, ...] | None = None


def new_game(config: GameConfig | None = None, rng: random.Random | None = None) -> GameState:
    """Set up a game; *rng* is only used when ``config.shuffle`` is set."""
    config = config or GameConfig()
    assert config.nplayers >= 2, "Must have at least two players."

    if config.pieces is None:
        pieces = PieceBoardBuilder.new()
    else:
        pieces = PieceBoardBuilder(config.pieces)
    pieces.depth(config.depth)

    if config.squares is None:
        squares = TimeBoardBuilder.new()
    else:
        squares = TimeBoardBuilder(config.squares)

    if config.shuffle:
        piece_board = pieces.build(rng)
        play_order = PlayOrder.new(config.nplayers, rng)
    else:
        piece_board = pieces.build_in_order()
        play_order = PlayOrder.new_in_order(config.nplayers)

    time_board = squares.build(play_order)
    players = [
        PlayerState.new(config.quilt_dimension, config.starting_currency)
        for _ in range(config.nplayers)
    ]
    logger.info(
        "New game: %d players, %d pieces, %d squares, first up %s",
        config.nplayers, len(piece_board), len(time_board), play_order.peek(),
    )
    return GameState(
        piece_board=piece_board,
        time_board=time_board,
        players=players,
        bonus_square_size=config.bonus_square_size,
    )


class GameBuilder:
    """Fluent wrapper around GameConfig.

    >>> game = GameBuilder().nplayers(3).no_bonus().build_in_order()
    """

    def __init__(self, config: GameConfig | None = None):
        self._config = config or GameConfig()

    @classmethod
    def empty(cls) -> GameBuilder:
        """A builder whose piece queue has no pieces."""
        return cls(GameConfig(pieces=()))

    @property
    def config(self) -> GameConfig:
        return self._config

    def _set(self, **changes) -> GameBuilder:
        self._config = replace(self._config, **changes)
        return self

    def nplayers(self, nplayers: int) -> GameBuilder:
        assert nplayers >= 2, "Must have at least two players."
        return self._set(nplayers=nplayers)

    def starting_currency(self, currency: int) -> GameBuilder:
        return self._set(starting_currency=currency)

    def quilt_dimension(self, dimension: Dimension) -> GameBuilder:
        return self._set(quilt_dimension=dimension)

    def quilt_size(self, size: int) -> GameBuilder:
        return self._set(quilt_dimension=Dimension.square(size))

    def bonus_square_size(self, size: int) -> GameBuilder:
        return self._set(bonus_square_size=size)

    def no_bonus(self) -> GameBuilder:
        return self._set(bonus_square_size=None)

    def depth(self, depth: int) -> GameBuilder:
        return self._set(depth=depth)

    def pieces(self, pieces: list[Piece]) -> GameBuilder:
        return self._set(pieces=tuple(pieces))

    def squares(self, squares: list[Square]) -> GameBuilder:
        return self._set(squares=tuple(squares))

    def build(self, rng: random.Random | None = None) -> GameState:
        """Build the game, shuffling the pieces and the play order."""
        return new_game(replace(self._config, shuffle=True), rng)

    def build_in_order(self) -> GameState:
        """Build the game without shuffling anything."""
        return new_game(replace(self._config, shuffle=False))


# ── Game state ───────────────────────────────────────────────────────

@dataclass
class GameState:
    """The state of the game. Set one up with new_game or GameBuilder."""

    piece_board: PieceBoard
    time_board: TimeBoard
    players: list[PlayerState]
    # Cleared once somebody earns the bonus.
    bonus_square_size: int | None = DEFAULT_BONUS_SQUARE_SIZE

    def is_game_over(self) -> bool:
        return self.time_board.is_game_over() or self.piece_board.is_empty()

    def current_player(self) -> Player | None:
        return self.time_board.current_player()

    def player(self, player: Player) -> PlayerState:
        return self.players[player.index]

    def take_piece(self, depth: int) -> Piece:
        """Take a piece from the queue; raises QuiltingError if not allowed."""
        return self.piece_board.take(depth)

    def place_piece(
        self,
        player: Player,
        position: Position,
        piece: Piece,
        transformation: Transformation | None = None,
    ) -> None:
        """Sew *piece* into *player*'s quilt.

        Raises QuiltingError, leaving everything as it was, if the piece
        doesn't fit. Otherwise the piece's collect value joins the player's
        income, and the player earns the bonus if they are first to cover
        the bonus square.
        """
        state = self.player(player)
        state.quilt_board.add_piece(position, piece, transformation)
        state.income += piece.collect

        size = self.bonus_square_size
        if size is not None and state.quilt_board.is_square_covered(size):
            state.bonus += BONUS_VALUE
            self.bonus_square_size = None
            logger.debug("%s earned the %dx%d bonus", player, size, size)

    def move_current_player(self, distance: int) -> MoveResult:
        """Move the current player along the time board, paying out income."""
        player = self.current_player()
        assert player is not None, "Cannot move after the game is over."
        result = self.time_board.move_player(distance)
        state = self.player(player)
        state.currency += result.collect * state.income
        return result
