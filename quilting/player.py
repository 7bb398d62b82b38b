"""Players, the order they play in, and the state each one owns."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field

from quilting.position import Dimension
from quilting.quilt_board import DEFAULT_DIMENSION, QuiltBoard
from quilting.shuffle import shuffle

DEFAULT_NPLAYERS = 2
DEFAULT_STARTING_CURRENCY = 5


@dataclass(frozen=True, order=True)
class Player:
    """A game player.

    Players are numbered from 0, so ``index`` is suitable as a list index.
    """

    index: int

    def __int__(self) -> int:
        return self.index


class PlayOrder:
    """A stack of players ready to play.

    The time board keeps one on every square to track whose turn it is.
    The last player pushed is on top and goes next.
    """

    def __init__(self, players: list[Player] | None = None):
        # Bottom of the stack first.
        self._stack: list[Player] = list(players or [])

    @classmethod
    def new(cls, nplayers: int, rng: random.Random | None = None) -> PlayOrder:
        """*nplayers* players in random order."""
        result = cls.new_in_order(nplayers)
        shuffle(result._stack, rng)
        return result

    @classmethod
    def new_in_order(cls, nplayers: int) -> PlayOrder:
        """*nplayers* players with ``Player(0)`` on top."""
        return cls([Player(i) for i in reversed(range(nplayers))])

    @classmethod
    def empty(cls) -> PlayOrder:
        return cls()

    def copy(self) -> PlayOrder:
        return PlayOrder(self._stack)

    def push(self, player: Player) -> None:
        """Put *player* on top, to go next."""
        self._stack.append(player)

    def pop(self) -> Player | None:
        """Remove and return the player on top, if any."""
        return self._stack.pop() if self._stack else None

    def peek(self) -> Player | None:
        return self._stack[-1] if self._stack else None

    def players(self) -> Iterator[Player]:
        """The players in play order, top of the stack first."""
        return reversed(self._stack)

    def is_empty(self) -> bool:
        return not self._stack

    def __iter__(self) -> Iterator[Player]:
        return self.players()

    def __len__(self) -> int:
        return len(self._stack)

    def __contains__(self, player: object) -> bool:
        return player in self._stack

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayOrder):
            return NotImplemented
        return self._stack == other._stack

    def __repr__(self) -> str:
        return f"PlayOrder({list(self.players())})"


@dataclass
class PlayerState:
    """The state associated with one player."""

    quilt_board: QuiltBoard = field(default_factory=QuiltBoard)
    currency: int = DEFAULT_STARTING_CURRENCY
    # Bonus points earned by the player.
    bonus: int = 0
    # Paid out on every collect square crossed.
    income: int = 0

    @classmethod
    def new(
        cls,
        dimension: Dimension | None = None,
        currency: int = DEFAULT_STARTING_CURRENCY,
    ) -> PlayerState:
        dimension = dimension or Dimension.square(DEFAULT_DIMENSION)
        return cls(quilt_board=QuiltBoard(dimension), currency=currency)
