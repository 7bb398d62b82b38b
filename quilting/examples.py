"""Some sample pieces, for tests and demos. Game code never imports this."""

from __future__ import annotations

from quilting.piece import Piece
from quilting.position import Position


def _cells(*coords: tuple[int, int]) -> list[Position]:
    return [Position(x, y) for x, y in coords]


def piece0() -> Piece:
    """
    ##
     #
     #
    """
    return Piece(_cells((0, 0), (1, 0), (1, 1), (1, 2)), 2, 1, 0)


def piece1() -> Piece:
    """
    ##
     #
     #
     ##
    """
    return Piece(_cells((0, 0), (1, 0), (1, 1), (1, 2), (1, 3), (2, 3)), 1, 2, 0)


def piece2() -> Piece:
    """
    ##
     ##
     ##
    """
    return Piece(_cells((0, 0), (1, 0), (1, 1), (2, 1), (1, 2), (2, 2)), 8, 6, 3)


def piece3() -> Piece:
    """
     #
    ##
    """
    return Piece(_cells((1, 0), (0, 1), (1, 1)), 1, 3, 0)


def piece4() -> Piece:
    """
     #
     #
    ###
     #
     #
    """
    return Piece(
        _cells((1, 0), (1, 1), (0, 2), (1, 2), (2, 2), (1, 3), (1, 4)), 1, 4, 1,
    )
