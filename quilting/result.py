"""Errors that can be attributed to players."""

from __future__ import annotations

from enum import Enum


class PlayerError(Enum):
    PLACEMENT_OVERHANGS_RIGHT = "The piece overhangs the right edge of the board."
    PLACEMENT_OVERHANGS_BOTTOM = "The piece overhangs the bottom edge of the board."
    PLACEMENT_OVERLAPS_PIECE = "The piece overlaps another piece."
    TAKE_OVER_DEPTH = "Cannot take pieces from that deep in the piece queue."
    OUT_OF_PIECES = "The piece queue does not have that many pieces."


class QuiltingError(Exception):
    """Raised when a player's move is rejected.

    The game state is unchanged; the caller may let the player retry.
    """

    def __init__(self, error: PlayerError):
        super().__init__(error.value)
        self.error = error
