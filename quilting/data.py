"""Loading pieces and time board layouts from JSON.

Piece record::

    {"positions": [{"x": 0, "y": 0}, ...], "cost": 2, "distance": 1, "collect": 0}

Square record::

    {"piece": <piece record>, "collect": true}

``collect`` defaults to 0 / false and ``piece`` is optional. Unknown
fields are rejected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from quilting.piece import Piece
from quilting.position import Position
from quilting.time_board import Square

DATA_DIR = Path(__file__).parent / "data"
PIECES_PATH = DATA_DIR / "pieces.json"
TIME_BOARD_PATH = DATA_DIR / "time_board.json"

_PIECE_FIELDS = {"positions", "cost", "distance", "collect"}
_SQUARE_FIELDS = {"piece", "collect"}


def _natural(record: dict, key: str, default: int | None = None) -> int:
    value = record.get(key, default)
    if value is None:
        raise ValueError(f"Missing field {key!r} in {record!r}")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Field {key!r} must be a non-negative integer, got {value!r}")
    return value


def _check_fields(record: Any, allowed: set[str], kind: str) -> None:
    if not isinstance(record, dict):
        raise ValueError(f"Expected a {kind} object, got {record!r}")
    unknown = set(record) - allowed
    if unknown:
        raise ValueError(f"Unknown {kind} field(s) {sorted(unknown)} in {record!r}")


def position_from_record(record: Any) -> Position:
    _check_fields(record, {"x", "y"}, "position")
    return Position(_natural(record, "x"), _natural(record, "y"))


def piece_from_record(record: Any) -> Piece:
    _check_fields(record, _PIECE_FIELDS, "piece")
    positions = record.get("positions")
    if not isinstance(positions, list):
        raise ValueError(f"Field 'positions' must be a list in {record!r}")
    return Piece(
        [position_from_record(p) for p in positions],
        cost=_natural(record, "cost"),
        distance=_natural(record, "distance"),
        collect=_natural(record, "collect", 0),
    )


def square_from_record(record: Any) -> Square:
    _check_fields(record, _SQUARE_FIELDS, "square")
    collect = record.get("collect", False)
    if not isinstance(collect, bool):
        raise ValueError(f"Field 'collect' must be a boolean in {record!r}")
    piece = record.get("piece")
    return Square(
        piece=None if piece is None else piece_from_record(piece),
        collect=collect,
    )


def _load_array(text: str | bytes) -> list:
    records = json.loads(text)
    if not isinstance(records, list):
        raise ValueError("Expected a JSON array")
    return records


def load_pieces(text: str | bytes) -> list[Piece]:
    """Parse a JSON array of piece records, keeping their order."""
    return [piece_from_record(r) for r in _load_array(text)]


def load_squares(text: str | bytes) -> list[Square]:
    """Parse a JSON array of square records, keeping their order."""
    return [square_from_record(r) for r in _load_array(text)]


def default_pieces() -> list[Piece]:
    return load_pieces(PIECES_PATH.read_text())


def default_squares() -> list[Square]:
    return load_squares(TIME_BOARD_PATH.read_text())
