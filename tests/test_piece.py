"""Tests for quilting.piece."""

import pytest

from quilting import examples
from quilting.piece import Piece
from quilting.position import Dimension, Flip, Position, Rotation, Transformation


def pos(x: int, y: int) -> Position:
    return Position(x, y)


ALL_EXAMPLES = [
    examples.piece0(), examples.piece1(), examples.piece2(),
    examples.piece3(), examples.piece4(),
]


# ── Construction ─────────────────────────────────────────────────────

def test_positions_are_sorted_and_deduplicated():
    piece = Piece([pos(1, 0), pos(0, 1), pos(1, 0), pos(0, 0)], 1, 1)
    assert list(piece.positions()) == [pos(0, 0), pos(0, 1), pos(1, 0)]
    assert piece.size() == 3


def test_dimension_is_tight():
    piece = examples.piece1()
    assert piece.dimension() == Dimension(3, 4)


def test_empty_piece_is_zero_by_zero():
    piece = Piece([], 0, 0)
    assert piece.dimension() == Dimension(0, 0)
    assert piece.size() == 0
    assert list(piece.positions()) == []


def test_attributes():
    piece = examples.piece2()
    assert (piece.cost, piece.distance, piece.collect) == (8, 6, 3)


def test_collect_defaults_to_zero():
    assert Piece([pos(0, 0)], 3, 2).collect == 0


def test_single_position():
    piece = Piece.single_position()
    assert list(piece.positions()) == [pos(0, 0)]
    assert (piece.cost, piece.distance, piece.collect) == (0, 0, 0)


def test_equal_pieces_compare_and_hash_equal():
    a = Piece([pos(0, 0), pos(1, 0)], 2, 1)
    b = Piece([pos(1, 0), pos(0, 0)], 2, 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Piece([pos(0, 0), pos(1, 0)], 2, 2)


# ── Transformed geometry ─────────────────────────────────────────────

def test_transform_width_height():
    piece = examples.piece0()
    t1 = Transformation(Rotation.NONE, Flip.IDENTITY)
    t2 = Transformation(Rotation.CW90, Flip.IDENTITY)

    assert piece.width(t1) == 2
    assert piece.width(t2) == 3
    assert piece.height(t1) == 3
    assert piece.height(t2) == 2


def test_positions_with_identity():
    # 01
    #  2
    #  3
    positions = list(examples.piece0().positions(Transformation.identity()))
    assert positions == [pos(0, 0), pos(1, 0), pos(1, 1), pos(1, 2)]


def test_positions_with_horizontal_flip():
    # 10
    # 2
    # 3
    positions = list(examples.piece0().positions(Transformation(Rotation.NONE, Flip.HORIZONTAL)))
    assert positions == [pos(1, 0), pos(0, 0), pos(0, 1), pos(0, 2)]


def test_positions_with_90():
    #   0
    # 321
    positions = list(examples.piece0().positions(Transformation(Rotation.CW90, Flip.IDENTITY)))
    assert positions == [pos(2, 0), pos(2, 1), pos(1, 1), pos(0, 1)]


def test_positions_with_90_and_flip():
    # 0
    # 123
    positions = list(examples.piece0().positions(Transformation(Rotation.CW90, Flip.HORIZONTAL)))
    assert positions == [pos(0, 0), pos(0, 1), pos(1, 1), pos(2, 1)]


def test_positions_can_be_asked_for_again():
    piece = examples.piece3()
    t = Transformation(Rotation.CW270, Flip.HORIZONTAL)
    first = piece.positions(t)
    assert list(first) == list(piece.positions(t))
    assert list(first) == []  # the generator itself is spent
    assert len(list(piece.positions(t))) == 3


@pytest.mark.parametrize("transformation", Transformation.all())
@pytest.mark.parametrize("piece", ALL_EXAMPLES)
def test_transformed_positions_fill_transformed_box(piece, transformation):
    positions = list(piece.positions(transformation))
    assert len(positions) == piece.size()
    assert len(set(positions)) == piece.size()
    d = piece.dimension(transformation)
    assert all(d.contains(p) for p in positions)
    assert max(p.x for p in positions) + 1 == d.width
    assert max(p.y for p in positions) + 1 == d.height
