"""Tests for quilting.position."""

import pytest

from quilting.position import Dimension, Flip, Position, Rotation, Transformation

R = Rotation
F = Flip


def _check(d: Dimension, p: Position, expected: list[tuple[Rotation, Flip, int, int]]):
    for rotation, flip, x, y in expected:
        got = Transformation(rotation, flip).apply(d, p)
        assert got == Position(x, y), f"{rotation.name}/{flip.name}: {got}"


# ── Position / Dimension ─────────────────────────────────────────────

def test_translate_adds_coordinates():
    assert Position(2, 3).translate(Position(4, 1)) == Position(6, 4)


def test_positions_sort_by_x_then_y():
    assert sorted([Position(1, 0), Position(0, 2), Position(0, 1)]) == [
        Position(0, 1), Position(0, 2), Position(1, 0),
    ]


def test_dimension_contains():
    d = Dimension(3, 2)
    assert d.contains(Position(0, 0))
    assert d.contains(Position(2, 1))
    assert not d.contains(Position(3, 0))
    assert not d.contains(Position(0, 2))


def test_negative_coordinates_are_rejected():
    with pytest.raises(AssertionError):
        Position(-1, 0)
    with pytest.raises(AssertionError):
        Position(0, -3)


def test_dimension_transpose_and_square():
    assert Dimension(2, 5).transpose() == Dimension(5, 2)
    assert Dimension.square(9) == Dimension(9, 9)


# ── Transformations ──────────────────────────────────────────────────

def test_transform_upper_left():
    _check(Dimension(6, 4), Position(0, 0), [
        (R.NONE,  F.IDENTITY,   0, 0),
        (R.CW90,  F.IDENTITY,   3, 0),
        (R.CW180, F.IDENTITY,   5, 3),
        (R.CW270, F.IDENTITY,   0, 5),
        (R.NONE,  F.HORIZONTAL, 5, 0),
        (R.CW90,  F.HORIZONTAL, 0, 0),
        (R.CW180, F.HORIZONTAL, 0, 3),
        (R.CW270, F.HORIZONTAL, 3, 5),
    ])


def test_transform_upper_right():
    _check(Dimension(8, 6), Position(7, 0), [
        (R.NONE,  F.IDENTITY,   7, 0),
        (R.CW90,  F.IDENTITY,   5, 7),
        (R.CW180, F.IDENTITY,   0, 5),
        (R.CW270, F.IDENTITY,   0, 0),
        (R.NONE,  F.HORIZONTAL, 0, 0),
        (R.CW90,  F.HORIZONTAL, 0, 7),
        (R.CW180, F.HORIZONTAL, 7, 5),
        (R.CW270, F.HORIZONTAL, 5, 0),
    ])


def test_transform_interior_cell():
    _check(Dimension(6, 4), Position(2, 1), [
        (R.NONE,  F.IDENTITY,   2, 1),
        (R.CW90,  F.IDENTITY,   2, 2),
        (R.CW180, F.IDENTITY,   3, 2),
        (R.CW270, F.IDENTITY,   1, 3),
        (R.NONE,  F.HORIZONTAL, 3, 1),
        (R.CW90,  F.HORIZONTAL, 1, 2),
        (R.CW180, F.HORIZONTAL, 2, 2),
        (R.CW270, F.HORIZONTAL, 2, 3),
    ])


def test_transform_width_height():
    d = Dimension(2, 3)
    assert Transformation(R.NONE, F.IDENTITY).apply_dim(d) == d
    assert Transformation(R.CW90, F.IDENTITY).apply_dim(d) == Dimension(3, 2)
    assert Transformation(R.CW180, F.HORIZONTAL).apply_dim(d) == d
    assert Transformation(R.CW270, F.HORIZONTAL).apply_dim(d) == Dimension(3, 2)


def test_identity_is_a_no_op():
    t = Transformation.identity()
    assert t == Transformation()
    d = Dimension(4, 3)
    assert t.apply_dim(d) == d
    for x in range(4):
        for y in range(3):
            assert t.apply(d, Position(x, y)) == Position(x, y)


def test_all_lists_eight_distinct_transformations():
    all_ts = Transformation.all()
    assert len(set(all_ts)) == 8
    assert all_ts[0] == Transformation.identity()


@pytest.mark.parametrize("transformation", Transformation.all())
def test_transform_is_a_bijection_onto_new_dimension(transformation):
    """Every cell of the old box maps to a distinct cell of the new box."""
    d = Dimension(5, 3)
    new_d = transformation.apply_dim(d)
    images = {
        transformation.apply(d, Position(x, y))
        for x in range(d.width)
        for y in range(d.height)
    }
    assert images == {
        Position(x, y) for x in range(new_d.width) for y in range(new_d.height)
    }
