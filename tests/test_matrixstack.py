import math

import pytest

from gamemath.matrixstack import MatrixStack, Rect
from gamemath.vectors import (
    IDENTITY4,
    Z_AXIS,
    add,
    rotate_vector4,
    transpose4,
)


def _flat(m):
    return [value for row in m for value in row]


def test_new_stack_holds_identity():
    stack = MatrixStack(3)
    assert stack.top() == IDENTITY4
    assert len(stack) == 1


def test_invalid_depth_rejected():
    with pytest.raises(ValueError):
        MatrixStack(0)


def test_push_beyond_depth_raises():
    stack = MatrixStack(2)
    stack.push()
    with pytest.raises(IndexError):
        stack.push()


def test_default_depth_cannot_push():
    stack = MatrixStack()
    with pytest.raises(IndexError):
        stack.push()


def test_push_and_pop_restore_previous():
    stack = MatrixStack(4)
    stack.translate(1.0, 2.0, 3.0)
    saved = stack.top()
    stack.push()
    assert stack.top() == saved
    stack.scale(2.0, 2.0, 2.0)
    assert stack.top() != saved
    stack.pop()
    assert stack.top() == saved


def test_pop_on_last_matrix_is_ignored():
    stack = MatrixStack(2)
    stack.translate(5.0, 0.0, 0.0)
    before = stack.top()
    stack.pop()
    assert stack.top() == before
    assert len(stack) == 1


def test_identity_transform_keeps_point():
    stack = MatrixStack()
    assert stack.transform((1.5, -2.0, 3.25)) == (1.5, -2.0, 3.25)


def test_translate_moves_point():
    stack = MatrixStack()
    stack.translate(1.0, 2.0, 3.0)
    point = (4.0, 5.0, 6.0)
    assert stack.transform(point) == add(point, (1.0, 2.0, 3.0))


def test_scale_scales_point():
    stack = MatrixStack()
    stack.scale(2.0, 3.0, 4.0)
    assert stack.transform((1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)


def test_last_loaded_applies_first():
    stack = MatrixStack()
    stack.translate(1.0, 0.0, 0.0)
    stack.scale(2.0, 2.0, 2.0)
    # scale applies first, then translation
    assert stack.transform((1.0, 1.0, 1.0)) == (3.0, 2.0, 2.0)


def test_rotate_uses_negated_angle():
    stack = MatrixStack()
    stack.rotate(0.7, Z_AXIS)
    expected = _flat(rotate_vector4(-0.7, Z_AXIS))
    assert _flat(stack.top()) == pytest.approx(expected, abs=1e-9)


def test_rotate_and_back_is_identity():
    stack = MatrixStack()
    stack.rotate(1.1, Z_AXIS)
    stack.rotate(-1.1, Z_AXIS)
    assert _flat(stack.top()) == pytest.approx(_flat(IDENTITY4), abs=1e-9)


def test_load_and_top_round_trip():
    m = [[float(r * 4 + c) for c in range(4)] for r in range(4)]
    stack = MatrixStack()
    stack.load(m)
    assert stack.top() == tuple(tuple(row) for row in m)


def test_load_rejects_wrong_shape():
    with pytest.raises(ValueError):
        MatrixStack().load([[1.0, 0.0], [0.0, 1.0]])


def test_load_identity_resets():
    stack = MatrixStack()
    stack.translate(3.0, 3.0, 3.0)
    stack.load_identity()
    assert stack.top() == IDENTITY4


def test_transpose_matches_function_and_twice_is_original():
    m = [[float(r * 4 + c + 1) for c in range(4)] for r in range(4)]
    stack = MatrixStack()
    stack.load(m)
    stack.transpose()
    assert stack.top() == transpose4(m)
    stack.transpose()
    assert stack.top() == tuple(tuple(row) for row in m)


def test_back_transform_undoes_scale_and_translation():
    stack = MatrixStack()
    stack.translate(3.0, -2.0, 5.0)
    stack.scale(2.0, 4.0, 8.0)
    point = (1.0, 1.0, 1.0)
    moved = stack.transform(point)
    stack.back_transform()
    back = stack.transform(moved)
    assert all(math.isclose(a, b, abs_tol=1e-12) for a, b in zip(back, point))


def test_rect_defaults_and_dimensions():
    rect = Rect()
    assert rect.width() == 0.0 and rect.height() == 0.0
    rect.set(5.0, 7.0, 1.0, 2.0)
    assert rect.width() == abs(1.0 - 5.0)
    assert rect.height() == abs(2.0 - 7.0)


def test_rect_from_points_and_clear():
    rect = Rect()
    rect.set_from_points((1.0, 2.0, 9.0), (4.0, 8.0, -1.0))
    assert (rect.x1, rect.y1, rect.x2, rect.y2) == (1.0, 2.0, 4.0, 8.0)
    rect.clear()
    assert rect == Rect()