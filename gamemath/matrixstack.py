"""A bounded stack of 4x4 transformation matrices and a floating-point rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from gamemath.vectors import (
    IDENTITY4,
    Matrix4,
    Vector,
    back_transform4,
    mat4_multiply,
    rotate_vector4,
    scale_matrix4,
    transform34,
    translate_matrix4,
    transpose4,
)


def _as_matrix4(m: Sequence[Sequence[float]]) -> Matrix4:
    if len(m) != 4 or any(len(row) != 4 for row in m):
        raise ValueError("expected a 4x4 matrix")
    return tuple(tuple(float(x) for x in row) for row in m)


class MatrixStack:
    """Fixed-depth stack of transformation matrices.

    Every load operation pre-multiplies the top of the stack, so the most
    recently loaded transform is applied to a point first.
    """

    def __init__(self, depth: int = 1) -> None:
        if depth < 1:
            raise ValueError("matrix stack depth must be at least 1")
        self._depth = depth
        self._stack: List[Matrix4] = [IDENTITY4]

    @property
    def depth(self) -> int:
        """Maximum number of matrices the stack can hold."""
        return self._depth

    def __len__(self) -> int:
        return len(self._stack)

    def push(self) -> None:
        """Duplicate the top matrix.

        Raises IndexError when the stack is already full.
        """
        if len(self._stack) >= self._depth:
            raise IndexError("too many pushes onto the matrix stack")
        self._stack.append(self._stack[-1])

    def pop(self) -> None:
        """Discard the top matrix; popping the last one is ignored."""
        if len(self._stack) > 1:
            self._stack.pop()

    def _premultiply(self, m: Matrix4) -> None:
        self._stack[-1] = mat4_multiply(m, self._stack[-1])

    def load_identity(self) -> None:
        """Replace the top matrix with the identity."""
        self._stack[-1] = IDENTITY4

    def rotate(self, angle: float, axis: Sequence[float]) -> None:
        """Apply a rotation of ``angle`` radians about the unit vector ``axis``."""
        self._premultiply(rotate_vector4(-angle, axis))

    def translate(self, dx: float, dy: float, dz: float) -> None:
        """Apply a translation."""
        self._premultiply(translate_matrix4((dx, dy, dz)))

    def scale(self, dx: float, dy: float, dz: float) -> None:
        """Apply a scaling."""
        self._premultiply(scale_matrix4((dx, dy, dz)))

    def load(self, m: Sequence[Sequence[float]]) -> None:
        """Replace the top matrix with ``m``."""
        self._stack[-1] = _as_matrix4(m)

    def top(self) -> Matrix4:
        """The current (top) matrix."""
        return self._stack[-1]

    def transpose(self) -> None:
        """Replace the top matrix with its transpose."""
        self._stack[-1] = transpose4(self._stack[-1])

    def back_transform(self) -> None:
        """Replace the top matrix with its back transform."""
        self._stack[-1] = back_transform4(self._stack[-1])

    def transform(self, v: Sequence[float]) -> Vector:
        """Transform the point ``v`` by the top matrix."""
        return transform34(v, self._stack[-1])


@dataclass
class Rect:
    """Axis-aligned rectangle given by two corners."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    def set(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Set both corners."""
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2

    def set_from_points(self, v1: Sequence[float], v2: Sequence[float]) -> None:
        """Set the corners from the x and y of two points."""
        self.set(v1[0], v1[1], v2[0], v2[1])

    def clear(self) -> None:
        """Collapse the rectangle to the origin."""
        self.set(0.0, 0.0, 0.0, 0.0)

    def width(self) -> float:
        """Absolute horizontal extent."""
        return abs(self.x2 - self.x1)

    def height(self) -> float:
        """Absolute vertical extent."""
        return abs(self.y2 - self.y1)