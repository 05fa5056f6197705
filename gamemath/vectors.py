"""Three-dimensional vector, matrix and plane helpers.

Vectors are tuples of floats ``(x, y, z)``; planes and homogeneous points are
``(a, b, c, d)`` / ``(x, y, z, w)``.  Matrices are tuples of rows and are
applied to row vectors, so a translation lives in the bottom row.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Vector = Tuple[float, float, float]
Vector4 = Tuple[float, float, float, float]
Plane = Tuple[float, float, float, float]
Matrix3 = Tuple[Tuple[float, float, float], ...]
Matrix4 = Tuple[Tuple[float, float, float, float], ...]

VERY_SMALL = 1.0e-20

IDENTITY3: Matrix3 = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)
IDENTITY4: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

ORIGIN: Vector = (0.0, 0.0, 0.0)
X_AXIS: Vector = (1.0, 0.0, 0.0)
Y_AXIS: Vector = (0.0, 1.0, 0.0)
Z_AXIS: Vector = (0.0, 0.0, 1.0)


def _vec3(v: Sequence[float]) -> Vector:
    if len(v) < 3:
        raise ValueError(f"expected at least 3 components, got {len(v)}")
    return (float(v[0]), float(v[1]), float(v[2]))


def _square(m: Sequence[Sequence[float]], size: int) -> None:
    if len(m) != size or any(len(row) != size for row in m):
        raise ValueError(f"expected a {size}x{size} matrix")


def _matmul(a, b):
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


def compare(a: Sequence[float], b: Sequence[float]) -> bool:
    """True when the first three components are exactly equal."""
    return all((x - y) == 0.0 for x, y in zip(_vec3(a), _vec3(b)))


def magnitude(a: Sequence[float]) -> float:
    """Length of a vector."""
    return math.sqrt(squared_magnitude(a))


def squared_magnitude(a: Sequence[float]) -> float:
    """Squared length of a vector."""
    x, y, z = _vec3(a)
    return x * x + y * y + z * z


def normalize(a: Sequence[float], tolerance: float = VERY_SMALL) -> tuple[Vector, float]:
    """Return ``(unit_vector, original_length)``.

    A vector shorter than ``tolerance`` becomes the zero vector with length 0.
    """
    length = math.sqrt(dot(a, a))
    if length < tolerance:
        return ORIGIN, 0.0
    x, y, z = _vec3(a)
    return (x / length, y / length, z / length), length


def mat3_multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix3:
    """Product ``a * b`` of two 3x3 matrices."""
    _square(a, 3)
    _square(b, 3)
    return _matmul(a, b)


def mat4_multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix4:
    """Product ``a * b`` of two 4x4 matrices."""
    _square(a, 4)
    _square(b, 4)
    return _matmul(a, b)


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Cross product ``a x b``."""
    ax, ay, az = _vec3(a)
    bx, by, bz = _vec3(b)
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of the first three components."""
    ax, ay, az = _vec3(a)
    bx, by, bz = _vec3(b)
    return ax * bx + ay * by + az * bz


def transform33(v: Sequence[float], m: Sequence[Sequence[float]]) -> Vector:
    """Transform the row vector ``v`` by a 3x3 matrix."""
    _square(m, 3)
    x, y, z = _vec3(v)
    return tuple(x * m[0][j] + y * m[1][j] + z * m[2][j] for j in range(3))


def transform34(v: Sequence[float], m: Sequence[Sequence[float]]) -> Vector:
    """Transform the point ``v`` by a 4x4 matrix (w taken as 1)."""
    _square(m, 4)
    x, y, z = _vec3(v)
    return tuple(x * m[0][j] + y * m[1][j] + z * m[2][j] + m[3][j] for j in range(3))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Distance between two points."""
    return magnitude(sub(a, b))


def distance_squared(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared distance between two points."""
    return squared_magnitude(sub(a, b))


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise sum."""
    return tuple(x + y for x, y in zip(_vec3(a), _vec3(b)))


def sub(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise difference ``a - b``."""
    return tuple(x - y for x, y in zip(_vec3(a), _vec3(b)))


def scale(v: Sequence[float], scalar: float) -> Vector:
    """Vector multiplied by a scalar."""
    return tuple(scalar * x for x in _vec3(v))


def negate(v: Sequence[float]) -> Vector:
    """Vector pointing the opposite way."""
    return tuple(-x for x in _vec3(v))


def normal(v1: Sequence[float], v2: Sequence[float]) -> Vector:
    """Unit vector perpendicular to ``v1`` and ``v2``."""
    return normalize(cross(v1, v2))[0]


def angle_normalized(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Angle in radians between two unit vectors."""
    return math.acos(dot(v1, v2))


def angle(a: Sequence[float], b: Sequence[float]) -> float:
    """Angle in radians between two vectors of any length."""
    u = normalize(a)[0]
    w = normalize(b)[0]
    return math.atan2(magnitude(cross(u, w)), dot(u, w))


def angle3(v1: Sequence[float], v2: Sequence[float], v3: Sequence[float]) -> float:
    """Angle at ``v2`` formed by the points ``v1``, ``v2``, ``v3``."""
    a = normalize(sub(v1, v2))[0]
    b = normalize(sub(v3, v2))[0]
    return angle(a, b)


def dihedral(
    v1: Sequence[float], v2: Sequence[float], v3: Sequence[float], v4: Sequence[float]
) -> float:
    """Signed dihedral angle in radians formed by four points."""
    a = normalize(sub(v1, v2))[0]
    b = normalize(sub(v3, v2))[0]
    u1 = normalize(cross(a, b))[0]

    c = normalize(sub(v2, v3))[0]
    d = normalize(sub(v4, v3))[0]
    u2 = normalize(cross(c, d))[0]

    e = cross(u2, u1)
    result = math.atan2(magnitude(e), dot(u1, u2))
    # Near 0 or 180 degrees e collapses to the zero vector and the sign is +.
    e = normalize(e)[0]
    return result if dot(b, e) >= 0.0 else -result


def rotate_vector3(angle: float, v: Sequence[float]) -> Matrix3:
    """3x3 matrix rotating by ``angle`` radians about the unit vector ``v``."""
    x, y, z = _vec3(v)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return (
        (x * x * t + c, x * y * t - z * s, x * z * t + y * s),
        (x * y * t + z * s, y * y * t + c, y * z * t - x * s),
        (x * z * t - y * s, y * z * t + x * s, z * z * t + c),
    )


def _expand(m3: Matrix3) -> Matrix4:
    return tuple(row + (0.0,) for row in m3) + ((0.0, 0.0, 0.0, 1.0),)


def rotate_vector4(angle: float, v: Sequence[float]) -> Matrix4:
    """4x4 matrix rotating by ``angle`` radians about the unit vector ``v``."""
    return _expand(rotate_vector3(angle, v))


def rotate_axis3(angle: float, axis: str) -> Matrix3:
    """3x3 rotation about ``'x'``, ``'y'`` or ``'z'``; any other axis gives identity."""
    c = math.cos(angle)
    s = math.sin(angle)
    if axis == "x":
        return ((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))
    if axis == "y":
        return ((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))
    if axis == "z":
        return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))
    return IDENTITY3


def rotate_axis4(angle: float, axis: str) -> Matrix4:
    """4x4 rotation about ``'x'``, ``'y'`` or ``'z'``; any other axis gives identity."""
    return _expand(rotate_axis3(angle, axis))


def scale_matrix4(v: Sequence[float]) -> Matrix4:
    """4x4 matrix scaling by the components of ``v``."""
    x, y, z = _vec3(v)
    return (
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def translate_matrix4(v: Sequence[float]) -> Matrix4:
    """4x4 matrix translating by ``v``."""
    x, y, z = _vec3(v)
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (x, y, z, 1.0),
    )


def format_matrix4(m: Sequence[Sequence[float]]) -> str:
    """Four lines of four ``%f`` values, each line ending in a newline."""
    _square(m, 4)
    return "".join(" ".join("%f" % value for value in row) + "\n" for row in m)


def format_vector(v: Sequence[float], label: str) -> str:
    """``label:(x,y,z)`` with ``%f`` components."""
    x, y, z = _vec3(v)
    return "%s:(%f,%f,%f)" % (label, x, y, z)


def transpose4(m: Sequence[Sequence[float]]) -> Matrix4:
    """Transpose of a 4x4 matrix."""
    _square(m, 4)
    return tuple(tuple(float(x) for x in col) for col in zip(*m))


def back_transform4(m: Sequence[Sequence[float]]) -> Matrix4:
    """Undo a scale-plus-translation matrix.

    The diagonal is inverted, the off-diagonal 3x3 part is transposed and the
    translation row is negated and rescaled.  Element ``[2][3]`` is taken from
    ``m[3][1]``, as the established behaviour of this routine.
    """
    _square(m, 4)
    d0 = 1.0 / m[0][0]
    d1 = 1.0 / m[1][1]
    d2 = 1.0 / m[2][2]
    return (
        (d0, m[1][0], m[2][0], m[3][0]),
        (m[0][1], d1, m[2][1], m[3][1]),
        (m[0][2], m[1][2], d2, m[3][1]),
        (-m[3][0] * d0, -m[3][1] * d1, -m[3][2] * d2, m[3][3]),
    )


def plane_from_points(
    v1: Sequence[float], v2: Sequence[float], v3: Sequence[float]
) -> Plane:
    """Plane ``(a, b, c, d)`` through three points, with a unit normal."""
    n = normalize(cross(sub(v2, v1), sub(v3, v1)))[0]
    return n + (-dot(n, v1),)


def plane_from_normal(point: Sequence[float], normal: Sequence[float]) -> Plane:
    """Plane ``(a, b, c, d)`` through ``point`` with the given normal."""
    n = _vec3(normal)
    return n + (-dot(n, point),)


def distance_to_plane(v: Sequence[float], plane: Sequence[float]) -> float:
    """Signed distance from a point to a plane with a unit normal."""
    a, b, c, d = plane
    x, y, z = _vec3(v)
    return a * x + b * y + c * z + d


def shadow_matrix(light: Sequence[float]) -> Matrix4:
    """Matrix projecting geometry onto the ground plane (y = 0) from ``light``.

    ``light`` is a homogeneous position ``(x, y, z, w)``.
    """
    if len(light) != 4:
        raise ValueError("light must have 4 components (x, y, z, w)")
    plane = plane_from_points(ORIGIN, Z_AXIS, X_AXIS)
    d = sum(p * l for p, l in zip(plane, light))
    return tuple(
        tuple((d if r == c else 0.0) - light[c] * plane[r] for c in range(4))
        for r in range(4)
    )