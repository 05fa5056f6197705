"""Coherent (Perlin) gradient noise in one, two and three dimensions."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

MAXB = 0x100
N = 0x1000
SEED = 30757

TEXTURE_SIZE = 128
_START_FREQUENCY = 4
_OCTAVES = 4


class _LinearCongruential:
    """Deterministic generator matching the classic ``srand``/``rand`` pair."""

    def __init__(self, seed: int) -> None:
        self._state = seed & 0xFFFFFFFF

    def __call__(self) -> int:
        self._state = (self._state * 214013 + 2531011) & 0xFFFFFFFF
        return (self._state >> 16) & 0x7FFF


def _normalized(values: Sequence[float]) -> Tuple[float, ...]:
    length = math.sqrt(sum(v * v for v in values))
    if length == 0.0:
        return tuple(math.nan for _ in values)
    return tuple(v / length for v in values)


def _s_curve(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _extend(base: List, count: int) -> List:
    """Append ``count + 2`` wrapped entries so lookups past the end stay valid."""
    full = list(base)
    for i in range(count + 2):
        full.append(full[i])
    return full


class NoiseGenerator:
    """Gradient noise whose lattice repeats every ``frequency`` units."""

    def __init__(self, frequency: int) -> None:
        self.set_frequency(frequency)

    @property
    def frequency(self) -> int:
        """Number of lattice cells before the noise repeats."""
        return self._b

    def set_frequency(self, frequency: int) -> None:
        """Rebuild the permutation and gradient tables for ``frequency``."""
        if not 1 <= frequency <= MAXB:
            raise ValueError(f"frequency must be between 1 and {MAXB}")
        self._b = frequency
        self._bm = frequency - 1
        self._build_tables()

    def _build_tables(self) -> None:
        b = self._b
        rand = _LinearCongruential(SEED)

        def component() -> float:
            return ((rand() % (b + b)) - b) / b

        perm: List[int] = []
        g1: List[float] = []
        g2: List[Tuple[float, ...]] = []
        g3: List[Tuple[float, ...]] = []
        for i in range(b):
            perm.append(i)
            g1.append(component())
            g2.append(_normalized([component() for _ in range(2)]))
            g3.append(_normalized([component() for _ in range(3)]))

        for i in range(b - 1, 0, -1):
            j = rand() % b
            perm[i], perm[j] = perm[j], perm[i]

        self._p = _extend(perm, b)
        self._g1 = _extend(g1, b)
        self._g2 = _extend(g2, b)
        self._g3 = _extend(g3, b)

    def _setup(self, value: float) -> Tuple[int, int, float, float]:
        t = value + N
        whole = int(t)
        b0 = whole & self._bm
        b1 = (b0 + 1) & self._bm
        r0 = t - whole
        return b0, b1, r0, r0 - 1.0

    def noise1(self, x: float) -> float:
        """Noise value at ``x``."""
        bx0, bx1, rx0, rx1 = self._setup(x)
        sx = _s_curve(rx0)
        u = rx0 * self._g1[self._p[bx0]]
        v = rx1 * self._g1[self._p[bx1]]
        return _lerp(sx, u, v)

    def noise2(self, x: float, y: float) -> float:
        """Noise value at ``(x, y)``."""
        p = self._p
        g2 = self._g2
        bx0, bx1, rx0, rx1 = self._setup(x)
        by0, by1, ry0, ry1 = self._setup(y)

        i = p[bx0]
        j = p[bx1]
        b00 = p[i + by0]
        b10 = p[j + by0]
        b01 = p[i + by1]
        b11 = p[j + by1]

        sx = _s_curve(rx0)
        sy = _s_curve(ry0)

        def at(q: Sequence[float], rx: float, ry: float) -> float:
            return rx * q[0] + ry * q[1]

        a = _lerp(sx, at(g2[b00], rx0, ry0), at(g2[b10], rx1, ry0))
        b = _lerp(sx, at(g2[b01], rx0, ry1), at(g2[b11], rx1, ry1))
        return _lerp(sy, a, b)

    def noise3(self, x: float, y: float, z: float) -> float:
        """Noise value at ``(x, y, z)``."""
        p = self._p
        g3 = self._g3
        bx0, bx1, rx0, rx1 = self._setup(x)
        by0, by1, ry0, ry1 = self._setup(y)
        bz0, bz1, rz0, rz1 = self._setup(z)

        i = p[bx0]
        j = p[bx1]
        b00 = p[i + by0]
        b10 = p[j + by0]
        b01 = p[i + by1]
        b11 = p[j + by1]

        t = _s_curve(rx0)
        sy = _s_curve(ry0)
        sz = _s_curve(rz0)

        def at(q: Sequence[float], rx: float, ry: float, rz: float) -> float:
            return rx * q[0] + ry * q[1] + rz * q[2]

        a = _lerp(t, at(g3[b00 + bz0], rx0, ry0, rz0), at(g3[b10 + bz0], rx1, ry0, rz0))
        b = _lerp(t, at(g3[b01 + bz0], rx0, ry1, rz0), at(g3[b11 + bz0], rx1, ry1, rz0))
        c = _lerp(sy, a, b)

        a = _lerp(t, at(g3[b00 + bz1], rx0, ry0, rz1), at(g3[b10 + bz1], rx1, ry0, rz1))
        b = _lerp(t, at(g3[b01 + bz1], rx0, ry1, rz1), at(g3[b11 + bz1], rx1, ry1, rz1))
        d = _lerp(sy, a, b)

        return _lerp(sz, c, d)

    def fractal1(self, x: float, alpha: float, beta: float, n: int) -> float:
        """Sum of ``n`` octaves; ``alpha`` weights and ``beta`` spaces them."""
        total = 0.0
        weight = 1.0
        for _ in range(n):
            total += self.noise1(x) / weight
            weight *= alpha
            x *= beta
        return total

    def fractal2(self, x: float, y: float, alpha: float, beta: float, n: int) -> float:
        """Two-dimensional sum of ``n`` octaves."""
        total = 0.0
        weight = 1.0
        for _ in range(n):
            total += self.noise2(x, y) / weight
            weight *= alpha
            x *= beta
            y *= beta
        return total

    def fractal3(
        self, x: float, y: float, z: float, alpha: float, beta: float, n: int
    ) -> float:
        """Three-dimensional sum of ``n`` octaves."""
        total = 0.0
        weight = 1.0
        for _ in range(n):
            total += self.noise3(x, y, z) / weight
            weight *= alpha
            x *= beta
            y *= beta
            z *= beta
        return total


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value)))


def make_noise_texture(size: int = TEXTURE_SIZE) -> bytes:
    """RGBA volume of ``size``³ texels, one noise octave per channel.

    Channel ``c`` holds frequency ``4 * 2**c`` at amplitude ``0.5 / 2**c``.
    Texels are laid out x-major, then y, then z, four bytes each.
    """
    highest = _START_FREQUENCY << (_OCTAVES - 1)
    if size // highest == 0:
        raise ValueError(f"texture size must be at least {highest}")

    data = bytearray(size * size * size * 4)
    generator = NoiseGenerator(_START_FREQUENCY)
    frequency = _START_FREQUENCY
    amplitude = 0.5
    for channel in range(_OCTAVES):
        generator.set_frequency(frequency)
        noise3 = generator.noise3
        step = 1.0 / (size // frequency)
        nx = ny = nz = 0.0
        pos = channel
        # The y and z coordinates keep accumulating across rows and slices.
        for _ in range(size):
            for _ in range(size):
                for _ in range(size):
                    data[pos] = _to_byte(((noise3(nx, ny, nz) + 1.0) * amplitude) * 128.0)
                    pos += 4
                    nz += step
                ny += step
            nx += step
        frequency *= 2
        amplitude *= 0.5
    return bytes(data)