import pytest

from gamemath.noise import MAXB, NoiseGenerator, make_noise_texture

POINTS = [(0.3, 1.7, 2.2), (5.5, 0.25, 9.9), (12.1, 3.3, 7.45), (0.9, 0.1, 0.6)]


def test_noise_is_zero_on_lattice_points():
    gen = NoiseGenerator(16)
    assert gen.noise1(3.0) == 0.0
    assert gen.noise2(1.0, 2.0) == 0.0
    assert gen.noise3(1.0, 2.0, 3.0) == 0.0


def test_generators_with_same_frequency_agree():
    a = NoiseGenerator(32)
    b = NoiseGenerator(32)
    for x, y, z in POINTS:
        assert a.noise1(x) == b.noise1(x)
        assert a.noise2(x, y) == b.noise2(x, y)
        assert a.noise3(x, y, z) == b.noise3(x, y, z)


def test_set_frequency_rebuilds_same_tables():
    gen = NoiseGenerator(8)
    before = [gen.noise3(*p) for p in POINTS]
    gen.set_frequency(64)
    assert gen.frequency == 64
    gen.set_frequency(8)
    assert [gen.noise3(*p) for p in POINTS] == before


def test_noise_repeats_with_frequency():
    gen = NoiseGenerator(16)
    for x, y, z in POINTS:
        assert gen.noise1(x + 16) == pytest.approx(gen.noise1(x), abs=1e-9)
        assert gen.noise2(x + 16, y) == pytest.approx(gen.noise2(x, y), abs=1e-9)
        assert gen.noise3(x, y, z + 16) == pytest.approx(gen.noise3(x, y, z), abs=1e-9)


def test_noise_is_bounded():
    gen = NoiseGenerator(64)
    for step in range(200):
        x = step * 0.137
        assert abs(gen.noise1(x)) <= 1.0
        assert abs(gen.noise2(x, x * 0.5)) <= 2.0
        assert abs(gen.noise3(x, x * 0.3, x * 0.7)) <= 2.0


def test_noise_varies_between_lattice_points():
    gen = NoiseGenerator(16)
    values = {round(gen.noise3(*p), 12) for p in POINTS}
    assert len(values) > 1


def test_fractal_with_one_octave_equals_noise():
    gen = NoiseGenerator(16)
    x, y, z = POINTS[0]
    assert gen.fractal1(x, 2.0, 2.0, 1) == gen.noise1(x)
    assert gen.fractal2(x, y, 2.0, 2.0, 1) == gen.noise2(x, y)
    assert gen.fractal3(x, y, z, 2.0, 2.0, 1) == gen.noise3(x, y, z)


def test_fractal_with_no_octaves_is_zero():
    gen = NoiseGenerator(16)
    assert gen.fractal1(1.3, 2.0, 2.0, 0) == 0.0
    assert gen.fractal3(1.3, 2.1, 0.4, 2.0, 2.0, 0) == 0.0


def test_fractal_two_octaves_combines_scaled_noise():
    gen = NoiseGenerator(16)
    x, y, z = POINTS[1]
    two = gen.fractal3(x, y, z, 2.0, 2.0, 2)
    assert two == pytest.approx(gen.noise3(x, y, z) + gen.noise3(2 * x, 2 * y, 2 * z) / 2)


@pytest.mark.parametrize("frequency", [0, -4, MAXB + 1])
def test_invalid_frequency_rejected(frequency):
    with pytest.raises(ValueError):
        NoiseGenerator(frequency)


def test_texture_too_small_rejected():
    with pytest.raises(ValueError):
        make_noise_texture(31)


def test_texture_layout_and_first_texel():
    data = make_noise_texture(32)
    assert len(data) == 32 * 32 * 32 * 4
    # The first texel samples the origin, where every octave's noise is zero.
    assert tuple(data[:4]) == (64, 32, 16, 8)


def test_texture_is_deterministic_and_varied():
    first = make_noise_texture(32)
    assert make_noise_texture(32) == first
    assert len(set(first[0::4])) > 1