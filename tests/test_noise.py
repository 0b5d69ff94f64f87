import pytest

from isoterra import noise


def test_rawnoise_zero_uses_source_constants():
    assert noise.rawnoise(0) == pytest.approx(1.0 - 1376312589 / 1073741824.0)


@pytest.mark.parametrize("n", [-100000, -7, 0, 1, 2, 42, 123456, 2**31 - 1])
def test_rawnoise_range(n):
    value = noise.rawnoise(n)
    assert -1.0 < value <= 1.0


def test_rawnoise_deterministic_and_varies():
    values = [noise.rawnoise(n) for n in range(50)]
    assert values == [noise.rawnoise(n) for n in range(50)]
    assert len(set(values)) > 40


def test_noise1d_matches_noise2d_on_axis():
    for x in range(-5, 6):
        assert noise.noise1d(x, 2, 7) == noise.noise2d(x, 0, 2, 7)


def test_noise3d_at_origin_matches_rawnoise_hash():
    assert noise.noise3d(0, 0, 0, 0, 0) == noise.rawnoise(0)
    assert noise.noise1d(0, 0, 0) == noise.rawnoise(0)


def test_interpolate_endpoints():
    assert noise.interpolate(3.0, 9.0, 0.0) == 3.0
    assert noise.interpolate(3.0, 9.0, 1.0) == pytest.approx(9.0, abs=1e-9)


def test_interpolate_midpoint_is_average():
    assert noise.interpolate(2.0, 6.0, 0.5) == pytest.approx(4.0, abs=1e-6)


@pytest.mark.parametrize("x", [0, 1, 5, 17])
def test_smooth1d_at_integers_equals_lattice(x):
    assert noise.smooth1d(float(x), 1, 3) == pytest.approx(noise.noise1d(x, 1, 3))


def test_smooth2d_at_integers_equals_lattice():
    assert noise.smooth2d(4.0, 9.0, 0, 11) == pytest.approx(noise.noise2d(4, 9, 0, 11))


def test_smooth3d_at_integers_equals_lattice():
    assert noise.smooth3d(2.0, 3.0, 4.0, 0, 5) == pytest.approx(noise.noise3d(2, 3, 4, 0, 5))


def test_smooth_is_between_neighbours():
    low = noise.noise1d(3, 0, 1)
    high = noise.noise1d(4, 0, 1)
    value = noise.smooth1d(3.3, 0, 1)
    assert min(low, high) - 1e-12 <= value <= max(low, high) + 1e-12


def test_single_octave_equals_smooth():
    assert noise.pnoise1d(2.5, 0.5, 1, 9) == noise.smooth1d(2.5, 0, 9)
    assert noise.pnoise2d(2.5, 1.25, 0.5, 1, 9) == noise.smooth2d(2.5, 1.25, 0, 9)
    assert noise.pnoise3d(2.5, 1.25, 0.0, 0.5, 1, 9) == noise.smooth3d(2.5, 1.25, 0.0, 0, 9)


def test_zero_octaves_is_zero():
    assert noise.pnoise1d(1.5, 0.5, 0, 1) == 0.0
    assert noise.pnoise3d(1.5, 2.5, 3.5, 0.5, 0, 1) == 0.0


def test_second_octave_adds_scaled_layer():
    total = noise.pnoise1d(6.0, 0.25, 2, 4)
    expected = noise.smooth1d(6.0, 0, 4) + noise.smooth1d(3.0, 1, 4) * 0.25
    assert total == pytest.approx(expected)


def test_seed_changes_result():
    a = [noise.pnoise3d(x * 0.04, 0.3, 0, 0.02, 1, 1) for x in range(20)]
    b = [noise.pnoise3d(x * 0.04, 0.3, 0, 0.02, 1, 2) for x in range(20)]
    assert a != b