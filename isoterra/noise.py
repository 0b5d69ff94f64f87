"""Value-noise functions with cosine interpolation and octave summation."""

from __future__ import annotations

import math

_PI_APPROX = 3.141593


def rawnoise(n: int) -> float:
    """Hash an integer into a pseudo-random value in the range (-1.0, 1.0]."""
    n = (n << 13) ^ n
    # Only the low 31 bits survive the mask, so 32-bit wrap-around is implied.
    hashed = (n * (n * n * 15731 + 789221) + 1376312589) & 0x7FFFFFFF
    return 1.0 - hashed / 1073741824.0


def noise1d(x: int, octave: int, seed: int) -> float:
    """Lattice noise for one integer coordinate."""
    return rawnoise(x * 1619 + octave * 3463 + seed * 13397)


def noise2d(x: int, y: int, octave: int, seed: int) -> float:
    """Lattice noise for an integer point in the plane."""
    return rawnoise(x * 1619 + y * 31337 + octave * 3463 + seed * 13397)


def noise3d(x: int, y: int, z: int, octave: int, seed: int) -> float:
    """Lattice noise for an integer point in space."""
    return rawnoise(x * 1919 + y * 31337 + z * 7669 + octave * 3463 + seed * 13397)


def interpolate(a: float, b: float, x: float) -> float:
    """Cosine interpolation between ``a`` and ``b`` at fraction ``x``."""
    f = (1 - math.cos(x * _PI_APPROX)) * 0.5
    return a * (1 - f) + b * f


def _split(value: float) -> tuple[int, float]:
    whole = int(value)
    return whole, value - whole


def smooth1d(x: float, octave: int, seed: int) -> float:
    """Smoothly interpolated noise along a line."""
    ix, fx = _split(x)
    v1 = noise1d(ix, octave, seed)
    v2 = noise1d(ix + 1, octave, seed)
    return interpolate(v1, v2, fx)


def smooth2d(x: float, y: float, octave: int, seed: int) -> float:
    """Smoothly interpolated noise over a plane."""
    ix, fx = _split(x)
    iy, fy = _split(y)
    v1 = noise2d(ix, iy, octave, seed)
    v2 = noise2d(ix + 1, iy, octave, seed)
    v3 = noise2d(ix, iy + 1, octave, seed)
    v4 = noise2d(ix + 1, iy + 1, octave, seed)
    i1 = interpolate(v1, v2, fx)
    i2 = interpolate(v3, v4, fx)
    return interpolate(i1, i2, fy)


def smooth3d(x: float, y: float, z: float, octave: int, seed: int) -> float:
    """Smoothly interpolated noise in space."""
    ix, fx = _split(x)
    iy, fy = _split(y)
    iz, fz = _split(z)
    v1 = noise3d(ix, iy, iz, octave, seed)
    v2 = noise3d(ix + 1, iy, iz, octave, seed)
    v3 = noise3d(ix, iy + 1, iz, octave, seed)
    v4 = noise3d(ix + 1, iy + 1, iz, octave, seed)
    v5 = noise3d(ix, iy, iz + 1, octave, seed)
    v6 = noise3d(ix + 1, iy, iz + 1, octave, seed)
    v7 = noise3d(ix, iy + 1, iz + 1, octave, seed)
    v8 = noise3d(ix + 1, iy + 1, iz + 1, octave, seed)
    i1 = interpolate(v1, v2, fx)
    i2 = interpolate(v3, v4, fx)
    i3 = interpolate(v5, v6, fx)
    i4 = interpolate(v7, v8, fx)
    j1 = interpolate(i1, i2, fy)
    j2 = interpolate(i3, i4, fy)
    return interpolate(j1, j2, fz)


def _octaves(persistence: float, octaves: int):
    frequency = 1.0
    amplitude = 1.0
    for octave in range(octaves):
        yield octave, frequency, amplitude
        frequency /= 2
        amplitude *= persistence


def pnoise1d(x: float, persistence: float, octaves: int, seed: int) -> float:
    """Sum of ``octaves`` layers of one-dimensional smooth noise."""
    return sum(
        (smooth1d(x * freq, octave, seed) * amp for octave, freq, amp in _octaves(persistence, octaves)),
        0.0,
    )


def pnoise2d(x: float, y: float, persistence: float, octaves: int, seed: int) -> float:
    """Sum of ``octaves`` layers of two-dimensional smooth noise."""
    return sum(
        (
            smooth2d(x * freq, y * freq, octave, seed) * amp
            for octave, freq, amp in _octaves(persistence, octaves)
        ),
        0.0,
    )


def pnoise3d(x: float, y: float, z: float, persistence: float, octaves: int, seed: int) -> float:
    """Sum of ``octaves`` layers of three-dimensional smooth noise."""
    return sum(
        (
            smooth3d(x * freq, y * freq, z * freq, octave, seed) * amp
            for octave, freq, amp in _octaves(persistence, octaves)
        ),
        0.0,
    )