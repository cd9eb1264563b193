"""Seeded simplex noise in two and three dimensions."""

from __future__ import annotations

import numpy as np

from .base import Noise, partial_jenkins_hash
from .levels import SimdLevel, resolve_level

# Skewing and unskewing factors.
_F2 = np.float32(0.366025403)
_G2 = np.float32(0.211324865)
_F3 = np.float32(0.333333333)
_G3 = np.float32(0.166666667)

_ZERO = np.float32(0.0)
_ONE = np.float32(1.0)
_TWO = np.float32(2.0)
_THREE = np.float32(3.0)


def _to_int(values: np.ndarray) -> np.ndarray:
    """Truncate floats to integers, as a float-to-int conversion does."""
    with np.errstate(invalid="ignore"):
        return np.trunc(values).astype(np.int64)


def _grad2(hash_values: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    h = hash_values.astype(np.int64) & 7
    low = h < 4
    u = np.where(low, x, y)
    v = np.where(low, y, x)
    h1 = np.where((h & 1) == 1, np.float32(-1.0), np.float32(1.0))
    h2 = np.where((h & 2) == 2, np.float32(-2.0), np.float32(2.0))
    return (u * h1 + v * h2).astype(np.float32)


def _grad3(
    hash_values: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray
) -> np.ndarray:
    h = hash_values.astype(np.int64) & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    h1 = np.where((h & 1) == 1, np.float32(-1.0), np.float32(1.0))
    h2 = np.where((h & 2) == 2, np.float32(-1.0), np.float32(1.0))
    return (u * h1 + v * h2).astype(np.float32)


def _falloff(t: np.ndarray) -> np.ndarray:
    t = t * t
    return t * t


def _contribution(t: np.ndarray, grad: np.ndarray) -> np.ndarray:
    return np.where(t >= _ZERO, _falloff(t) * grad, _ZERO).astype(np.float32)


def simplex2d(seed: int, x, y) -> np.ndarray:
    """Evaluate 2-D simplex noise at already-scaled coordinates."""
    x, y = np.broadcast_arrays(
        np.asarray(x, dtype=np.float32), np.asarray(y, dtype=np.float32)
    )
    with np.errstate(over="ignore", invalid="ignore"):
        s = (x + y) * _F2
        i = np.floor(x + s)
        j = np.floor(y + s)

        t = (i + j) * _G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        i1 = (x0 > y0).astype(np.float32)
        j1 = (x0 <= y0).astype(np.float32)

        x1 = (x0 - i1) + _G2
        y1 = (y0 - j1) + _G2
        x2 = (x0 - _ONE) + _TWO * _G2
        y2 = (y0 - _ONE) + _TWO * _G2

        half = np.float32(0.5)
        t0 = half - x0 * x0 - y0 * y0
        t1 = half - x1 * x1 - y1 * y1
        t2 = half - x2 * x2 - y2 * y2

        ii = _to_int(i)
        jj = _to_int(j)
        ii1 = ii + i1.astype(np.int64)
        jj1 = jj + j1.astype(np.int64)
        ii2 = ii + 1
        jj2 = jj + 1

        h0 = partial_jenkins_hash(seed, ii + partial_jenkins_hash(seed, jj))
        h1 = partial_jenkins_hash(seed, ii1 + partial_jenkins_hash(seed, jj1))
        h2 = partial_jenkins_hash(seed, ii2 + partial_jenkins_hash(seed, jj2))

        n0 = _contribution(t0, _grad2(h0, x0, y0))
        n1 = _contribution(t1, _grad2(h1, x1, y1))
        n2 = _contribution(t2, _grad2(h2, x2, y2))

        return (np.float32(40.0) * ((n0 + n1) + n2)).astype(np.float32)


def simplex3d(seed: int, x, y, z) -> np.ndarray:
    """Evaluate 3-D simplex noise at already-scaled coordinates."""
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float32),
        np.asarray(y, dtype=np.float32),
        np.asarray(z, dtype=np.float32),
    )
    with np.errstate(over="ignore", invalid="ignore"):
        s = ((x + y) + z) * _F3
        i = np.floor(x + s)
        j = np.floor(y + s)
        k = np.floor(z + s)

        t = ((i + j) + k) * _G3
        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)

        x_ge_y = x0 >= y0
        y_ge_z = y0 >= z0
        x_ge_z = x0 >= z0

        i1 = x_ge_y & (y_ge_z | x_ge_z)
        j1 = ~x_ge_y & y_ge_z
        k1 = ~(x_ge_y | y_ge_z) | ~(y_ge_z | x_ge_z)
        i2 = x_ge_y | (y_ge_z & x_ge_z)
        j2 = (x_ge_y & y_ge_z) | ~x_ge_y
        k2 = ~(x_ge_y | x_ge_z) | ~y_ge_z

        g3_2 = _TWO * _G3
        g3_3 = _THREE * _G3
        x1 = (x0 - i1.astype(np.float32)) + _G3
        y1 = (y0 - j1.astype(np.float32)) + _G3
        z1 = (z0 - k1.astype(np.float32)) + _G3
        x2 = (x0 - i2.astype(np.float32)) + g3_2
        y2 = (y0 - j2.astype(np.float32)) + g3_2
        z2 = (z0 - k2.astype(np.float32)) + g3_2
        x3 = (x0 - _ONE) + g3_3
        y3 = (y0 - _ONE) + g3_3
        z3 = (z0 - _ONE) + g3_3

        radius = np.float32(0.6)
        t0 = radius - x0 * x0 - y0 * y0 - z0 * z0
        t1 = radius - x1 * x1 - y1 * y1 - z1 * z1
        t2 = radius - x2 * x2 - y2 * y2 - z2 * z2
        t3 = radius - x3 * x3 - y3 * y3 - z3 * z3

        ii = _to_int(i)
        jj = _to_int(j)
        kk = _to_int(k)

        corners = (
            (ii, jj, kk),
            (ii + i1, jj + j1, kk + k1),
            (ii + i2, jj + j2, kk + k2),
            (ii + 1, jj + 1, kk + 1),
        )
        hashes = []
        for ci, cj, ck in corners:
            hk = partial_jenkins_hash(seed, ck)
            hj = partial_jenkins_hash(seed, cj + hk)
            hashes.append(partial_jenkins_hash(seed, ci + hj))

        n0 = _contribution(t0, _grad3(hashes[0], x0, y0, z0))
        n1 = _contribution(t1, _grad3(hashes[1], x1, y1, z1))
        n2 = _contribution(t2, _grad3(hashes[2], x2, y2, z2))
        n3 = _contribution(t3, _grad3(hashes[3], x3, y3, z3))

        return (np.float32(32.0) * (((n0 + n1) + n2) + n3)).astype(np.float32)


class Simplex(Noise):
    """Simplex noise generator with a fixed seed and default scale."""

    def __init__(self, seed: int, default_scale: float) -> None:
        super().__init__(seed, default_scale)
        self.level = SimdLevel.NONE

    def get2d_many(self, xs, ys, scale=None) -> np.ndarray:
        """Sample many 2-D points, dividing the coordinates by the scale."""
        xs, ys, sc = self._coerce(scale, xs, ys)
        with np.errstate(divide="ignore", invalid="ignore"):
            return simplex2d(self.seed, xs / sc, ys / sc)

    def get3d_many(self, xs, ys, zs, scale=None) -> np.ndarray:
        """Sample many 3-D points, dividing the coordinates by the scale."""
        xs, ys, zs, sc = self._coerce(scale, xs, ys, zs)
        with np.errstate(divide="ignore", invalid="ignore"):
            return simplex3d(self.seed, xs / sc, ys / sc, zs / sc)


def create_simplex(
    seed: int, default_scale: float, level: "SimdLevel | str | None" = SimdLevel.AUTO
) -> Simplex:
    """Build a simplex generator for the requested instruction-set level."""
    resolved = resolve_level(level)
    generator = Simplex(seed, default_scale)
    generator.level = resolved
    return generator