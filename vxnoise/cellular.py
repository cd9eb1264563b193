"""Cellular noise: nearest-feature-point lookup into another noise."""

from __future__ import annotations

from itertools import product

import numpy as np

from .base import Noise
from .cellhash import hash_cell2d, hash_cell3d
from .levels import SimdLevel, resolve_level

_CELL_SIZE = np.float32(16.0)
_FLOAT_MAX = np.float32(np.finfo(np.float32).max)
_NEIGHBOURHOOD = (-1, 0, 1)


class Cellular(Noise):
    """Cellular noise built on top of a lookup noise.

    The input is divided by the scale and by a cell size of 16. Among the
    feature points of the surrounding 3x3 (or 3x3x3) cells, the one with the
    smallest sum of Euclidean and Manhattan distance is chosen, and the lookup
    noise is sampled at that feature point with the lookup's own default scale.
    """

    def __init__(self, seed: int, default_scale: float, lookup: Noise) -> None:
        super().__init__(seed, default_scale)
        if not isinstance(lookup, Noise):
            raise TypeError(f"lookup must be a Noise instance, got {lookup!r}")
        self.lookup = lookup
        self.level = SimdLevel.NONE

    def _nearest(self, coords, scale, hasher) -> tuple[np.ndarray, ...]:
        shape = coords[0].shape
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            features = [((c / scale) / _CELL_SIZE).astype(np.float32) for c in coords]
            bases = [np.floor(f) for f in features]

            lowest = np.full(shape, _FLOAT_MAX, dtype=np.float32)
            result = [np.zeros(shape, dtype=np.float32) for _ in coords]

            for offsets in product(_NEIGHBOURHOOD, repeat=len(coords)):
                cells = [
                    (b + np.float32(o)).astype(np.float32)
                    for b, o in zip(bases, offsets)
                ]
                points = hasher(self.seed, *cells)
                deltas = [(p - f).astype(np.float32) for p, f in zip(points, features)]

                squared = np.zeros(shape, dtype=np.float32)
                manhattan = np.zeros(shape, dtype=np.float32)
                for delta in reversed(deltas):
                    squared = (squared + delta * delta).astype(np.float32)
                    manhattan = (manhattan + np.abs(delta)).astype(np.float32)
                distance = (np.sqrt(squared) + manhattan).astype(np.float32)

                closer = distance < lowest
                lowest = np.where(closer, distance, lowest)
                result = [np.where(closer, p, r) for p, r in zip(points, result)]

        return tuple(np.asarray(r, dtype=np.float32) for r in result)

    def nearest_cells2d(self, xs, ys, scale=None) -> tuple[np.ndarray, np.ndarray]:
        """Feature point nearest to each 2-D sample, as ``(x, y)`` arrays."""
        xs, ys, sc = self._coerce(scale, xs, ys)
        return self._nearest((xs, ys), sc, hash_cell2d)

    def nearest_cells3d(
        self, xs, ys, zs, scale=None
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Feature point nearest to each 3-D sample, as ``(x, y, z)`` arrays."""
        xs, ys, zs, sc = self._coerce(scale, xs, ys, zs)
        return self._nearest((xs, ys, zs), sc, hash_cell3d)

    def get2d_many(self, xs, ys, scale=None) -> np.ndarray:
        """Sample the lookup noise at the nearest 2-D feature points."""
        cx, cy = self.nearest_cells2d(xs, ys, scale)
        values = self.lookup.get2d_many(cx, cy)
        return np.asarray(values, dtype=np.float32).reshape(cx.shape)

    def get3d_many(self, xs, ys, zs, scale=None) -> np.ndarray:
        """Sample the lookup noise at the nearest 3-D feature points."""
        cx, cy, cz = self.nearest_cells3d(xs, ys, zs, scale)
        values = self.lookup.get3d_many(cx, cy, cz)
        return np.asarray(values, dtype=np.float32).reshape(cx.shape)


def create_cellular(
    seed: int,
    default_scale: float,
    lookup: Noise,
    level: "SimdLevel | str | None" = SimdLevel.AUTO,
) -> Cellular:
    """Build a cellular generator for the requested instruction-set level."""
    resolved = resolve_level(level)
    generator = Cellular(seed, default_scale, lookup)
    generator.level = resolved
    return generator