"""Fractal (multi-octave) simplex noise."""

from __future__ import annotations

import numpy as np

from .base import Noise
from .levels import SimdLevel, resolve_level
from .simplex import simplex2d, simplex3d


class SimplexFractal(Noise):
    """Sum of simplex octaves with geometric amplitude and frequency steps.

    Each octave multiplies the amplitude by ``persistence`` and the
    frequency by ``lacunarity``; the first octave has both set to one.
    """

    def __init__(
        self,
        seed: int,
        default_scale: float,
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> None:
        super().__init__(seed, default_scale)
        if int(octaves) != octaves or octaves < 0:
            raise ValueError(f"octaves must be a non-negative integer, got {octaves!r}")
        self.octaves = int(octaves)
        self.persistence = float(persistence)
        self.lacunarity = float(lacunarity)
        self.level = SimdLevel.NONE

    def _octaves(self):
        """Yield ``(frequency, amplitude)`` pairs for every octave."""
        frequency = np.float32(1.0)
        amplitude = np.float32(1.0)
        persistence = np.float32(self.persistence)
        lacunarity = np.float32(self.lacunarity)
        for _ in range(self.octaves):
            yield frequency, amplitude
            amplitude = np.float32(amplitude * persistence)
            frequency = np.float32(frequency * lacunarity)

    def get2d_many(self, xs, ys, scale=None) -> np.ndarray:
        """Sample many 2-D points, summing every octave."""
        xs, ys, sc = self._coerce(scale, xs, ys)
        result = np.zeros(xs.shape, dtype=np.float32)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            sx = xs / sc
            sy = ys / sc
            for frequency, amplitude in self._octaves():
                layer = simplex2d(self.seed, sx * frequency, sy * frequency)
                result = (result + layer * amplitude).astype(np.float32)
        return result

    def get3d_many(self, xs, ys, zs, scale=None) -> np.ndarray:
        """Sample many 3-D points, summing every octave."""
        xs, ys, zs, sc = self._coerce(scale, xs, ys, zs)
        result = np.zeros(xs.shape, dtype=np.float32)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            sx = xs / sc
            sy = ys / sc
            sz = zs / sc
            for frequency, amplitude in self._octaves():
                layer = simplex3d(
                    self.seed, sx * frequency, sy * frequency, sz * frequency
                )
                result = (result + layer * amplitude).astype(np.float32)
        return result


def create_simplex_fractal(
    seed: int,
    default_scale: float,
    octaves: int,
    persistence: float,
    lacunarity: float,
    level: "SimdLevel | str | None" = SimdLevel.AUTO,
) -> SimplexFractal:
    """Build a fractal simplex generator for the requested instruction-set level."""
    resolved = resolve_level(level)
    generator = SimplexFractal(seed, default_scale, octaves, persistence, lacunarity)
    generator.level = resolved
    return generator