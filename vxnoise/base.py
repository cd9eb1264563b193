"""Common interface of the noise generators and shared helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

_MASK32 = 0xFFFFFFFF


def partial_jenkins_hash(seed: int, values) -> np.ndarray:
    """Mix each 32-bit integer in ``values`` with ``seed``.

    Floating inputs are truncated toward zero first. The result is an
    ``int32`` array of the same shape, wrapping as 32-bit arithmetic does.
    """
    raw = np.asarray(values)
    if np.issubdtype(raw.dtype, np.floating):
        raw = np.trunc(raw)
    h = (raw.astype(np.int64) + int(seed)) & _MASK32
    h = h.astype(np.uint64)
    h = (h + (h << np.uint64(10))) & np.uint64(_MASK32)
    h ^= h >> np.uint64(6)
    h = (h + (h << np.uint64(3))) & np.uint64(_MASK32)
    h ^= h >> np.uint64(11)
    h = (h + (h << np.uint64(15))) & np.uint64(_MASK32)
    return np.ascontiguousarray(h.astype(np.uint32)).view(np.int32)


def grid_coordinates2d(size_x: int, size_y: int) -> tuple[np.ndarray, np.ndarray]:
    """Flat ``float32`` grid indices in storage order, y varying fastest."""
    _check_sizes(size_x, size_y)
    xs, ys = np.indices((size_x, size_y), dtype=np.float32)
    return xs.ravel(), ys.ravel()


def grid_coordinates3d(
    size_x: int, size_y: int, size_z: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Flat ``float32`` grid indices in storage order, z varying fastest."""
    _check_sizes(size_x, size_y, size_z)
    xs, ys, zs = np.indices((size_x, size_y, size_z), dtype=np.float32)
    return xs.ravel(), ys.ravel(), zs.ravel()


def _check_sizes(*sizes: int) -> None:
    for size in sizes:
        if int(size) != size or size < 0:
            raise ValueError(f"grid size must be a non-negative integer, got {size!r}")


class Noise(ABC):
    """A seeded noise function sampled in two or three dimensions."""

    def __init__(self, seed: int, default_scale: float) -> None:
        self.seed = int(seed)
        self.default_scale = float(default_scale)

    def _scale(self, scale) -> np.float32:
        return np.float32(self.default_scale if scale is None else scale)

    def _coerce(self, scale, *coords) -> tuple:
        """Broadcast coordinates to ``float32`` arrays and resolve the scale."""
        arrays = np.broadcast_arrays(*(np.asarray(c, dtype=np.float32) for c in coords))
        return (*arrays, self._scale(scale))

    @abstractmethod
    def get2d_many(self, xs, ys, scale=None) -> np.ndarray:
        """Sample many 2-D points at once; returns a ``float32`` array."""

    @abstractmethod
    def get3d_many(self, xs, ys, zs, scale=None) -> np.ndarray:
        """Sample many 3-D points at once; returns a ``float32`` array."""

    def get2d(self, x: float, y: float, scale=None) -> float:
        """Sample one 2-D point."""
        return float(np.asarray(self.get2d_many([x], [y], scale)).ravel()[0])

    def get3d(self, x: float, y: float, z: float, scale=None) -> float:
        """Sample one 3-D point."""
        return float(np.asarray(self.get3d_many([x], [y], [z], scale)).ravel()[0])

    def noise2d(
        self, offset_x, offset_y, size_x, size_y, step=1.0, scale=None
    ) -> np.ndarray:
        """Sample a ``size_x`` by ``size_y`` grid starting at the offsets."""
        xs, ys = grid_coordinates2d(size_x, size_y)
        step32 = np.float32(step)
        values = self.get2d_many(
            np.float32(offset_x) + xs * step32,
            np.float32(offset_y) + ys * step32,
            scale,
        )
        return np.asarray(values, dtype=np.float32).reshape(size_x, size_y)

    def noise3d(
        self,
        offset_x,
        offset_y,
        offset_z,
        size_x,
        size_y,
        size_z,
        step=1.0,
        scale=None,
    ) -> np.ndarray:
        """Sample a ``size_x`` by ``size_y`` by ``size_z`` grid."""
        xs, ys, zs = grid_coordinates3d(size_x, size_y, size_z)
        step32 = np.float32(step)
        values = self.get3d_many(
            np.float32(offset_x) + xs * step32,
            np.float32(offset_y) + ys * step32,
            np.float32(offset_z) + zs * step32,
            scale,
        )
        return np.asarray(values, dtype=np.float32).reshape(size_x, size_y, size_z)