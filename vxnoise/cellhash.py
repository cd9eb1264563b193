"""Feature-point placement for cellular noise.

Every integer lattice cell holds one feature point. Its position is the
cell's corner plus a hashed fractional offset in ``[0, 1)`` on each axis.
"""

from __future__ import annotations

import numpy as np

from .base import partial_jenkins_hash

_DIVISOR = np.float32(1000000.0)

# Dot-product weights, one row per output axis.
_WEIGHTS_2D = (
    (np.float32(127.1), np.float32(311.7)),
    (np.float32(269.5), np.float32(183.3)),
)
_WEIGHTS_3D = (
    (np.float32(127.1), np.float32(311.7), np.float32(231.4)),
    (np.float32(269.5), np.float32(183.3), np.float32(352.6)),
    (np.float32(419.2), np.float32(371.9), np.float32(523.7)),
)


def _offset(seed: int, cells: tuple[np.ndarray, ...], weights) -> np.ndarray:
    """Hashed fractional offset for one axis of each cell."""
    with np.errstate(over="ignore", invalid="ignore"):
        dot = np.zeros(cells[0].shape, dtype=np.float32)
        for cell, weight in zip(cells, weights):
            dot = (dot + cell * weight).astype(np.float32)
        hashed = partial_jenkins_hash(seed, dot)
        point = (hashed.astype(np.float32) / _DIVISOR).astype(np.float32)
        return (point - np.floor(point)).astype(np.float32)


def _cells(*coords) -> tuple[np.ndarray, ...]:
    arrays = np.broadcast_arrays(*(np.asarray(c, dtype=np.float32) for c in coords))
    return tuple(np.asarray(a, dtype=np.float32) for a in arrays)


def hash_cell2d(seed: int, cell_x, cell_y) -> tuple[np.ndarray, np.ndarray]:
    """Feature point of each 2-D cell as ``(x, y)`` ``float32`` arrays."""
    cells = _cells(cell_x, cell_y)
    return tuple(
        (cell + _offset(seed, cells, weights)).astype(np.float32)
        for cell, weights in zip(cells, _WEIGHTS_2D)
    )


def hash_cell3d(
    seed: int, cell_x, cell_y, cell_z
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Feature point of each 3-D cell as ``(x, y, z)`` ``float32`` arrays."""
    cells = _cells(cell_x, cell_y, cell_z)
    return tuple(
        (cell + _offset(seed, cells, weights)).astype(np.float32)
        for cell, weights in zip(cells, _WEIGHTS_3D)
    )