# vxnoise

Seeded, deterministic procedural noise for Python, computed with NumPy in 32-bit floating point:

- **Simplex** noise in 2D and 3D (`vxnoise.simplex`)
- **SimplexFractal**: several octaves of simplex noise summed together (`vxnoise.fractal`)
- **Cellular** noise: each point takes the value of another noise generator, sampled at the feature point of the nearest cell (`vxnoise.cellular`)

Every generator samples single points and whole NumPy arrays, and it can fill a regular 2-D or 3-D grid in one call.

## Installation

```
pip install vxnoise
```

## Quick start

```python
import numpy as np

from vxnoise.simplex import create_simplex
from vxnoise.fractal import create_simplex_fractal
from vxnoise.cellular import create_cellular
from vxnoise.levels import SimdLevel

simplex = create_simplex(seed=1337, default_scale=1.0, level=SimdLevel.AUTO)

# One sample
value = simplex.get2d(10.5, 3.25, 32.0)

# Many samples at once (returns a float32 array)
xs = np.linspace(0, 100, 256, dtype=np.float32)
ys = np.zeros_like(xs)
row = simplex.get2d_many(xs, ys, 32.0)

# A 64 x 64 grid starting at (0, 0), one unit per step
grid = simplex.noise2d(0.0, 0.0, 64, 64, 1.0, 32.0)
```

## The common interface

Every generator is a `vxnoise.base.Noise` and has:

- `get2d(x, y, scale=None)` and `get3d(x, y, z, scale=None)`: one sample, returned as a `float`
- `get2d_many(xs, ys, scale=None)` and `get3d_many(xs, ys, zs, scale=None)`: the coordinates are broadcast together and a `float32` array of that shape is returned
- `noise2d(offset_x, offset_y, size_x, size_y, step=1.0, scale=None)`: an array of shape `(size_x, size_y)`; element `[i, j]` is the sample at `(offset_x + i * step, offset_y + j * step)`
- `noise3d(offset_x, offset_y, offset_z, size_x, size_y, size_z, step=1.0, scale=None)`: the same in three dimensions

Coordinates are divided by `scale`. When `scale` is `None`, the generator's `default_scale` is used. Grid sizes must be non-negative integers; anything else raises `ValueError`.

### Fractal simplex noise

```python
fractal = create_simplex_fractal(
    seed=42, default_scale=1.0, octaves=4, persistence=0.5, lacunarity=2.0,
    level=SimdLevel.AUTO,
)
volume = fractal.noise3d(0.0, 0.0, 0.0, 16, 16, 16, 1.0, 8.0)
```

The first octave has frequency and amplitude 1. Each later octave multiplies the frequency by `lacunarity` and the amplitude by `persistence`. The octaves are summed without normalisation. `octaves` must be a non-negative integer; zero octaves gives all zeros.

### Cellular noise

A cellular generator needs another generator to look values up in:

```python
lookup = create_simplex(seed=7, default_scale=1.0, level=SimdLevel.AUTO)
cells = create_cellular(seed=7, default_scale=1.0, lookup=lookup, level=SimdLevel.AUTO)

heights = cells.noise2d(0.0, 0.0, 128, 128, 1.0, 1.0)

# The chosen feature points themselves
cx, cy = cells.nearest_cells2d(xs, ys, 1.0)
```

The input is divided by the scale and then by a cell size of 16. Each integer cell holds one feature point, placed by `vxnoise.cellhash.hash_cell2d` or `hash_cell3d`. The generator looks at the surrounding 3×3 (or 3×3×3) cells and picks the feature point with the smallest sum of Euclidean and Manhattan distance. It then samples the lookup generator at that point, using the lookup's own default scale. If `lookup` is not a `Noise`, a `TypeError` is raised.

## Levels

The factory functions take a `level` argument: a `vxnoise.levels.SimdLevel`, its name or value as a string (`"avx2"`, `"SSE42"`, ...), or `None`.

- `AUTO` (the default) and `None` resolve to `AVX2`.
- `NONE`, `SSE2`, `SSE42` and `AVX2` are all accepted and all compute the same values with the same NumPy code. The resolved level is stored on the generator's `level` attribute.
- `NEON` raises `UnsupportedLevelError`, a `RuntimeError`.
- An unknown name raises `ValueError`.

`vxnoise.levels.resolve_level(level)` returns the level that a request resolves to.

## Lower-level helpers

- `vxnoise.base.partial_jenkins_hash(seed, values)`: the 32-bit integer hash behind every generator. Floating inputs are truncated toward zero, and it returns an `int32` array.
- `vxnoise.base.grid_coordinates2d` and `grid_coordinates3d`: flat `float32` grid indices, in the order used by `noise2d` and `noise3d` (last axis varying fastest).
- `vxnoise.simplex.simplex2d(seed, x, y)` and `simplex3d(seed, x, y, z)`: the simplex kernels, evaluated at coordinates that are already scaled.
- `vxnoise.cellhash.hash_cell2d` and `hash_cell3d`: feature-point positions for integer cells.

## What it does not do

This is a library only. It has no command-line tool, and it does not write images or files. Turn the returned arrays into pictures or terrain with whatever tools you use.

## Running the tests

```
pip install -e ".[test]"
pytest
```