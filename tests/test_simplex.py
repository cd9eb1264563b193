import numpy as np
import pytest

from vxnoise.levels import SimdLevel, UnsupportedLevelError
from vxnoise.simplex import Simplex, create_simplex, simplex2d, simplex3d


def _sample_points(n, dims, seed=1234):
    rng = np.random.default_rng(seed)
    return [rng.uniform(-200.0, 200.0, n).astype(np.float32) for _ in range(dims)]


def test_simplex2d_is_zero_at_origin():
    assert float(simplex2d(7, 0.0, 0.0)) == 0.0


def test_simplex3d_is_zero_at_origin():
    assert float(simplex3d(7, 0.0, 0.0, 0.0)) == 0.0


def test_simplex2d_deterministic_and_float32():
    xs, ys = _sample_points(500, 2)
    a = simplex2d(42, xs, ys)
    b = simplex2d(42, xs, ys)
    assert a.dtype == np.float32
    assert a.shape == xs.shape
    np.testing.assert_array_equal(a, b)


def test_simplex3d_deterministic_and_float32():
    xs, ys, zs = _sample_points(500, 3)
    a = simplex3d(42, xs, ys, zs)
    b = simplex3d(42, xs, ys, zs)
    assert a.dtype == np.float32
    np.testing.assert_array_equal(a, b)


def test_seed_changes_output():
    xs, ys = _sample_points(300, 2)
    assert not np.array_equal(simplex2d(1, xs, ys), simplex2d(2, xs, ys))
    xs, ys, zs = _sample_points(300, 3)
    assert not np.array_equal(simplex3d(1, xs, ys, zs), simplex3d(2, xs, ys, zs))


def test_values_finite_and_bounded():
    xs, ys, zs = _sample_points(2000, 3)
    v2 = simplex2d(9, xs, ys)
    v3 = simplex3d(9, xs, ys, zs)
    assert int(np.count_nonzero(~np.isfinite(v2))) == 0
    assert int(np.count_nonzero(~np.isfinite(v3))) == 0
    assert float(np.max(np.abs(v2))) < 5.0
    assert float(np.max(np.abs(v3))) < 10.0
    assert float(np.max(np.abs(v2))) > 0.0
    assert float(np.max(np.abs(v3))) > 0.0


def test_noise_is_continuous():
    xs, ys, zs = _sample_points(200, 3)
    eps = np.float32(1e-3)
    d2 = np.abs(simplex2d(3, xs + eps, ys) - simplex2d(3, xs, ys))
    d3 = np.abs(simplex3d(3, xs, ys, zs + eps) - simplex3d(3, xs, ys, zs))
    assert np.max(d2) < 0.05
    assert np.max(d3) < 0.05


def test_elementwise_matches_vectorised():
    xs, ys = _sample_points(20, 2)
    batch = simplex2d(5, xs, ys)
    singles = [float(simplex2d(5, x, y)) for x, y in zip(xs, ys)]
    np.testing.assert_array_equal(batch, np.array(singles, dtype=np.float32))


def test_broadcasting():
    xs = np.array([1.5, 2.5, 3.5], dtype=np.float32)
    out = simplex2d(5, xs, 0.25)
    expected = simplex2d(5, xs, np.full(3, 0.25, dtype=np.float32))
    np.testing.assert_array_equal(out, expected)


def test_simplex_get2d_divides_by_scale():
    gen = Simplex(11, 8.0)
    assert gen.get2d(10.0, 20.0, 4.0) == pytest.approx(float(simplex2d(11, 2.5, 5.0)))


def test_simplex_get3d_divides_by_scale():
    gen = Simplex(11, 8.0)
    expected = float(simplex3d(11, 2.5, 5.0, 1.25))
    assert gen.get3d(10.0, 20.0, 5.0, 4.0) == pytest.approx(expected)


def test_default_scale_used_when_scale_missing():
    gen = Simplex(11, 8.0)
    assert gen.get2d(10.0, 20.0) == gen.get2d(10.0, 20.0, 8.0)
    assert gen.get3d(10.0, 20.0, 30.0) == gen.get3d(10.0, 20.0, 30.0, 8.0)


def test_get_many_matches_module_functions():
    gen = Simplex(3, 2.0)
    xs, ys, zs = _sample_points(100, 3)
    np.testing.assert_array_equal(
        gen.get2d_many(xs, ys), simplex2d(3, xs / np.float32(2.0), ys / np.float32(2.0))
    )
    np.testing.assert_array_equal(
        gen.get3d_many(xs, ys, zs),
        simplex3d(3, xs / np.float32(2.0), ys / np.float32(2.0), zs / np.float32(2.0)),
    )


def test_noise2d_grid_matches_points():
    gen = Simplex(21, 16.0)
    grid = gen.noise2d(3.0, -2.0, 5, 7, 0.5)
    assert grid.shape == (5, 7)
    assert grid.dtype == np.float32
    assert grid[4, 6] == pytest.approx(gen.get2d(3.0 + 4 * 0.5, -2.0 + 6 * 0.5))
    assert grid[0, 0] == pytest.approx(gen.get2d(3.0, -2.0))


def test_noise3d_grid_matches_points():
    gen = Simplex(21, 16.0)
    grid = gen.noise3d(1.0, 2.0, 3.0, 3, 4, 5, 2.0)
    assert grid.shape == (3, 4, 5)
    assert grid[2, 3, 4] == pytest.approx(gen.get3d(5.0, 8.0, 11.0))
    assert grid[1, 0, 2] == pytest.approx(gen.get3d(3.0, 2.0, 7.0))


def test_create_simplex_auto_resolves_level():
    gen = create_simplex(5, 10.0)
    assert isinstance(gen, Simplex)
    assert gen.level is SimdLevel.AVX2
    assert gen.seed == 5
    assert gen.default_scale == 10.0


@pytest.mark.parametrize("level", ["none", "sse2", "SSE42", SimdLevel.AVX2])
def test_create_simplex_levels_give_same_values(level):
    reference = create_simplex(5, 10.0, SimdLevel.NONE)
    gen = create_simplex(5, 10.0, level)
    assert gen.get2d(12.0, 34.0) == reference.get2d(12.0, 34.0)
    assert gen.get3d(12.0, 34.0, 56.0) == reference.get3d(12.0, 34.0, 56.0)


def test_create_simplex_neon_rejected():
    with pytest.raises(UnsupportedLevelError):
        create_simplex(1, 1.0, SimdLevel.NEON)


def test_create_simplex_unknown_level():
    with pytest.raises(ValueError):
        create_simplex(1, 1.0, "mmx")