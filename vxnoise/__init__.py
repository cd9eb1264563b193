"""Seeded simplex, fractal simplex and cellular noise generators on NumPy arrays."""

__version__ = "0.1.0"
__all__ = ["base", "cellhash", "cellular", "fractal", "levels", "simplex"]