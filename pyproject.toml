[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vxnoise"
version = "0.1.0"
description = "Seeded simplex, fractal simplex and cellular noise generators vectorised with NumPy"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["noise", "simplex", "cellular", "fractal", "procedural", "terrain"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vxnoise"]

[tool.pytest.ini_options]
addopts = "-ra"
