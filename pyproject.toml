[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rangekit"
version = "0.1.0"
description = "Segment trees, coordinate compression, permutations and rectangle-union area for integer ranges"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "segment-tree",
    "coordinate-compression",
    "permutation",
    "rectangle-union",
    "algorithms",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rangekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
