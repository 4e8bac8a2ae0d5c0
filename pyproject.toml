[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Small, readable implementations of classic algorithms: bit tricks, hashes, probabilistic sketches, determinants, samplers, search trees, Huffman coding and a column-selecting CSV reader."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "bit-tricks",
    "hashing",
    "bloom-filter",
    "count-min-sketch",
    "determinant",
    "kd-tree",
    "ternary-search-tree",
    "huffman",
    "csv",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algonotes-huffman = "algonotes.huffman:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.hatch.build.targets.sdist]
include = ["algonotes", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
