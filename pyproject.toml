[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kagome"
version = "0.1.0"
description = "Transfer-matrix counting of ice-rule states on kagome and square lattices"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["kagome", "ice model", "transfer matrix", "entropy", "statistical mechanics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kagome = "kagome.lattice:main"

[tool.hatch.build.targets.wheel]
packages = ["kagome"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
