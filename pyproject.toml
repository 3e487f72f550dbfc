[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpmath"
version = "0.1.0"
description = "Small number-theory, combinatorics and geometry routines for competitive programming"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "number theory",
    "gcd",
    "euler totient",
    "diophantine",
    "modular inverse",
    "binomial",
    "matrix exponentiation",
    "prime factorization",
    "polygon area",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpmath = "cpmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpmath"]

[tool.hatch.build.targets.sdist]
include = ["cpmath", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
