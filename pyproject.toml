[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numerika"
version = "0.1.0"
description = "Classic numerical methods: linear systems, interpolation, root finding and quadrature"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "gauss-seidel",
    "jacobi",
    "gaussian-elimination",
    "lagrange",
    "newton-interpolation",
    "bisection",
    "false-position",
    "fixed-point",
    "newton-raphson",
    "trapezoid",
    "simpson",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numerika = "numerika.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numerika"]

[tool.pytest.ini_options]
addopts = "-ra"
