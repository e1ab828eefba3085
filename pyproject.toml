[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "iterlinsolve"
version = "0.1.0"
description = "Solve linear systems Ax = b by simple (Jacobi) and Seidel iteration with a priori and a posteriori error estimates"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear systems", "jacobi", "gauss-seidel", "iterative methods", "numerical analysis", "diagonal dominance"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iterlinsolve = "iterlinsolve.cli:main"

[tool.setuptools.packages.find]
include = ["iterlinsolve*"]

[tool.pytest.ini_options]
addopts = "-ra"
