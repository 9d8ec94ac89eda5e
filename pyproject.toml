[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical experiments: prime sieves, Jacobi and SOR heat plates, and Mandelbrot rendering"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "sieve of eratosthenes",
    "primes",
    "jacobi",
    "gauss-seidel",
    "sor",
    "heat equation",
    "mandelbrot",
    "numerical methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numlab-sieve = "numlab.sieve:main"
numlab-jacobi = "numlab.jacobi:main"
numlab-sor = "numlab.sor:main"
numlab-mandelbrot = "numlab.mandelbrot:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"
