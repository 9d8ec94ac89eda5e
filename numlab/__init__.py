"""Numerical experiments: prime sieves, Jacobi and SOR heat solvers, and Mandelbrot rendering."""

__version__ = "0.1.0"
__all__ = ["jacobi", "mandelbrot", "sieve", "sor"]