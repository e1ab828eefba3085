"""Simple (Jacobi) and Seidel iteration for square linear systems, with error estimates and a command line."""

__version__ = "0.1.0"