"""Text layout of matrices and solution vectors."""

from __future__ import annotations

from .linalg import Matrix, Vector


def format_matrix(matrix: Matrix, precision: int) -> str:
    """Lay out a matrix row by row with fixed-point entries."""
    width = precision + 5
    return "".join(
        "\t\t" + "".join(f"{v:{width}.{precision}f} " for v in row) + "\n"
        for row in matrix
    )


def format_vector(vector: Vector, precision: int) -> str:
    """List the components as ``x_1``, ``x_2``, ... followed by a blank line."""
    lines = "".join(
        f"\t\t| x_{i}: {v:{precision}.{precision}f}\n" for i, v in enumerate(vector, 1)
    )
    return lines + "\n"