"""Error measures and a-priori / a-posteriori bounds for iterative solutions."""

from __future__ import annotations

from .linalg import Vector, power, vector_norm_col, vector_norm_row


def _difference(x: Vector, x_old: Vector) -> list[float]:
    return [a - b for a, b in zip(x, x_old)]


def relative_error_row(x: Vector, x_old: Vector) -> float:
    """Maximum-norm step size relative to the current iterate."""
    return vector_norm_row(_difference(x, x_old)) / vector_norm_row(x)


def absolute_error_row(x: Vector, x_old: Vector) -> float:
    """Maximum-norm step size."""
    return vector_norm_row(_difference(x, x_old))


def posterior_error_row_jacobi(x: Vector, x_old: Vector, norm_g: float) -> float:
    """A-posteriori bound for simple iteration in the maximum norm."""
    return vector_norm_row(_difference(x, x_old)) * norm_g / (1 - norm_g)


def prior_error_row_jacobi(x_first: Vector, k: int, norm_g: float) -> float:
    """A-priori bound after ``k`` simple iterations in the maximum norm."""
    return vector_norm_row(x_first) * power(norm_g, k) / (1 - norm_g)


def posterior_error_row_seidel(x: Vector, x_old: Vector, lam: float) -> float:
    """A-posteriori bound for Seidel iteration in the maximum norm."""
    return vector_norm_row(_difference(x, x_old)) * lam / (1 - lam)


def prior_error_row_seidel(x_first: Vector, k: int, lam: float) -> float:
    """A-priori bound after ``k`` Seidel iterations in the maximum norm."""
    return vector_norm_row(x_first) * power(lam, k) / (1 - lam)


def relative_error_col(x: Vector, x_old: Vector) -> float:
    """Sum-norm step size relative to the current iterate."""
    return vector_norm_col(_difference(x, x_old)) / vector_norm_col(x)


def absolute_error_col(x: Vector, x_old: Vector) -> float:
    """Sum-norm step size."""
    return vector_norm_col(_difference(x, x_old))


def posterior_error_col_jacobi(
    x: Vector, x_old: Vector, frac: float, norm_g_col: float
) -> float:
    """A-posteriori bound for simple iteration in the sum norm."""
    return frac * vector_norm_col(_difference(x, x_old)) * norm_g_col / (1 - norm_g_col)


def prior_error_col_jacobi(
    x_first: Vector, k: int, frac: float, norm_g_col: float
) -> float:
    """A-priori bound after ``k`` simple iterations in the sum norm."""
    return frac * vector_norm_col(x_first) * power(norm_g_col, k) / (1 - norm_g_col)


def posterior_error_col_seidel(x: Vector, x_old: Vector, s: float, lam: float) -> float:
    """A-posteriori bound for Seidel iteration in the sum norm."""
    return (1 - s) * vector_norm_col(_difference(x, x_old)) * lam / (1 - lam)


def prior_error_col_seidel(x_first: Vector, k: int, s: float, lam: float) -> float:
    """A-priori bound after ``k`` Seidel iterations in the sum norm."""
    return (1 - s) * vector_norm_col(x_first) * power(lam, k) / (1 - lam)