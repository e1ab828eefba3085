"""Simple (Jacobi) and Seidel iteration with several stopping rules."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import partial
from itertools import islice

from . import errors
from .linalg import (
    Matrix,
    Vector,
    column_form,
    diagonal_ratio,
    is_col_diagonally_dominant,
    is_row_diagonally_dominant,
    jacobi_form,
    jacobi_step,
    lambda_col,
    lambda_row,
    matrix_norm_col,
    matrix_norm_row,
    s_factor,
    seidel_step,
)


class Method(enum.Enum):
    """Iteration scheme."""

    JACOBI = "jacobi"
    SEIDEL = "seidel"


class ErrorKind(enum.Enum):
    """Which error bound is reported and used for stopping."""

    POSTERIOR = 1
    PRIOR = 2


@dataclass(frozen=True)
class Solution:
    """Approximate solution, the number of iterations and its error estimate."""

    x: tuple[float, ...]
    iterations: int
    error: float


class NotConvergentError(ValueError):
    """The matrix is neither row nor column diagonally dominant."""


@dataclass
class _System:
    g: list[list[float]]
    c: list[float]
    g_col: list[list[float]]
    frac: float
    row_dominant: bool


_STEPS: dict[Method, Callable[[Vector, Matrix, Vector], list[float]]] = {
    Method.JACOBI: jacobi_step,
    Method.SEIDEL: seidel_step,
}


def _prepare(a: Matrix, b: Vector) -> _System:
    if not a:
        raise ValueError("matrix is empty")
    row_dominant = is_row_diagonally_dominant(a)
    if not (row_dominant or is_col_diagonally_dominant(a)):
        raise NotConvergentError("the iteration does not converge for this matrix")
    g, c = jacobi_form(a, b)
    return _System(g, c, column_form(a), diagonal_ratio(a), row_dominant)


def _estimators(system: _System, method: Method) -> tuple[Callable, Callable]:
    """Return the (posterior(x, x_old), prior(x_first, k)) bounds for the system."""
    if system.row_dominant:
        if method is Method.JACOBI:
            q = matrix_norm_row(system.g)
            return (
                partial(errors.posterior_error_row_jacobi, norm_g=q),
                partial(errors.prior_error_row_jacobi, norm_g=q),
            )
        lam = lambda_row(system.g)
        return (
            partial(errors.posterior_error_row_seidel, lam=lam),
            partial(errors.prior_error_row_seidel, lam=lam),
        )
    if method is Method.JACOBI:
        q = matrix_norm_col(system.g_col)
        return (
            partial(errors.posterior_error_col_jacobi, frac=system.frac, norm_g_col=q),
            partial(errors.prior_error_col_jacobi, frac=system.frac, norm_g_col=q),
        )
    lam = lambda_col(system.g_col)
    s = s_factor(system.g_col)
    return (
        partial(errors.posterior_error_col_seidel, s=s, lam=lam),
        partial(errors.prior_error_col_seidel, s=s, lam=lam),
    )


def _iterates(system: _System, method: Method) -> Iterator[tuple[list[float], list[float]]]:
    """Yield (previous, current) iterate pairs starting from the zero vector."""
    step = _STEPS[method]
    x = [0.0] * len(system.c)
    while True:
        new = step(x, system.g, system.c)
        yield x, new
        x = new


def solve_fixed_iterations(
    a: Matrix, b: Vector, k: int, method: Method, kind: ErrorKind
) -> Solution:
    """Run exactly ``k`` iterations and report the chosen error bound."""
    if k < 1:
        raise ValueError("the number of iterations must be at least 1")
    system = _prepare(a, b)
    posterior, prior = _estimators(system, method)
    pairs = islice(_iterates(system, method), k)
    x_old, x = next(pairs)
    x_first = x
    for x_old, x in pairs:
        pass
    error = posterior(x, x_old) if kind is ErrorKind.POSTERIOR else prior(x_first, k)
    return Solution(tuple(x), k, error)


def solve_to_tolerance(
    a: Matrix, b: Vector, epsilon: float, method: Method, kind: ErrorKind
) -> Solution:
    """Iterate until the chosen error bound falls below ``epsilon``."""
    if epsilon <= 0:
        raise ValueError("tolerance must be positive")
    system = _prepare(a, b)
    posterior, prior = _estimators(system, method)
    x_first: list[float] = []
    for count, (x_old, x) in enumerate(_iterates(system, method), 1):
        if count == 1:
            x_first = x
        if kind is ErrorKind.POSTERIOR:
            error = posterior(x, x_old)
        else:
            error = prior(x_first, count)
        if error < epsilon:
            return Solution(tuple(x), count, error)
    raise AssertionError("unreachable")


def solve_until_small_step(
    a: Matrix, b: Vector, epsilon: float, method: Method
) -> Solution:
    """Iterate until the difference of successive iterates is below ``epsilon``."""
    if epsilon <= 0:
        raise ValueError("tolerance must be positive")
    system = _prepare(a, b)
    step_size = errors.absolute_error_row if system.row_dominant else errors.absolute_error_col
    for count, (x_old, x) in enumerate(_iterates(system, method), 1):
        error = step_size(x, x_old)
        if error < epsilon:
            return Solution(tuple(x), count, error)
    raise AssertionError("unreachable")