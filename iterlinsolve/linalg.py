"""Matrix and vector primitives for simple and Seidel iteration."""

from __future__ import annotations

from collections.abc import Sequence

Vector = Sequence[float]
Matrix = Sequence[Sequence[float]]


def power(x: float, y: int) -> float:
    """Raise ``x`` to the non-negative integer power ``y`` by repeated squaring."""
    if y < 0:
        raise ValueError("exponent must be non-negative")
    if y == 0:
        return 1.0
    if y == 1:
        return x
    half = power(x, y // 2)
    result = half * half
    if y % 2:
        result *= x
    return result


def _rows_dominant(rows: Matrix) -> bool:
    return all(
        abs(row[i]) >= sum(abs(v) for v in row) - abs(row[i])
        for i, row in enumerate(rows)
    )


def is_row_diagonally_dominant(matrix: Matrix) -> bool:
    """True if every diagonal entry outweighs the rest of its row."""
    return _rows_dominant(matrix)


def is_col_diagonally_dominant(matrix: Matrix) -> bool:
    """True if every diagonal entry outweighs the rest of its column."""
    return _rows_dominant(list(zip(*matrix)))


def vector_norm_row(vector: Vector) -> float:
    """Maximum norm of a vector."""
    return max((abs(v) for v in vector), default=0.0)


def vector_norm_col(vector: Vector) -> float:
    """Sum-of-absolute-values norm of a vector."""
    return sum(abs(v) for v in vector)


def matrix_norm_row(matrix: Matrix) -> float:
    """Largest absolute row sum."""
    return max((vector_norm_col(row) for row in matrix), default=0.0)


def matrix_norm_col(matrix: Matrix) -> float:
    """Largest absolute column sum."""
    return max((vector_norm_col(col) for col in zip(*matrix)), default=0.0)


def _check_diagonal(a: Matrix) -> None:
    for i, row in enumerate(a):
        if len(row) != len(a):
            raise ValueError("matrix must be square")
        if row[i] == 0:
            raise ValueError(f"zero on the diagonal at row {i + 1}")


def jacobi_form(a: Matrix, b: Vector) -> tuple[list[list[float]], list[float]]:
    """Rewrite ``a x = b`` as ``x = g x + c`` by dividing each row by its diagonal."""
    _check_diagonal(a)
    if len(b) != len(a):
        raise ValueError("vector length does not match the matrix")
    g = [
        [0.0 if i == j else -v / row[i] for j, v in enumerate(row)]
        for i, row in enumerate(a)
    ]
    c = [bi / row[i] for i, (row, bi) in enumerate(zip(a, b))]
    return g, c


def column_form(a: Matrix) -> list[list[float]]:
    """Divide each column of ``a`` by its diagonal entry, negated, with zero diagonal."""
    _check_diagonal(a)
    return [
        [0.0 if i == j else -v / a[j][j] for j, v in enumerate(row)]
        for i, row in enumerate(a)
    ]


def lambda_row(g: Matrix) -> float:
    """Contraction factor of Seidel iteration measured by rows."""
    result = 0.0
    for i, row in enumerate(g):
        left = sum(abs(v) for v in row[:i])
        right = sum(abs(v) for v in row[i:])
        result = max(result, right / (1 - left))
    return result


def lambda_col(g: Matrix) -> float:
    """Contraction factor of Seidel iteration measured by columns."""
    result = 0.0
    for j, col in enumerate(zip(*g)):
        left = sum(abs(v) for v in col[: j + 1])
        right = sum(abs(v) for v in col[j + 1 :])
        result = max(result, left / (1 - right))
    return result


def s_factor(g: Matrix) -> float:
    """Largest absolute column sum of the strictly lower part of ``g``."""
    return max(
        (sum(abs(v) for v in col[j + 1 :]) for j, col in enumerate(zip(*g))),
        default=0.0,
    )


def diagonal_ratio(a: Matrix) -> float:
    """Largest absolute diagonal entry divided by the absolute last diagonal entry."""
    diagonal = [abs(row[i]) for i, row in enumerate(a)]
    if not diagonal:
        raise ValueError("matrix is empty")
    return max(diagonal) / diagonal[-1]


def jacobi_step(x: Vector, g: Matrix, c: Vector) -> list[float]:
    """One simple-iteration step: ``g x + c`` using only the previous iterate."""
    return [sum(gij * xj for gij, xj in zip(row, x)) + ci for row, ci in zip(g, c)]


def seidel_step(x: Vector, g: Matrix, c: Vector) -> list[float]:
    """One Seidel step, using each new component as soon as it is computed."""
    new = list(x)
    for i, (row, ci) in enumerate(zip(g, c)):
        new[i] = sum(gij * xj for gij, xj in zip(row, new)) + ci
    return new