import math

import pytest

from iterlinsolve.linalg import (
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
    power,
    s_factor,
    seidel_step,
    vector_norm_col,
    vector_norm_row,
)

ROW_DOMINANT = [[6.0, 1.0, 2.0], [1.0, 5.0, 2.0], [1.0, 5.0, 10.0]]
COL_DOMINANT = [[6.0, 4.0, 5.0], [1.0, 9.0, 2.0], [3.0, 4.0, 8.0]]
FOUR = [
    [5.1, 1.1, 1.2, 1.0],
    [1.1, 6.1, 1.0, 1.1],
    [1.2, 1.0, 7.1, 1.0],
    [1.0, 1.1, 1.0, 5.1],
]


def transpose(m):
    return [list(r) for r in zip(*m)]


def matvec(m, v):
    return [sum(a * b for a, b in zip(row, v)) for row in m]


@pytest.mark.parametrize("x,y", [(2.0, 10), (1.5, 7), (-3.0, 5), (0.9, 33)])
def test_power_matches_builtin(x, y):
    assert math.isclose(power(x, y), x**y, rel_tol=1e-12)


def test_power_base_cases():
    assert power(3.5, 0) == 1.0
    assert power(3.5, 1) == 3.5


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2.0, -1)


def test_dominance_of_samples():
    assert is_row_diagonally_dominant(ROW_DOMINANT)
    assert not is_col_diagonally_dominant(ROW_DOMINANT)
    assert is_col_diagonally_dominant(COL_DOMINANT)
    assert not is_row_diagonally_dominant(COL_DOMINANT)


@pytest.mark.parametrize("m", [ROW_DOMINANT, COL_DOMINANT, FOUR])
def test_dominance_transpose_symmetry(m):
    assert is_row_diagonally_dominant(m) == is_col_diagonally_dominant(transpose(m))


@pytest.mark.parametrize("m", [ROW_DOMINANT, COL_DOMINANT, FOUR])
def test_matrix_norm_transpose(m):
    assert math.isclose(matrix_norm_row(m), matrix_norm_col(transpose(m)))


@pytest.mark.parametrize("m", [ROW_DOMINANT, FOUR])
def test_matrix_norm_homogeneous(m):
    scaled = [[-2.0 * v for v in row] for row in m]
    assert math.isclose(matrix_norm_row(scaled), 2.0 * matrix_norm_row(m))
    assert math.isclose(matrix_norm_col(scaled), 2.0 * matrix_norm_col(m))


@pytest.mark.parametrize("v", [[1.0, -4.0, 2.5], [0.1, 0.2], [-7.0]])
def test_vector_norm_bounds(v):
    assert vector_norm_row(v) <= vector_norm_col(v) <= len(v) * vector_norm_row(v)
    assert vector_norm_col([-x for x in v]) == vector_norm_col(v)


def test_jacobi_form_structure():
    b = [6.0, 7.0, 8.0]
    g, c = jacobi_form(ROW_DOMINANT, b)
    for i, row in enumerate(g):
        assert row[i] == 0.0
        assert math.isclose(c[i] * ROW_DOMINANT[i][i], b[i])
        for j, v in enumerate(row):
            if i != j:
                assert math.isclose(v * ROW_DOMINANT[i][i], -ROW_DOMINANT[i][j])


def test_column_form_structure():
    g = column_form(COL_DOMINANT)
    for i, row in enumerate(g):
        assert row[i] == 0.0
        for j, v in enumerate(row):
            if i != j:
                assert math.isclose(v * COL_DOMINANT[j][j], -COL_DOMINANT[i][j])


def test_zero_diagonal_rejected():
    with pytest.raises(ValueError):
        jacobi_form([[0.0, 1.0], [1.0, 2.0]], [1.0, 1.0])
    with pytest.raises(ValueError):
        column_form([[1.0, 1.0], [1.0, 0.0]])


@pytest.mark.parametrize("step", [jacobi_step, seidel_step])
@pytest.mark.parametrize("a", [ROW_DOMINANT, FOUR])
def test_solution_is_fixed_point(step, a):
    solution = [float(i + 1) for i in range(len(a))]
    g, c = jacobi_form(a, matvec(a, solution))
    for got, want in zip(step(solution, g, c), solution):
        assert math.isclose(got, want, rel_tol=1e-12)


def test_steps_do_not_mutate_and_share_first_component():
    g, c = jacobi_form(FOUR, [6.3, 2.1, 8.3, 2.0])
    x = [1.0, -1.0, 0.5, 2.0]
    before = list(x)
    jac = jacobi_step(x, g, c)
    sei = seidel_step(x, g, c)
    assert x == before
    assert math.isclose(jac[0], sei[0])


def test_lambda_row_bounded_by_norm():
    g, _ = jacobi_form(ROW_DOMINANT, [1.0, 1.0, 1.0])
    assert lambda_row(g) <= matrix_norm_row(g) + 1e-15


def test_lambda_col_contracting_for_column_dominant():
    g_col = column_form(COL_DOMINANT)
    assert 0.0 <= lambda_col(g_col) < 1.0
    assert s_factor(g_col) <= matrix_norm_col(g_col)


def test_s_factor_of_upper_triangular_is_zero():
    assert s_factor([[0.0, 0.3, 0.2], [0.0, 0.0, 0.4], [0.0, 0.0, 0.0]]) == 0.0


def test_diagonal_ratio_properties():
    assert diagonal_ratio([[3.0, 1.0], [2.0, 3.0]]) == 1.0
    scaled = [[4.0 * v for v in row] for row in FOUR]
    assert math.isclose(diagonal_ratio(scaled), diagonal_ratio(FOUR))
    assert diagonal_ratio(COL_DOMINANT) >= 1.0