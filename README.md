# iterlinsolve

Solves a square linear system `A x = b` with two fixed-point iterations:

- **simple iteration** (Jacobi): `x(k) = G x(k-1) + c`
- **Seidel iteration**: the same update, but each new component is used as soon
  as it is computed

`G` and `c` come from dividing every row of `A` and `b` by its diagonal entry.
Both methods are accepted when `A` is diagonally dominant by rows or by columns;
the package checks that first and chooses the matching norm (maximum norm for
row dominance, sum norm otherwise) for its error estimates. Every iteration
starts from the zero vector.

## Install

```
pip install .
```

## Input format

A system is a text file of numbers separated by whitespace: first `n`, then the
`n × n` entries of `A` row by row, then the `n` entries of `b`.

```
3
6 1 2
1 5 2
1 5 10
6
7
8
```

## Command line

The `iterlinsolve` command takes a subcommand and a system file:

```
iterlinsolve show system.txt [--precision 6]
iterlinsolve check system.txt
iterlinsolve norm system.txt
iterlinsolve iterate system.txt -k 10 [--method jacobi|seidel] [--precision 6]
iterlinsolve tolerance system.txt -e 0.0001 [--method jacobi|seidel] [--precision 6]
iterlinsolve step system.txt -e 0.0001 [--method jacobi|seidel] [--precision 6]
```

- `show` prints `A` and `b`.
- `check` says whether `A` is diagonally dominant by rows and by columns, and
  whether the iteration converges.
- `norm` prints the row and column norms of `A`.
- `iterate` runs exactly `k` iterations (`-k`/`--iterations`) and reports the
  result with the a posteriori bound, then with the a priori bound.
- `tolerance` iterates until the a posteriori bound, and then separately the a
  priori bound, is below `e` (`-e`/`--epsilon`), and reports the iteration count
  for each.
- `step` iterates until two successive iterates differ by less than `e`.

`--method` defaults to `jacobi` and `--precision` (decimal places shown) to 6.
The messages are printed in Vietnamese. If the file cannot be opened or parsed,
or `A` is diagonally dominant neither by rows nor by columns, the command
prints a message and exits with status 1.

## Library

```python
from iterlinsolve.solvers import (
    ErrorKind, Method, NotConvergentError,
    solve_fixed_iterations, solve_to_tolerance, solve_until_small_step,
)

a = [[6, 1, 2], [1, 5, 2], [1, 5, 10]]
b = [6, 7, 8]

result = solve_to_tolerance(a, b, 1e-5, Method.SEIDEL, ErrorKind.POSTERIOR)
print(result.x, result.iterations, result.error)
```

Each solver returns a `Solution` with the fields `x`, `iterations` and `error`.
`solve_fixed_iterations` runs exactly `k` iterations (`k >= 1`).
`solve_to_tolerance` stops once the a priori (`ErrorKind.PRIOR`) or a posteriori
(`ErrorKind.POSTERIOR`) estimate is below `epsilon`. `solve_until_small_step`
stops once two successive iterates are closer than `epsilon`. If `A` is
diagonally dominant neither by rows nor by columns they raise
`NotConvergentError` (a `ValueError`); a zero diagonal entry, a non-square
matrix or a non-positive tolerance raise `ValueError`.

Other modules:

- `iterlinsolve.linalg`: vector and matrix norms, the diagonal-dominance checks,
  `jacobi_form`, `column_form`, `lambda_row`, `lambda_col`, `s_factor`,
  `diagonal_ratio`, `power`, and single `jacobi_step` and `seidel_step` updates.
- `iterlinsolve.errors`: step sizes and the a priori / a posteriori bounds for
  both methods in both norms.
- `iterlinsolve.formatting`: `format_matrix` and `format_vector` for text output.
- `iterlinsolve.cli`: `LinearSystem`, `parse_system`, `load_system`,
  `diagonal_report`, `norm_report`, `solve_report` and the `main` entry point.

## What it does not do

There is no interactive menu and no way to type a system in at the keyboard:
systems are read from a file (or from a string with `parse_system`), and each
action is a separate subcommand.