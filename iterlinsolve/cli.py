"""Command-line front end: load a linear system, inspect it and solve it iteratively."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .formatting import format_matrix, format_vector
from .linalg import (
    Matrix,
    is_col_diagonally_dominant,
    is_row_diagonally_dominant,
    matrix_norm_col,
    matrix_norm_row,
)
from .solvers import (
    ErrorKind,
    Method,
    NotConvergentError,
    Solution,
    solve_fixed_iterations,
    solve_to_tolerance,
    solve_until_small_step,
)

_BOUND_LABELS = {
    ErrorKind.POSTERIOR: "\t\tSai số tuyệt đối hậu nghiệm: ",
    ErrorKind.PRIOR: "\t\tSai số tuyệt đối tiên nghiệm: ",
}
_STEP_LABEL = "\t\tSai số tuyệt đối: "
_SOLUTION_HEADER = "\t\tNghiệm của hệ phương trình: \n"
_NOT_CONVERGENT = "\t\tPhương pháp không hội tụ."


@dataclass(frozen=True)
class LinearSystem:
    """A square system ``a x = b``."""

    a: tuple[tuple[float, ...], ...]
    b: tuple[float, ...]

    @property
    def size(self) -> int:
        return len(self.b)

    def describe(self, precision: int) -> str:
        """Show the matrix and the right-hand side as the input confirmation does."""
        return (
            "\t\tMa trận A: \n"
            + format_matrix(self.a, precision)
            + "\t\tVector b: \n"
            + format_vector(self.b, precision)
        )


def parse_system(text: str) -> LinearSystem:
    """Read ``n``, then the ``n*n`` entries of ``A`` row by row, then the ``n`` entries of ``b``."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    try:
        n = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid system size: {tokens[0]!r}") from None
    if n < 1:
        raise ValueError("system size must be positive")
    needed = n * n + n
    values = tokens[1 : 1 + needed]
    if len(values) < needed:
        raise ValueError(f"expected {needed} numbers after the size, got {len(values)}")
    try:
        numbers = [float(v) for v in values]
    except ValueError as exc:
        raise ValueError(f"invalid number in input: {exc}") from None
    a = tuple(tuple(numbers[i * n : (i + 1) * n]) for i in range(n))
    return LinearSystem(a, tuple(numbers[n * n :]))


def load_system(path: str | Path) -> LinearSystem:
    """Read a system from a text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_system(handle.read())


def diagonal_report(a: Matrix) -> str:
    """Describe row and column diagonal dominance and whether iteration converges."""
    row = is_row_diagonally_dominant(a)
    col = is_col_diagonally_dominant(a)
    lines = [
        "\t\tMa trận A chéo trội hàng." if row else "\t\tMa trận A không chéo trội hàng.",
        "\t\tMa trận A chéo trội cột." if col else "\t\tMa trận A không chéo trội cột.",
        "\t\tPhương pháp hội tụ." if row or col else _NOT_CONVERGENT,
    ]
    return "\n".join(lines) + "\n"


def norm_report(a: Matrix) -> str:
    """Report the row and column norms of the matrix."""
    return (
        f"\t\tChuẩn hàng ma trận A: {matrix_norm_row(a):g}\n"
        f"\t\tChuẩn cột ma trận A: {matrix_norm_col(a):g}\n"
    )


def _solution_block(solution: Solution, label: str, precision: int, with_count: bool) -> str:
    head = f"\t\tSố lần lặp: {solution.iterations}\n" if with_count else ""
    return (
        head
        + f"{label}{solution.error:.{precision}f}\n"
        + _SOLUTION_HEADER
        + format_vector(solution.x, precision)
        + "\n"
    )


def solve_report(
    system: LinearSystem,
    mode: int,
    method: Method | str,
    parameter: float,
    precision: int,
) -> str:
    """Solve the system and lay out the results.

    ``mode`` 1 runs ``parameter`` iterations and reports both error bounds;
    mode 2 iterates until each bound is below ``parameter``; mode 3 iterates
    until successive iterates differ by less than ``parameter``.
    """
    method = Method(method)
    if precision < 0:
        raise ValueError("precision must be non-negative")
    if mode == 1:
        k = int(parameter)
        if k != parameter:
            raise ValueError("the number of iterations must be an integer")
        return "".join(
            _solution_block(
                solve_fixed_iterations(system.a, system.b, k, method, kind),
                _BOUND_LABELS[kind],
                precision,
                with_count=False,
            )
            for kind in ErrorKind
        )
    if mode == 2:
        return "".join(
            _solution_block(
                solve_to_tolerance(system.a, system.b, parameter, method, kind),
                _BOUND_LABELS[kind],
                precision,
                with_count=True,
            )
            for kind in ErrorKind
        )
    if mode == 3:
        solution = solve_until_small_step(system.a, system.b, parameter, method)
        return _solution_block(solution, _STEP_LABEL, precision, with_count=True)
    raise ValueError(f"unknown mode: {mode}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iterlinsolve",
        description="Solve a diagonally dominant linear system by simple or Seidel iteration.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="print the loaded matrix and vector")
    show.add_argument("file")
    show.add_argument("--precision", type=int, default=6)

    check = commands.add_parser("check", help="check diagonal dominance and convergence")
    check.add_argument("file")

    norm = commands.add_parser("norm", help="print the row and column norms of A")
    norm.add_argument("file")

    specs = (
        ("iterate", 1, ("-k", "--iterations"), int, "number of iterations"),
        ("tolerance", 2, ("-e", "--epsilon"), float, "bound on the error estimate"),
        ("step", 3, ("-e", "--epsilon"), float, "bound on the step between iterates"),
    )
    for name, mode, flags, kind, help_text in specs:
        sub = commands.add_parser(name, help=f"solve with a given {help_text}")
        sub.add_argument("file")
        sub.add_argument(*flags, dest="parameter", type=kind, required=True, help=help_text)
        sub.add_argument(
            "--method", choices=[m.value for m in Method], default=Method.JACOBI.value
        )
        sub.add_argument("--precision", type=int, default=6)
        sub.set_defaults(mode=mode)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command."""
    args = _build_parser().parse_args(argv)
    try:
        system = load_system(args.file)
    except OSError:
        print("\t\tKhông mở được file.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\t\t{exc}", file=sys.stderr)
        return 1

    if args.command == "show":
        print(system.describe(args.precision), end="")
    elif args.command == "check":
        print(diagonal_report(system.a), end="")
    elif args.command == "norm":
        print(norm_report(system.a), end="")
    else:
        try:
            report = solve_report(
                system, args.mode, args.method, args.parameter, args.precision
            )
        except NotConvergentError:
            print(_NOT_CONVERGENT)
            return 1
        except ValueError as exc:
            print(f"\t\t{exc}", file=sys.stderr)
            return 1
        print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())