"""Direct and iterative solvers for square systems of linear equations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]


@dataclass(frozen=True)
class IterationStep:
    """One sweep of an iterative solver."""

    iteration: int
    values: tuple[float, ...]
    error: float


@dataclass(frozen=True)
class IterationResult:
    """Final state of an iterative solver."""

    values: tuple[float, ...]
    iterations: int
    error: float
    converged: bool


def _validate(a: Matrix, b: Vector) -> tuple[list[list[float]], list[float]]:
    rows = [[float(v) for v in row] for row in a]
    rhs = [float(v) for v in b]
    n = len(rows)
    if n == 0:
        raise ValueError("the system has no equations")
    if any(len(row) != n for row in rows):
        raise ValueError("the coefficient matrix must be square")
    if len(rhs) != n:
        raise ValueError("the right-hand side does not match the matrix size")
    return rows, rhs


def _start(initial: Vector | None, n: int) -> list[float]:
    if initial is None:
        return [0.0] * n
    start = [float(v) for v in initial]
    if len(start) != n:
        raise ValueError("the initial guess does not match the matrix size")
    return start


def _check_diagonal(rows: list[list[float]]) -> None:
    if any(row[i] == 0 for i, row in enumerate(rows)):
        raise ZeroDivisionError("the matrix has a zero on its diagonal")


def _sweep(row: list[float], rhs: float, i: int, x: Sequence[float]) -> float:
    total = rhs - sum(coef * xj for j, (coef, xj) in enumerate(zip(row, x)) if j != i)
    return total / row[i]


def gauss_seidel_steps(
    a: Matrix, b: Vector, tolerance: float, initial: Vector | None = None
) -> Iterator[IterationStep]:
    """Yield Gauss-Seidel sweeps until every component changes by at most ``tolerance``."""
    if tolerance < 0:
        raise ValueError("tolerance must not be negative")
    rows, rhs = _validate(a, b)
    _check_diagonal(rows)
    x = _start(initial, len(rows))
    iteration = 0
    while True:
        iteration += 1
        previous = list(x)
        for i, row in enumerate(rows):
            x[i] = _sweep(row, rhs[i], i, x)
        error = max(abs(old - new) for old, new in zip(previous, x))
        yield IterationStep(iteration, tuple(x), error)
        if error <= tolerance:
            return


def gauss_seidel(
    a: Matrix, b: Vector, tolerance: float, initial: Vector | None = None
) -> IterationResult:
    """Solve ``a x = b`` by Gauss-Seidel iteration."""
    last = None
    for last in gauss_seidel_steps(a, b, tolerance, initial):
        pass
    assert last is not None
    return IterationResult(last.values, last.iteration, last.error, True)


def jacobi_steps(a: Matrix, b: Vector, initial: Vector | None = None) -> Iterator[IterationStep]:
    """Yield Jacobi sweeps without end; the caller decides when to stop."""
    rows, rhs = _validate(a, b)
    _check_diagonal(rows)
    x = _start(initial, len(rows))
    iteration = 0
    while True:
        iteration += 1
        updated = [_sweep(row, rhs[i], i, x) for i, row in enumerate(rows)]
        error = max(abs(new - old) for old, new in zip(x, updated))
        x = updated
        yield IterationStep(iteration, tuple(x), error)


def jacobi(
    a: Matrix,
    b: Vector,
    tolerance: float,
    initial: Vector | None = None,
    max_iterations: int = 100,
) -> IterationResult:
    """Solve ``a x = b`` by Jacobi iteration, stopping once the change is below ``tolerance``."""
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")
    for step in jacobi_steps(a, b, initial):
        if step.error < tolerance:
            return IterationResult(step.values, step.iteration, step.error, True)
        if step.iteration >= max_iterations:
            return IterationResult(step.values, step.iteration, step.error, False)
    raise AssertionError("unreachable")


def forward_elimination(a: Matrix, b: Vector) -> tuple[list[list[float]], list[float]]:
    """Reduce the system to upper-triangular form without pivoting."""
    rows, rhs = _validate(a, b)
    n = len(rows)
    for k in range(n - 1):
        pivot_row = rows[k]
        if pivot_row[k] == 0:
            raise ZeroDivisionError(f"zero pivot in row {k}")
        for i in range(k + 1, n):
            factor = rows[i][k] / pivot_row[k]
            rows[i] = [
                value - factor * pivot if j >= k else value
                for j, (value, pivot) in enumerate(zip(rows[i], pivot_row))
            ]
            rhs[i] -= factor * rhs[k]
    return rows, rhs


def back_substitution(a: Matrix, b: Vector) -> list[float]:
    """Solve an upper-triangular system."""
    rows, rhs = _validate(a, b)
    n = len(rows)
    x = [0.0] * n
    for i in reversed(range(n)):
        if rows[i][i] == 0:
            raise ZeroDivisionError(f"zero on the diagonal in row {i}")
        total = rhs[i] - sum(coef * xj for coef, xj in zip(rows[i][i + 1:], x[i + 1:]))
        x[i] = total / rows[i][i]
    return x


def gaussian_elimination(a: Matrix, b: Vector) -> list[float]:
    """Solve ``a x = b`` by forward elimination followed by back substitution."""
    upper, rhs = forward_elimination(a, b)
    return back_substitution(upper, rhs)