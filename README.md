# numerika

A small library of classic numerical methods, with a command-line tool that runs three worked examples.

- **Linear systems** (`numerika.linear_systems`): Gauss–Seidel and Jacobi iteration, and Gaussian elimination (no pivoting) with back substitution.
- **Interpolation** (`numerika.interpolation`): the Lagrange polynomial, and Newton forward-difference interpolation on equally spaced nodes.
- **Root finding** (`numerika.roots`): bisection, false position (chord method), fixed-point iteration and Newton's method.
- **Integration** (`numerika.integration`): the composite trapezoid and Simpson rules, and recovery of one missing sample from a known trapezoid result.

The package has no runtime dependencies.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Library

### Linear systems

```python
from numerika.linear_systems import gaussian_elimination, gauss_seidel, jacobi

a = [[10, -1, 2, -3], [1, 10, -1, 2], [2, 3, 20, -1], [3, 2, 1, 20]]
b = [0, 5, -10, 15]

x = gaussian_elimination(a, b)          # list of floats
result = jacobi(a, b, 1e-6)             # IterationResult
result.values, result.iterations, result.error, result.converged
```

- `gauss_seidel(a, b, tolerance, initial=None)` iterates until no component changes by more than `tolerance`. `gauss_seidel_steps` yields each sweep as an `IterationStep` (`iteration`, `values`, `error`).
- `jacobi(a, b, tolerance, initial=None, max_iterations=100)` stops once the largest change is below `tolerance`. If it hits `max_iterations` first, the result has `converged=False`. `jacobi_steps(a, b, initial=None)` yields sweeps without end.
- `forward_elimination(a, b)` returns the upper-triangular matrix and the updated right-hand side. `back_substitution(a, b)` solves an upper-triangular system.
- A matrix that is not square, or a right-hand side of the wrong length, raises `ValueError`. A zero pivot or a zero diagonal raises `ZeroDivisionError`.

### Interpolation

```python
from numerika.interpolation import Point, lagrange, newton_forward, newton_forward_scaled

points = [Point(1, 1), Point(2, 4), Point(3, 9)]
lagrange(points, 2.5)        # 6.25
newton_forward(points, 2.5)  # 6.25
```

- `forward_differences(ys)` returns the forward-difference table. Row `i` lists the differences that start at `ys[i]`.
- `check_equal_spacing(xs, tolerance=1e-6)` returns the common step. It raises `UnevenSpacingError` (a `ValueError`) when there is no common step.
- `newton_forward` requires equally spaced nodes.
- `scaled_difference_table` and `newton_forward_scaled` use differences divided by the first step `h`.

### Root finding

```python
from numerika.roots import bisection, false_position, fixed_point, newton

f = lambda x: x**3 - x - 1
bisection(f, 1, 2, 1e-6)
false_position(f, 1, 2, 1e-10)
newton(f, lambda x: 3 * x**2 - 1, 2, 1e-10)
fixed_point(lambda x: (x + 1) ** (1 / 3), 1.0, 0.5, 1e-8)
```

- `bisection_steps` yields a `BisectionStep` (`iteration`, `x`, `fx`, `error`) for each halving.
- Bisection and false position raise `NoSignChangeError` when `f` does not change sign on the interval.
- `fixed_point(g, x0, k, tolerance)` needs a contraction constant `0 < k < 1`.
- `newton` raises `ZeroDivisionError` where the derivative vanishes.

### Integration

```python
from numerika.integration import simpson, trapezoid, trapezoid_missing_value

trapezoid(lambda x: x * x, 0, 1, 100)
simpson(lambda x: x * x, 0, 1, 10)

xs = [1.13, 1.27, 1.41, 1.55, 1.69, 1.83, 1.97]
fx = [1.3, 1.66, 2.47, 1.86, 2.87, 3.28]
trapezoid_missing_value(xs, fx, 0.14, 5.0)  # value of f at xs[-1]
```

`n` is the number of subintervals and must be an integer of at least 1. `simpson` gives weight 4 to odd interior nodes and weight 2 to even ones. Use an even `n` to get the usual accuracy.

## Command line

Installing the package provides a `numerika` command with three subcommands:

```
numerika --help
numerika gauss-seidel 0.0001
numerika bisection 1 2 0.0001
numerika simpson 0 1 10
```

- `gauss-seidel TOLERANCE` solves `10x+2y+z=10, x+10y+2z=12, x+y+10z=8`. It prints every iteration and then the solution.
- `bisection A B EPSILON` finds a root of `x^3 - x - 1` on `[A, B]`. It prints every step and then the root.
- `simpson A B N` integrates `x^2 e^x / (4x^2 + 7)` over `[A, B]` with `N` subintervals.

On invalid input, for example an interval without a sign change, the command prints `error: ...` to standard error and exits with status 1.

## Limits

The command line runs only these three fixed problems. To solve your own systems, interpolate your own data, or use the other methods, call the library functions from Python. The functions to be solved or integrated are given as Python callables. There is no parser for formulas typed as text.

## Running the tests

```
pytest
```