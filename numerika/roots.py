"""Root finding for scalar equations ``f(x) = 0``."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

Function = Callable[[float], float]


class NoSignChangeError(ValueError):
    """Raised when a bracketing method is given an interval without a sign change."""


@dataclass(frozen=True)
class BisectionStep:
    """One halving of the bracketing interval."""

    iteration: int
    x: float
    fx: float
    error: float


def _require_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive")


def bisection_steps(f: Function, a: float, b: float, epsilon: float) -> Iterator[BisectionStep]:
    """Yield bisection steps on ``[a, b]`` until the interval width falls below ``epsilon``.

    Each step reports the midpoint, its function value and the width of the
    interval it was taken from.
    """
    _require_positive(epsilon, "epsilon")
    fa = f(a)
    if fa * f(b) >= 0:
        raise NoSignChangeError(f"f does not change sign on [{a}, {b}]")
    iteration = 0
    while True:
        iteration += 1
        c = (a + b) / 2
        width = abs(b - a)
        fc = f(c)
        yield BisectionStep(iteration, c, fc, width)
        if fc == 0:
            return
        if fc * fa > 0:
            a, fa = c, fc
        else:
            b = c
        if width < epsilon:
            return


def bisection(f: Function, a: float, b: float, epsilon: float) -> float:
    """Return an approximate root of ``f`` on ``[a, b]`` by bisection."""
    last = None
    for last in bisection_steps(f, a, b, epsilon):
        pass
    assert last is not None
    return last.x


def false_position(f: Function, a: float, b: float, tolerance: float) -> float:
    """Return an approximate root of ``f`` on ``[a, b]`` by the chord method.

    The end where ``f`` is not negative at ``a`` decides the fixed end: if
    ``f(a) < 0`` iteration starts at ``a`` with ``b`` fixed, otherwise it
    starts at ``b`` with ``a`` fixed.
    """
    _require_positive(tolerance, "tolerance")
    fa, fb = f(a), f(b)
    if fa * fb > 0:
        raise NoSignChangeError(f"f does not change sign on [{a}, {b}]")
    if fa < 0:
        x0, fixed, f_fixed = a, b, fb
    else:
        x0, fixed, f_fixed = b, a, fa

    def step(x: float) -> float:
        fx = f(x)
        if fx == 0:
            return x
        return x - fx * (x - fixed) / (fx - f_fixed)

    x1 = step(x0)
    while abs(x1 - x0) > tolerance:
        x0 = x1
        x1 = step(x0)
    return x1


def fixed_point(g: Function, x0: float, k: float, tolerance: float) -> float:
    """Iterate ``x = g(x)`` from ``x0``; ``k`` is the contraction constant of ``g``.

    Stops when successive iterates differ by at most ``tolerance * (1 - k) / k``,
    which bounds the distance to the fixed point by ``tolerance``.
    """
    if not 0 < k < 1:
        raise ValueError("the contraction constant k must lie strictly between 0 and 1")
    _require_positive(tolerance, "tolerance")
    threshold = tolerance * (1 - k) / k
    while True:
        x1 = g(x0)
        if abs(x1 - x0) <= threshold:
            return x1
        x0 = x1


def newton(f: Function, df: Function, x0: float, tolerance: float) -> float:
    """Return an approximate root of ``f`` by Newton's method starting at ``x0``."""
    _require_positive(tolerance, "tolerance")

    def step(x: float) -> float:
        slope = df(x)
        if slope == 0:
            raise ZeroDivisionError(f"the derivative vanishes at x = {x}")
        return x - f(x) / slope

    x1 = step(x0)
    while abs(x1 - x0) > tolerance:
        x0 = x1
        x1 = step(x0)
    return x1