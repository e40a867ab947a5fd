"""Numerical integration by composite trapezoid and Simpson rules."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence

Function = Callable[[float], float]


def _intervals(n: int) -> int:
    count = operator.index(n)
    if count < 1:
        raise ValueError("the number of subintervals must be at least 1")
    return count


def trapezoid(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with the composite trapezoid rule on ``n`` subintervals."""
    n = _intervals(n)
    h = (b - a) / n
    total = f(a) + f(b) + 2 * sum(f(a + i * h) for i in range(1, n))
    return total * h / 2


def simpson(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with the composite Simpson rule on ``n`` subintervals.

    Odd interior nodes carry weight 4 and even ones weight 2; ``n`` should be
    even for the rule to have its usual accuracy.
    """
    n = _intervals(n)
    h = (b - a) / n
    total = f(a) + f(b) + sum((4 if i % 2 else 2) * f(a + i * h) for i in range(1, n))
    return total * h / 3


def trapezoid_missing_value(
    xs: Sequence[float], fx: Sequence[float], h: float, target: float
) -> float:
    """Find the last sample ``A`` so that the trapezoid rule for ``x * f(x)`` equals ``target``.

    ``xs`` lists every node and ``fx`` the known values at all nodes but the
    last; the returned value is ``f`` at ``xs[-1]``.
    """
    if len(xs) < 2:
        raise ValueError("at least two nodes are required")
    if len(fx) != len(xs) - 1:
        raise ValueError("fx must hold a value for every node except the last")
    if h == 0:
        raise ValueError("the step h must not be zero")
    if xs[-1] == 0:
        raise ZeroDivisionError("the last node is zero, so its value cannot be recovered")
    weighted = [x * y for x, y in zip(xs, fx)]
    partial = weighted[0] + 2 * sum(weighted[1:])
    return (target * 2 / h - partial) / xs[-1]