"""Polynomial interpolation: Lagrange form and Newton forward differences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import factorial
from typing import NamedTuple


class Point(NamedTuple):
    """A sample ``(x, y)``."""

    x: float
    y: float


class UnevenSpacingError(ValueError):
    """Raised when the nodes are not equally spaced."""


def _points(points: Iterable[Sequence[float]]) -> list[Point]:
    result = [Point(float(p[0]), float(p[1])) for p in points]
    if not result:
        raise ValueError("at least one point is required")
    return result


def lagrange(points: Iterable[Sequence[float]], x: float) -> float:
    """Evaluate the Lagrange interpolating polynomial through ``points`` at ``x``."""
    pts = _points(points)
    if len({p.x for p in pts}) != len(pts):
        raise ValueError("interpolation nodes must be distinct")
    total = 0.0
    for i, pi in enumerate(pts):
        term = pi.y
        for j, pj in enumerate(pts):
            if i != j:
                term *= (x - pj.x) / (pi.x - pj.x)
        total += term
    return total


def forward_differences(ys: Sequence[float]) -> list[list[float]]:
    """Return the forward-difference table; row ``i`` lists the differences starting at ``ys[i]``."""
    columns = [[float(y) for y in ys]]
    if not columns[0]:
        raise ValueError("at least one value is required")
    while len(columns[-1]) > 1:
        prev = columns[-1]
        columns.append([b - a for a, b in zip(prev, prev[1:])])
    return [[col[i] for col in columns if i < len(col)] for i in range(len(ys))]


def check_equal_spacing(xs: Sequence[float], tolerance: float = 1e-6) -> float:
    """Return the common step of ``xs``, raising UnevenSpacingError if there is none."""
    if len(xs) < 2:
        raise ValueError("at least two nodes are required")
    h = xs[1] - xs[0]
    for a, b in zip(xs[1:], xs[2:]):
        if abs((b - a) - h) > tolerance:
            raise UnevenSpacingError("nodes are not equally spaced")
    return h


def newton_forward(points: Iterable[Sequence[float]], x: float) -> float:
    """Evaluate Newton's forward-difference polynomial at ``x``; nodes must be equally spaced."""
    pts = _points(points)
    xs = [p.x for p in pts]
    h = check_equal_spacing(xs)
    if h == 0:
        raise ValueError("interpolation nodes must be distinct")
    leading = forward_differences([p.y for p in pts])[0]
    p = (x - xs[0]) / h
    result = leading[0]
    product = 1.0
    for i, delta in enumerate(leading[1:], start=1):
        product *= p - (i - 1)
        result += product * delta / factorial(i)
    return result


def scaled_difference_table(points: Iterable[Sequence[float]]) -> list[list[float]]:
    """Return the difference table where each order is divided by the first step ``h``."""
    pts = _points(points)
    if len(pts) < 2:
        raise ValueError("at least two points are required")
    h = pts[1].x - pts[0].x
    if h == 0:
        raise ValueError("interpolation nodes must be distinct")
    columns = [[p.y for p in pts]]
    while len(columns[-1]) > 1:
        prev = columns[-1]
        columns.append([(b - a) / h for a, b in zip(prev, prev[1:])])
    return [[col[i] for col in columns if i < len(col)] for i in range(len(pts))]


def newton_forward_scaled(points: Iterable[Sequence[float]], x: float) -> float:
    """Evaluate the forward formula using the scaled difference table at ``x``."""
    pts = _points(points)
    table = scaled_difference_table(pts)
    h = pts[1].x - pts[0].x
    t = (x - pts[0].x) / h
    leading = table[0]
    result = leading[0]
    term = 1.0
    for j, delta in enumerate(leading[1:], start=1):
        term *= (t - j + 1) / j
        result += term * delta
    return result