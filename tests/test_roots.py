import math

import pytest

from numerika.roots import (
    BisectionStep,
    NoSignChangeError,
    bisection,
    bisection_steps,
    false_position,
    fixed_point,
    newton,
)


def cubic(x):
    return x * x * x - x - 1


def cubic_prime(x):
    return 3 * x * x - 1


def test_bisection_finds_root_of_cubic():
    root = bisection(cubic, 1, 2, 1e-8)
    assert 1 < root < 2
    assert abs(cubic(root)) < 1e-6


def test_bisection_agrees_with_newton():
    by_bisection = bisection(cubic, 1, 2, 1e-9)
    by_newton = newton(cubic, cubic_prime, 2, 1e-12)
    assert by_bisection == pytest.approx(by_newton, abs=1e-8)


def test_bisection_steps_halve_the_interval():
    steps = list(bisection_steps(cubic, 1, 2, 1e-3))
    assert steps[0].error == 1
    assert [s.iteration for s in steps] == list(range(1, len(steps) + 1))
    for prev, cur in zip(steps, steps[1:]):
        assert cur.error == pytest.approx(prev.error / 2)
    assert steps[-1].error < 1e-3
    assert all(s.error >= 1e-3 for s in steps[:-1])


def test_bisection_step_reports_function_value():
    step = next(bisection_steps(cubic, 1, 2, 1e-3))
    assert isinstance(step, BisectionStep)
    assert step.x == 1.5
    assert step.fx == cubic(1.5)


def test_bisection_stops_on_exact_root():
    steps = list(bisection_steps(lambda x: x - 1.5, 1, 2, 1e-12))
    assert len(steps) == 1
    assert steps[0].x == 1.5
    assert bisection(lambda x: x - 1.5, 1, 2, 1e-12) == 1.5


def test_bisection_requires_sign_change():
    with pytest.raises(NoSignChangeError):
        bisection(cubic, 2, 3, 1e-6)


def test_bisection_rejects_root_at_endpoint():
    with pytest.raises(NoSignChangeError):
        bisection(lambda x: x - 1, 1, 2, 1e-6)


def test_bisection_rejects_nonpositive_epsilon():
    with pytest.raises(ValueError):
        bisection(cubic, 1, 2, 0)


def test_no_sign_change_is_value_error():
    with pytest.raises(ValueError):
        bisection(cubic, 2, 3, 1e-6)


@pytest.mark.parametrize("a, b", [(1, 2), (2, 1)])
def test_false_position_matches_newton(a, b):
    root = false_position(cubic, a, b, 1e-12)
    assert root == pytest.approx(newton(cubic, cubic_prime, 2, 1e-12), abs=1e-9)


def test_false_position_with_decreasing_function():
    def g(x):
        return -cubic(x)

    root = false_position(g, 1, 2, 1e-12)
    assert abs(g(root)) < 1e-9


def test_false_position_root_at_fixed_end():
    assert false_position(lambda x: x - 1, 1, 2, 1e-9) == 1


def test_false_position_requires_sign_change():
    with pytest.raises(NoSignChangeError):
        false_position(cubic, 2, 3, 1e-6)


def test_fixed_point_converges():
    def g(x):
        return 0.5 * math.sqrt(10 - x ** 3)

    root = fixed_point(g, 1.5, 0.6, 1e-8)
    assert abs(g(root) - root) < 1e-7


@pytest.mark.parametrize("k", [0, 1, -0.5, 1.5])
def test_fixed_point_rejects_bad_contraction(k):
    with pytest.raises(ValueError):
        fixed_point(math.cos, 1, k, 1e-6)


def test_fixed_point_rejects_nonpositive_tolerance():
    with pytest.raises(ValueError):
        fixed_point(math.cos, 1, 0.9, 0)


def test_newton_solves_cubic():
    root = newton(cubic, cubic_prime, 2, 1e-10)
    assert abs(cubic(root)) < 1e-9


def test_newton_from_other_end_reaches_same_root():
    assert newton(cubic, cubic_prime, 1, 1e-12) == pytest.approx(
        newton(cubic, cubic_prime, 2, 1e-12), abs=1e-10
    )


def test_newton_raises_on_zero_derivative():
    with pytest.raises(ZeroDivisionError):
        newton(lambda x: x * x - 1, lambda x: 2 * x, 0, 1e-6)


def test_newton_rejects_nonpositive_tolerance():
    with pytest.raises(ValueError):
        newton(cubic, cubic_prime, 2, -1)