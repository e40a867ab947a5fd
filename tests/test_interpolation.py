import pytest

from numerika.interpolation import (
    Point,
    UnevenSpacingError,
    check_equal_spacing,
    forward_differences,
    lagrange,
    newton_forward,
    newton_forward_scaled,
    scaled_difference_table,
)


def cubic(x):
    return 2 * x**3 - x + 4


EVEN = [(x, cubic(x)) for x in (0.0, 0.5, 1.0, 1.5)]
UNIT = [(x, cubic(x)) for x in (1.0, 2.0, 3.0, 4.0)]


def test_point_fields():
    p = Point(1.5, 2.5)
    assert (p.x, p.y) == (1.5, 2.5)


@pytest.mark.parametrize("x, y", EVEN)
def test_lagrange_passes_through_nodes(x, y):
    assert lagrange(EVEN, x) == pytest.approx(y)


def test_lagrange_reproduces_cubic():
    pts = [(-1, cubic(-1)), (0, cubic(0)), (2, cubic(2)), (5, cubic(5))]
    assert lagrange(pts, 3.3) == pytest.approx(cubic(3.3))


def test_lagrange_rejects_duplicate_nodes():
    with pytest.raises(ValueError):
        lagrange([(1, 2), (1, 3)], 0.5)


def test_lagrange_rejects_empty():
    with pytest.raises(ValueError):
        lagrange([], 1.0)


def test_forward_differences_table():
    table = forward_differences([1, 4, 9, 16])
    assert table[0] == [1, 3, 2, 0]
    assert [len(row) for row in table] == [4, 3, 2, 1]
    assert [row[0] for row in table] == [1, 4, 9, 16]


def test_forward_differences_rejects_empty():
    with pytest.raises(ValueError):
        forward_differences([])


def test_check_equal_spacing_returns_step():
    assert check_equal_spacing([1.0, 1.25, 1.5, 1.75]) == pytest.approx(0.25)


def test_check_equal_spacing_raises():
    with pytest.raises(UnevenSpacingError):
        check_equal_spacing([0.0, 1.0, 3.0])


def test_uneven_spacing_is_value_error():
    with pytest.raises(ValueError):
        newton_forward([(0, 1), (1, 2), (3, 5)], 0.5)


def test_newton_forward_reproduces_cubic():
    assert newton_forward(EVEN, 0.8) == pytest.approx(cubic(0.8))


def test_newton_forward_matches_lagrange():
    assert newton_forward(EVEN, 1.2) == pytest.approx(lagrange(EVEN, 1.2))


def test_newton_forward_needs_two_points():
    with pytest.raises(ValueError):
        newton_forward([(0, 1)], 0.0)


def test_scaled_table_unit_step_matches_plain_differences():
    table = scaled_difference_table(UNIT)
    plain = forward_differences([y for _, y in UNIT])
    for scaled_row, plain_row in zip(table, plain):
        assert scaled_row == pytest.approx(plain_row)


def test_scaled_table_divides_by_step():
    table = scaled_difference_table([(0, 0), (0.5, 1), (1.0, 2)])
    assert table[0][1] == pytest.approx(2.0)


def test_newton_forward_scaled_unit_step_agrees():
    assert newton_forward_scaled(UNIT, 2.7) == pytest.approx(newton_forward(UNIT, 2.7))


def test_newton_forward_scaled_at_first_node():
    assert newton_forward_scaled(EVEN, EVEN[0][0]) == pytest.approx(EVEN[0][1])


def test_scaled_table_rejects_single_point():
    with pytest.raises(ValueError):
        scaled_difference_table([(0, 1)])