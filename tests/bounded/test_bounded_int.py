import numpy as np
import pytest

from rangekit.bounded import BoundedFloat, BoundedInt
from rangekit.errors import InvalidBounds


def test_construction_clamps():
    assert BoundedInt(15, 0, 10).value == 10
    assert BoundedInt(-15, 0, 10).value == 0
    assert BoundedInt(4, None, 10).value == 4


def test_requires_integers():
    with pytest.raises(TypeError):
        BoundedInt(1.5, 0, 10)
    with pytest.raises(TypeError):
        BoundedInt(1, 0.0, 10)
    with pytest.raises(TypeError):
        BoundedInt(True, 0, 10)


def test_numpy_integers_accepted():
    b = BoundedInt(np.int64(12), np.int32(0), 10)
    assert b.value == 10
    assert type(b.value) is int


def test_invalid_bounds():
    with pytest.raises(InvalidBounds):
        BoundedInt(1)
    with pytest.raises(InvalidBounds):
        BoundedInt(1, 5, 2)


def test_int_arithmetic_stays_int():
    b = BoundedInt(5, 0, 10)
    for result in (b + 3, b - 2, b * 2, b // 2):
        assert isinstance(result, BoundedInt)
    assert (b + 10).value == 10
    assert (b - 10).value == 0
    assert (b * 3).value == 10
    assert (b // 2).value == 2


def test_float_operand_promotes():
    b = BoundedInt(5, 0, 10)
    result = b + 0.5
    assert isinstance(result, BoundedFloat)
    assert result.value == 5.5
    assert result.bounds == (0.0, 10.0)
    assert (b * 2.5).value == 10.0


def test_true_division_promotes():
    b = BoundedInt(5, 0, 10)
    result = b / 2
    assert isinstance(result, BoundedFloat)
    assert result.value == 2.5
    assert b.divide(2) == 2.5


def test_floor_divide():
    b = BoundedInt(7, -10, 10)
    assert b.floor_divide(2).value == 3
    assert (b // -2).value == -4
    assert (20 // b).value == 2
    assert isinstance(b // 2.0, BoundedFloat)


def test_bounded_float_operand_promotes():
    result = BoundedInt(2, 0, 10) + BoundedFloat(0.25, 0.0, 1.0)
    assert isinstance(result, BoundedFloat)
    assert result.value == 2.25


def test_bounded_int_operand_stays_int():
    result = BoundedInt(2, 0, 10) * BoundedInt(4, 0, 5)
    assert isinstance(result, BoundedInt)
    assert result.value == 8


def test_to_float():
    f = BoundedInt(3, minimum=1).to_float()
    assert isinstance(f, BoundedFloat)
    assert f.value == 3.0
    assert f.bounds == (1.0, None)


def test_int_conversions():
    b = BoundedInt(3, 0, 10)
    assert int(b) == 3
    assert float(b) == 3.0
    assert [10, 20, 30, 40][b] == 40


def test_equality_is_value_only_across_kinds():
    assert BoundedInt(1, 0, 10) == BoundedFloat(1.0, 0.0, 1.0)
    assert BoundedInt(3, 0, 3) == 3
    assert BoundedInt(3, 0, 3) != BoundedInt(3, 0, 30).with_value(4)
    assert hash(BoundedInt(3, 0, 3)) == hash(3)


def test_ordering():
    assert BoundedInt(2, 0, 10) < BoundedInt(3, 0, 10)
    assert BoundedInt(2, 0, 10) <= 2.0
    assert BoundedInt(2, 0, 10) > -1
    assert sorted([BoundedInt(5, 0, 9), BoundedInt(1, 0, 9), BoundedInt(3, 0, 9)]) == [1, 3, 5]


def test_repr():
    assert repr(BoundedInt(3, maximum=5)) == "BoundedInt(3, minimum=None, maximum=5)"


def test_invariant_after_random_operations(rng):
    b = BoundedInt(0, -3, 9)
    ops = [lambda x, y: x + y, lambda x, y: x - y, lambda x, y: x * y]
    for step in range(200):
        if step % 2:
            operand = int(rng.integers(-6, 7))
        else:
            operand = float(rng.normal(scale=4.0))
        b = ops[step % len(ops)](b, operand)
        assert isinstance(b, (BoundedInt, BoundedFloat))
        assert b.bounds in ((-3, 9), (-3.0, 9.0))
        assert -3 <= b.value <= 9
