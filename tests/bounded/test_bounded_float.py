import copy
import math
import pickle
import pytest

from rangekit.bounded import BoundedFloat, BoundedInt, UnitFloat
from rangekit.errors import InvalidBounds, InvalidNumericState


def test_construction_clamps():
    assert BoundedFloat(7.5, 0.0, 5.0).value == 5.0
    assert BoundedFloat(-7.5, 0.0, 5.0).value == 0.0
    assert BoundedFloat(2.5, 0.0, 5.0).value == 2.5


def test_one_sided_bounds():
    low_only = BoundedFloat(-3.0, minimum=0.0)
    assert low_only.value == 0.0
    assert low_only.maximum is None
    assert (low_only + 1e6).value == 1e6

    high_only = BoundedFloat(3.0, maximum=1.0)
    assert high_only.value == 1.0
    assert (high_only - 1e6).value == -999999.0


def test_int_input_and_bounds_are_stored_as_float():
    b = BoundedFloat(3, 0, 10)
    assert type(b.value) is float
    assert b.bounds == (0.0, 10.0)


def test_invalid_bounds():
    with pytest.raises(InvalidBounds):
        BoundedFloat(1.0)
    with pytest.raises(InvalidBounds):
        BoundedFloat(1.0, 5.0, 2.0)
    with pytest.raises(InvalidBounds):
        BoundedFloat(1.0, math.nan, 2.0)


def test_nan_value_rejected():
    with pytest.raises(InvalidNumericState):
        BoundedFloat(math.nan, 0.0, 1.0)


def test_non_numeric_rejected():
    with pytest.raises(TypeError):
        BoundedFloat("3", 0.0, 5.0)


def test_arithmetic_reclamps():
    b = BoundedFloat(4.0, 0.0, 5.0)
    assert (b + 3.0).value == 5.0
    assert (b - 10).value == 0.0
    assert (b * 0.5).value == 2.0
    assert (b / 8).value == 0.5


def test_named_operations_match_operators():
    b = BoundedFloat(4.0, 0.0, 5.0)
    assert b.add(3.0) == b + 3.0
    assert b.subtract(1.5) == b - 1.5
    assert b.multiply(2) == b * 2
    assert b.divide(4) == b / 4


def test_named_operation_rejects_unsupported_operand():
    with pytest.raises(TypeError):
        BoundedFloat(1.0, 0.0, 2.0).add("x")
    with pytest.raises(TypeError):
        BoundedFloat(1.0, 0.0, 2.0) + "x"


def test_reflected_arithmetic_keeps_bounds():
    b = BoundedFloat(2.0, 0.0, 5.0)
    result = 10.0 - b
    assert isinstance(result, BoundedFloat)
    assert result.value == 5.0
    assert (1.0 + b).value == 3.0
    assert (3 * b).value == 5.0
    assert (4.0 / b).value == 2.0


def test_arithmetic_with_bounded_operand_uses_its_value():
    b = BoundedFloat(2.0, 0.0, 5.0)
    other = BoundedFloat(100.0, 0.0, 1.5)
    result = b + other
    assert result.value == 3.5
    assert result.bounds == (0.0, 5.0)


def test_division_by_zero_propagates():
    with pytest.raises(ZeroDivisionError):
        BoundedFloat(1.0, 0.0, 2.0) / 0.0


def test_arithmetic_returns_new_instances():
    b = BoundedFloat(1.0, 0.0, 5.0)
    c = b + 1.0
    assert c is not b
    assert b.value == 1.0


def test_with_value_is_assignment():
    b = BoundedFloat(1.0, 0.0, 5.0)
    assert b.with_value(9.0).value == 5.0
    assert b.with_value(BoundedFloat(2.0, 0.0, 10.0)).value == 2.0
    assert b.with_value(3.0).bounds == b.bounds


def test_instances_are_immutable():
    b = BoundedFloat(1.0, 0.0, 5.0)
    with pytest.raises(AttributeError):
        b.value = 3.0
    with pytest.raises(AttributeError):
        b._value = 30.0
    with pytest.raises(AttributeError):
        b._maximum = 30.0
    assert b.value == 1.0


def test_comparisons_against_scalars_and_bounded():
    b = BoundedFloat(2.0, 0.0, 5.0)
    assert b == 2.0
    assert b != 2.5
    assert b < 3
    assert b <= 2.0
    assert b > BoundedInt(1, 0, 10)
    assert b >= UnitFloat(1.0)
    assert 1.0 < b


def test_equality_ignores_bounds():
    # equality and hashing look at the stored value only; bounds are range policy
    a = BoundedFloat(1.0, 0.0, 2.0)
    b = BoundedFloat(1.0, -100.0, 100.0)
    assert a == b
    assert hash(a) == hash(b) == hash(1.0)
    assert len({a, b, 1.0}) == 1


def test_comparison_with_unrelated_type():
    b = BoundedFloat(1.0, 0.0, 2.0)
    assert (b == "1.0") is False
    with pytest.raises(TypeError):
        b < "1.0"


def test_invariant_after_random_operations(rng):
    b = BoundedFloat(0.0, -2.5, 7.0)
    ops = [lambda x, y: x + y, lambda x, y: x - y, lambda x, y: x * y]
    for step in range(200):
        operand = float(rng.normal(scale=5.0))
        b = ops[step % len(ops)](b, operand)
        assert -2.5 <= b.value <= 7.0


def test_conversions_and_repr():
    b = BoundedFloat(1.5, 0.0, 2.0)
    assert float(b) == 1.5
    assert repr(b) == "BoundedFloat(1.5, minimum=0.0, maximum=2.0)"


def test_copy_and_pickle():
    b = BoundedFloat(1.5, maximum=2.0)
    assert copy.copy(b) is b
    assert copy.deepcopy(b) is b
    restored = pickle.loads(pickle.dumps(b))
    assert restored == b
    assert restored.bounds == (None, 2.0)


def test_int_truncates():
    assert int(BoundedFloat(2.5, 0.0, 5.0)) == 2
    assert int(BoundedFloat(-2.5, -5.0, 0.0)) == -2
