import math
import re

import pytest

from learnkit.calculator import Calculator


@pytest.fixture
def calc():
    return Calculator()


def test_basic_arithmetic(calc):
    assert calc.add(5.0, 3.0) == pytest.approx(8.0)
    assert calc.subtract(10.0, 4.0) == pytest.approx(6.0)
    assert calc.multiply(6.0, 7.0) == pytest.approx(42.0)
    assert calc.divide(15.0, 3.0) == pytest.approx(5.0)


def test_memory(calc):
    assert calc.memory == pytest.approx(0.0)
    calc.memory = 42.5
    assert calc.memory == pytest.approx(42.5)
    calc.clear_memory()
    assert calc.memory == pytest.approx(0.0)


def test_history_tracking(calc):
    assert calc.history == []
    calc.add(2.0, 3.0)
    calc.multiply(4.0, 5.0)
    calc.divide(10.0, 2.0)
    history = calc.history
    assert len(history) == 3
    assert history == pytest.approx([5.0, 20.0, 5.0])
    assert calc.last_result == pytest.approx(5.0)
    calc.clear_history()
    assert calc.history == []


def test_history_is_bounded(calc):
    for value in range(101):
        calc.add_to_history(float(value))
    history = calc.history
    assert len(history) == 100
    assert history[0] == 1.0
    assert history[-1] == 100.0


def test_history_returns_copy(calc):
    calc.add(1.0, 1.0)
    snapshot = calc.history
    snapshot.append(99.0)
    assert calc.history == [2.0]


def test_trig_degrees(calc):
    calc.degrees_mode = True
    assert calc.degrees_mode is True
    assert calc.sin(0.0) == pytest.approx(0.0, abs=0.001)
    assert calc.sin(90.0) == pytest.approx(1.0, abs=0.001)
    assert calc.cos(0.0) == pytest.approx(1.0, abs=0.001)
    assert calc.cos(90.0) == pytest.approx(0.0, abs=0.001)


def test_trig_radians(calc):
    calc.degrees_mode = False
    assert calc.degrees_mode is False
    assert calc.sin(0.0) == pytest.approx(0.0, abs=0.001)
    assert calc.sin(math.pi / 2) == pytest.approx(1.0, abs=0.001)
    assert calc.cos(0.0) == pytest.approx(1.0, abs=0.001)
    assert calc.cos(math.pi / 2) == pytest.approx(0.0, abs=0.001)


def test_power_and_sqrt(calc):
    assert calc.power(2.0, 3.0) == pytest.approx(8.0)
    assert calc.power(5.0, 0.0) == pytest.approx(1.0)
    assert calc.power(2.0, -2.0) == pytest.approx(0.25)
    assert calc.sqrt(9.0) == pytest.approx(3.0)
    assert calc.sqrt(16.0) == pytest.approx(4.0)
    assert calc.sqrt(2.0) == pytest.approx(1.414, rel=0.001)


def test_power_of_negative_base_with_fraction_is_nan(calc):
    result = calc.power(-8.0, 0.5)
    assert [result] == pytest.approx([math.nan], nan_ok=True)
    assert calc.history == pytest.approx([math.nan], nan_ok=True)


def test_divide_by_zero_error(calc):
    with pytest.raises(ValueError, match=re.escape("Division by zero")) as info:
        calc.divide(10.0, 0.0)
    assert str(info.value) == "Division by zero"


def test_sqrt_negative_error(calc):
    with pytest.raises(ValueError) as info:
        calc.sqrt(-9.0)
    assert str(info.value) == "Cannot take square root of negative number"


def test_power_zero_negative_error(calc):
    with pytest.raises(ValueError) as info:
        calc.power(0.0, -2.0)
    assert str(info.value) == "Cannot raise zero to negative power"


def test_last_result_empty_error(calc):
    assert calc.history == []
    with pytest.raises(RuntimeError, match="No calculations performed yet") as info:
        result = calc.last_result
        assert result == pytest.approx(0.0)
    assert str(info.value) == "No calculations performed yet"
    calc.add(1.0, 2.0)
    assert calc.last_result == pytest.approx(3.0)


def test_empty_expression_error(calc):
    with pytest.raises(ValueError) as info:
        calc.evaluate_expression("")
    assert str(info.value) == "Empty expression"


def test_unsupported_expression_error(calc):
    with pytest.raises(ValueError) as info:
        calc.evaluate_expression("invalid")
    assert str(info.value) == "Unsupported expression format"


def test_failed_operation_not_recorded(calc):
    with pytest.raises(ValueError):
        calc.divide(5.0, 0.0)
    assert calc.history == []


@pytest.mark.parametrize(
    "expression, expected",
    [("2+3", 5.0), ("10-4", 6.0), ("6*7", 42.0), ("15/3", 5.0)],
)
def test_evaluate_expression(calc, expression, expected):
    assert calc.evaluate_expression(expression) == pytest.approx(expected)
    assert calc.last_result == pytest.approx(expected)


def test_complex_workflow(calc):
    calc.add(10.0, 5.0)
    calc.multiply(3.0, 4.0)
    calc.divide(24.0, 6.0)
    assert calc.history == pytest.approx([15.0, 12.0, 4.0])
    assert calc.last_result == pytest.approx(4.0)
    calc.memory = calc.last_result
    assert calc.memory == pytest.approx(4.0)


def test_reset(calc):
    calc.add(5.0, 5.0)
    calc.memory = 100.0
    calc.degrees_mode = False
    calc.reset()
    assert calc.memory == pytest.approx(0.0)
    assert calc.history == []
    assert calc.degrees_mode is True