import math

import pytest

from scicalc import AngleMode, ScientificFunction, combination, factorial, permutation
from scicalc.functions import apply_function
from scicalc.numeric import parse_number
from tests.conftest import enter


def apply(calc, value, name):
    enter(calc, value)
    calc.apply_function(name)
    return calc.get_display()


def test_sqrt(calc):
    assert apply(calc, "9", "sqrt") == "3"


def test_sin_degrees(calc):
    assert apply(calc, "90", "sin") == "1"


def test_sin_radians(calc):
    calc.toggle_angle_mode()
    result = parse_number(apply(calc, "90", "sin"))
    assert result == pytest.approx(0.8939966636)


def test_cos_degrees(calc):
    assert parse_number(apply(calc, "60", "cos")) == pytest.approx(0.5)


def test_inverse_trig_returns_degrees(calc):
    assert apply(calc, "1", "sin⁻¹") == "90"


def test_inverse_trig_radians(calc):
    calc.toggle_angle_mode()
    assert parse_number(apply(calc, "1", "tan⁻¹")) == pytest.approx(math.pi / 4)


def test_inverse_trig_out_of_domain_is_nan(calc):
    assert apply(calc, "2", "sin⁻¹") == "NaN"


@pytest.mark.parametrize("name, value, expected", [
    ("tan", 45.0, 1.0),
    ("sin", 30.0, 0.5),
    ("cos", 180.0, -1.0),
    ("sin⁻¹", 0.5, 30.0),
    ("cos⁻¹", 0.5, 60.0),
    ("tan⁻¹", 1.0, 45.0),
])
def test_trig_in_degrees(name, value, expected):
    assert apply_function(name, value, AngleMode.DEG) == pytest.approx(expected)


@pytest.mark.parametrize("name, value, expected", [
    ("tan", math.pi / 4, 1.0),
    ("cos", math.pi, -1.0),
    ("cos⁻¹", 0.0, math.pi / 2),
    ("sin⁻¹", 1.0, math.pi / 2),
])
def test_trig_in_radians(name, value, expected):
    assert apply_function(name, value, AngleMode.RAD) == pytest.approx(expected)


def test_tan_degrees_on_display(calc):
    assert parse_number(apply(calc, "45", "tan")) == pytest.approx(1.0)


def test_arccos_degrees_on_display(calc):
    assert apply(calc, "0", "cos⁻¹") == "90"


@pytest.mark.parametrize("name, reference", [
    ("sinh", math.sinh),
    ("cosh", math.cosh),
    ("tanh", math.tanh),
])
def test_hyperbolic_ignores_angle_mode(name, reference):
    deg = apply_function(name, 1.0, AngleMode.DEG)
    rad = apply_function(name, 1.0, AngleMode.RAD)
    assert deg == rad == reference(1.0)


def test_cosh_overflow_is_infinity():
    assert apply_function("cosh", 1000.0) == math.inf
    assert apply_function("sinh", -1000.0) == -math.inf


@pytest.mark.parametrize("name, value, expected", [
    ("log", "1000", "3"),
    ("ln", "1", "0"),
    ("∛x", "27", "3"),
    ("∛x", "64", "4"),
    ("∛x", "1000", "10"),
    ("10^x", "3", "1000"),
    ("e^x", "0", "1"),
    ("1/x", "4", "0.25"),
    ("x²", "12", "144"),
    ("x³", "3", "27"),
    ("±", "7", "-7"),
    ("%", "50", "0.5"),
    ("n!", "5", "120"),
])
def test_direct_transforms(calc, name, value, expected):
    assert apply(calc, value, name) == expected


@pytest.mark.parametrize("name, value, expected", [
    ("log", "0", "-Infinity"),
    ("ln", "0", "-Infinity"),
    ("sqrt", "0", "0"),
    ("1/x", "0", "Infinity"),
    ("e^x", "1000", "Infinity"),
    ("10^x", "400", "Infinity"),
])
def test_non_finite_results_are_displayed(calc, name, value, expected):
    assert apply(calc, value, name) == expected


def test_sqrt_of_negative_is_nan(calc):
    enter(calc, "4")
    calc.apply_function("±")
    calc.apply_function("sqrt")
    assert calc.get_display() == "NaN"


def test_log_of_negative_is_nan(calc):
    enter(calc, "10")
    calc.apply_function("±")
    calc.apply_function("log")
    assert calc.get_display() == "NaN"


def test_constants_ignore_display(calc):
    assert apply(calc, "42", "π") == "3.141592653589793"
    calc.clear_all()
    assert apply(calc, "42", "e") == "2.718281828459045"


def test_function_logs_history(calc):
    apply(calc, "9", "sqrt")
    entry = calc.get_history()[0]
    assert entry.expression == "sqrt(9)"
    assert entry.result == "3"


def test_function_result_is_replaced_by_next_digit(calc):
    apply(calc, "9", "sqrt")
    calc.append_digit("4")
    assert calc.get_display() == "4"


def test_function_applies_to_right_operand(calc):
    enter(calc, "2")
    calc.set_operator("+")
    enter(calc, "9")
    calc.apply_function("sqrt")
    calc.evaluate()
    assert calc.get_display() == "5"


def test_ans_recalls_last_evaluation(calc):
    enter(calc, "2")
    calc.set_operator("+")
    enter(calc, "3")
    calc.evaluate()
    calc.clear_all()
    calc.clear_history()
    calc.apply_function("Ans")
    assert calc.get_display() == "5"


def test_ans_defaults_to_zero(calc):
    assert apply(calc, "8", "Ans") == "0"


def test_function_lookup_by_name_and_alias():
    assert ScientificFunction("SQRT") is ScientificFunction.SQRT
    assert ScientificFunction("cbrt") is ScientificFunction.CBRT
    assert ScientificFunction("asin") is ScientificFunction.ASIN


def test_unknown_function_rejected(calc):
    with pytest.raises(ValueError):
        calc.apply_function("sec")


def test_factorial():
    assert math.isnan(factorial(-1))
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120


def test_factorial_overflows_to_infinity():
    assert factorial(200) == math.inf
    assert factorial(math.inf) == math.inf


def test_combinatorics():
    assert combination(5, 2) == 10
    assert permutation(5, 2) == 20
    assert combination(5, 0) == 1
    assert combination(5, 5) == 1
    assert permutation(5, 0) == 1


@pytest.mark.parametrize("n, r", [(2, 5), (-1, 0), (5, -1)])
def test_combinatorics_out_of_domain(n, r):
    assert math.isnan(combination(n, r))
    assert math.isnan(permutation(n, r))


def test_ncr_through_operator_queue(calc):
    enter(calc, "5")
    calc.set_operator("nCr")
    enter(calc, "2")
    calc.evaluate()
    assert calc.get_display() == "10"
    assert calc.get_history()[0].expression == "5 nCr 2"


def test_npr_through_operator_queue(calc):
    enter(calc, "5")
    calc.set_operator("nPr")
    enter(calc, "2")
    calc.evaluate()
    assert calc.get_display() == "20"


def test_ncr_chains_into_next_operator(calc):
    enter(calc, "5")
    calc.set_operator("nCr")
    enter(calc, "2")
    calc.set_operator("+")
    assert calc.get_display() == "10"
    enter(calc, "1")
    calc.evaluate()
    assert calc.get_display() == "11"


def test_cube_root_of_negative_cube(calc):
    enter(calc, "8")
    calc.apply_function("±")
    calc.apply_function("∛x")
    assert calc.get_display() == "-2"


def test_cube_root_of_non_cube():
    result = apply_function(ScientificFunction.CBRT, 2.0)
    assert result == pytest.approx(1.2599210498948732)
    assert result ** 3 == pytest.approx(2.0)


def test_cube_root_non_finite():
    assert apply_function("cbrt", math.inf) == math.inf
    assert math.isnan(apply_function("cbrt", math.nan))
