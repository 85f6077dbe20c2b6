"""
Scientific and combinatoric functions.

All functions here follow floating-point semantics: an undefined result is
NaN, an overflowing one is Infinity. Nothing raises for numeric input.
"""

import math

from .numeric import divide, power
from .state import AngleMode, BinaryOperator, SymbolEnum


class ScientificFunction(SymbolEnum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "sin⁻¹"
    ACOS = "cos⁻¹"
    ATAN = "tan⁻¹"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    CBRT = "∛x"
    POW10 = "10^x"
    EXP = "e^x"
    RECIPROCAL = "1/x"
    SQUARE = "x²"
    CUBE = "x³"
    NEGATE = "±"
    PERCENT = "%"
    PI = "π"
    E = "e"
    FACTORIAL = "n!"
    ANS = "Ans"

    @classmethod
    def _aliases(cls):
        return {
            "asin": "sin⁻¹", "acos": "cos⁻¹", "atan": "tan⁻¹",
            "cbrt": "∛x", "exp": "e^x", "x^2": "x²", "x^3": "x³",
            "+/-": "±", "pi": "π", "!": "n!", "ans": "Ans",
        }


def factorial(n):
    """Iterative factorial; NaN for negative input"""
    if n < 0:
        return math.nan
    result = 1.0
    i = 2
    while i <= n:
        result *= i
        if math.isinf(result):
            break
        i += 1
    return result


def combination(n, r):
    """n choose r"""
    if n < 0 or r < 0 or r > n:
        return math.nan
    if r == 0 or r == n:
        return 1.0
    return divide(factorial(n), factorial(r) * factorial(n - r))


def permutation(n, r):
    """Ordered selections of r out of n"""
    if n < 0 or r < 0 or r > n:
        return math.nan
    if r == 0:
        return 1.0
    return divide(factorial(n), factorial(n - r))


def _guarded(func, x, overflow=math.inf):
    try:
        return func(x)
    except ValueError:
        return math.nan
    except OverflowError:
        return overflow


def _cbrt(x):
    root = math.cbrt(x)
    if math.isfinite(root):
        # math.cbrt(27) is 3.0000000000000004; snap exact cubes
        nearest = round(root)
        if nearest * nearest * nearest == x:
            return float(nearest)
    return root


def _log(func, x):
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return func(x)


def _to_radians(x, angle_mode):
    return math.radians(x) if angle_mode is AngleMode.DEG else x


def _from_radians(x, angle_mode):
    return math.degrees(x) if angle_mode is AngleMode.DEG else x


def apply_function(func, x, angle_mode=AngleMode.DEG, last_result=None):
    """Apply a scientific function to x and return the float result"""
    func = ScientificFunction(func)

    if func is ScientificFunction.SIN:
        return _guarded(math.sin, _to_radians(x, angle_mode))
    if func is ScientificFunction.COS:
        return _guarded(math.cos, _to_radians(x, angle_mode))
    if func is ScientificFunction.TAN:
        return _guarded(math.tan, _to_radians(x, angle_mode))
    if func is ScientificFunction.ASIN:
        return _from_radians(_guarded(math.asin, x), angle_mode)
    if func is ScientificFunction.ACOS:
        return _from_radians(_guarded(math.acos, x), angle_mode)
    if func is ScientificFunction.ATAN:
        return _from_radians(math.atan(x), angle_mode)
    if func is ScientificFunction.SINH:
        return _guarded(math.sinh, x, overflow=math.copysign(math.inf, x))
    if func is ScientificFunction.COSH:
        return _guarded(math.cosh, x)
    if func is ScientificFunction.TANH:
        return math.tanh(x)
    if func is ScientificFunction.LOG:
        return _log(math.log10, x)
    if func is ScientificFunction.LN:
        return _log(math.log, x)
    if func is ScientificFunction.SQRT:
        return math.nan if x < 0 else math.sqrt(x)
    if func is ScientificFunction.CBRT:
        return _cbrt(x)
    if func is ScientificFunction.POW10:
        return power(10.0, x)
    if func is ScientificFunction.EXP:
        return _guarded(math.exp, x)
    if func is ScientificFunction.RECIPROCAL:
        return divide(1.0, x)
    if func is ScientificFunction.SQUARE:
        return x * x
    if func is ScientificFunction.CUBE:
        return x * x * x
    if func is ScientificFunction.NEGATE:
        return -x
    if func is ScientificFunction.PERCENT:
        return x / 100
    if func is ScientificFunction.PI:
        return math.pi
    if func is ScientificFunction.E:
        return math.e
    if func is ScientificFunction.FACTORIAL:
        return factorial(x)
    if func is ScientificFunction.ANS:
        return last_result if last_result is not None else 0.0

    raise ValueError(f"Unhandled function: {func}")


def apply_operator(operator, left, right):
    """Evaluate a pending binary operation"""
    operator = BinaryOperator(operator)

    if operator is BinaryOperator.ADD:
        return left + right
    if operator is BinaryOperator.SUBTRACT:
        return left - right
    if operator is BinaryOperator.MULTIPLY:
        return left * right
    if operator is BinaryOperator.DIVIDE:
        return divide(left, right)
    if operator is BinaryOperator.POWER:
        return power(left, right)
    if operator is BinaryOperator.REVERSE_POWER:
        return power(right, left)
    if operator is BinaryOperator.COMBINATION:
        return combination(left, right)
    if operator is BinaryOperator.PERMUTATION:
        return permutation(left, right)

    raise ValueError(f"Unhandled operator: {operator}")
