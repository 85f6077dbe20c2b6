"""
Number parsing, display formatting and IEEE-754 style arithmetic helpers.

Python's float operators and math module raise where a pocket calculator
should just show Infinity or NaN. The helpers here never raise for numeric
input.
"""

import math
import re
from decimal import Decimal

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INFINITY_PREFIX = re.compile(r"\s*([+-]?)Infinity")


def parse_number(text):
    """Parse the leading number of text, falling back to 0"""
    if text is None:
        return 0.0

    match = _NUMBER_PREFIX.match(text)
    if match:
        return float(match.group(1))

    match = _INFINITY_PREFIX.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf

    if text.strip().startswith("NaN"):
        return math.nan

    return 0.0


def format_number(value) -> str:
    """Format a result the way the display shows it (5, 0.25, 1e-7, Infinity, NaN)"""
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Also folds -0.0
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        if abs(value) < 2 ** 53:
            return str(int(value))
        # Shortest digits, not the exact binary value
        return format(Decimal(repr(value)).normalize(), "f")

    text = repr(value)
    if "e" in text:
        if 1e-6 <= abs(value) < 1e-4:
            # Shortest digits, positional notation
            return format(Decimal(text), "f")
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"
    return text


def group_thousands(text):
    """Insert thousands separators into the integer part of a display string"""
    match = re.match(r"^(-?)(\d+)(.*)$", text)
    if not match:
        return text

    sign, digits, rest = match.groups()
    # Exponent forms are left alone
    if "e" in rest:
        return text
    return f"{sign}{int(digits):,}{rest}"


def divide(a, b):
    """Divide with IEEE-754 results for a zero divisor"""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        # Sign of a zero divisor matters: 1 / -0 is -Infinity
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def power(base, exponent):
    """Raise base to exponent, mapping domain errors to NaN and overflow to Infinity"""
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0 and exponent < 0:
            # 0 ** -n
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(x):
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1
