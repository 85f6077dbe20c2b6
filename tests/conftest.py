import pytest

from scicalc import ScientificCalculator


@pytest.fixture
def calc():
    return ScientificCalculator()


def enter(calc, text):
    """Type a number into the calculator one character at a time"""
    for ch in text:
        if ch == ".":
            calc.append_decimal()
        else:
            calc.append_digit(ch)
