"""
Scientific calculator core.

The handlers in this module take the CalculatorState they act on as their
first argument and run to completion synchronously. ScientificCalculator
bundles one state record with the same operations for a UI shell to call.

Evaluation is strictly left-to-right: 2 + 3 × 4 = 20. Parentheses are only
echoed on the display and counted, never evaluated.
"""

import math

from .functions import ScientificFunction, apply_function as _compute_function, apply_operator
from .numeric import format_number, parse_number
from .state import (
    DEFAULT_VARIABLE,
    BinaryOperator,
    CalculatorState,
    MemoryOperation,
    Parenthesis,
    PendingOperation,
)


def current_value(state):
    """Numeric value of the display"""
    return parse_number(state.display)


def _show(state, value):
    state.display = format_number(value)


# --- Input Accumulator ---
def append_digit(state, digit):
    """Handle number button press"""
    digit = str(digit)
    if len(digit) != 1 or not digit.isdigit():
        raise ValueError(f"Not a digit: {digit!r}")

    if state.awaiting_operand:
        state.display = digit
        state.awaiting_operand = False
    elif state.display == "0":
        state.display = digit
    else:
        state.display += digit


def append_decimal(state):
    """Handle decimal point press"""
    if state.awaiting_operand:
        state.display = "0."
        state.awaiting_operand = False
    elif "." not in state.display:
        state.display += "."


def backspace(state):
    """Delete the last character of the display"""
    if not math.isfinite(current_value(state)):
        # Infinity and NaN are not edited a letter at a time
        state.display = "0"
        return

    removed = state.display[-1:]
    remaining = state.display[:-1]

    if removed == "(":
        state.parentheses = max(0, state.parentheses - 1)
    elif removed == ")":
        state.parentheses += 1

    state.display = remaining if remaining not in ("", "-") else "0"


def clear_entry(state):
    """Clear current entry"""
    state.display = "0"


def clear_all(state):
    """Clear all"""
    state.display = "0"
    state.pending = None
    state.awaiting_operand = False
    state.parentheses = 0


# --- Binary Operations ---
def set_operator(state, symbol):
    """Handle operation button press"""
    if symbol in (Parenthesis.OPEN, Parenthesis.OPEN.value):
        open_parenthesis(state)
        return
    if symbol in (Parenthesis.CLOSE, Parenthesis.CLOSE.value):
        close_parenthesis(state)
        return

    operator = BinaryOperator(symbol)
    value = current_value(state)

    if state.pending is not None:
        # Chained: no precedence, evaluate what is outstanding first
        value = apply_operator(state.pending.operator, state.pending.left, value)
        _show(state, value)

    state.pending = PendingOperation(operator, value)
    state.awaiting_operand = True


def evaluate(state):
    """Handle equals button press"""
    if state.pending is None:
        # Nothing to do
        return

    left = state.pending.left
    operator = state.pending.operator
    right = current_value(state)
    result = apply_operator(operator, left, right)

    state.history.add(
        f"{format_number(left)} {operator.value} {format_number(right)}",
        format_number(result),
    )

    _show(state, result)
    state.last_result = result
    state.pending = None  # Clear pending op
    state.awaiting_operand = True


def open_parenthesis(state):
    state.parentheses += 1
    state.display += Parenthesis.OPEN.value


def close_parenthesis(state):
    if state.parentheses > 0:
        state.parentheses -= 1
        state.display += Parenthesis.CLOSE.value


# --- Scientific Functions ---
def apply_function(state, name):
    """Apply a unary function to the display value"""
    func = ScientificFunction(name)
    value = current_value(state)
    result = _compute_function(func, value, state.angle_mode, state.last_result)

    state.history.add(f"{func.value}({format_number(value)})", format_number(result))

    _show(state, result)
    state.awaiting_operand = True


def toggle_angle_mode(state):
    """Switch between degrees and radians"""
    state.angle_mode = state.angle_mode.toggled()
    return state.angle_mode


# --- Memory Functions ---
def memory_op(state, name, variable=DEFAULT_VARIABLE):
    """Run a memory or variable operation; never touches the pending operation"""
    operation = MemoryOperation(name)

    if operation is MemoryOperation.CLEAR:
        state.memory = 0.0
    elif operation is MemoryOperation.RECALL:
        _show(state, state.memory)
        state.awaiting_operand = True
    elif operation is MemoryOperation.ADD:
        state.memory += current_value(state)
    elif operation is MemoryOperation.SUBTRACT:
        state.memory -= current_value(state)
    elif operation is MemoryOperation.STORE:
        state.variables[variable] = current_value(state)
    elif operation is MemoryOperation.RECALL_VARIABLE:
        _show(state, state.variables.get(variable, 0.0))
        state.awaiting_operand = True


class ScientificCalculator:
    """One calculator session: a state record plus the operations on it"""

    def __init__(self, state=None):
        self.state = state if state is not None else CalculatorState()

    def append_digit(self, digit):
        append_digit(self.state, digit)

    def append_decimal(self):
        append_decimal(self.state)

    def backspace(self):
        backspace(self.state)

    def set_operator(self, symbol):
        set_operator(self.state, symbol)

    def evaluate(self):
        evaluate(self.state)

    def apply_function(self, name):
        apply_function(self.state, name)

    def memory_op(self, name, variable=DEFAULT_VARIABLE):
        memory_op(self.state, name, variable)

    def toggle_angle_mode(self):
        return toggle_angle_mode(self.state)

    def clear_all(self):
        clear_all(self.state)

    def clear_entry(self):
        clear_entry(self.state)

    def clear_history(self):
        self.state.history.clear()

    def get_display(self) -> str:
        return self.state.display

    def get_history(self):
        """History entries, newest first"""
        return list(self.state.history)

    @property
    def angle_mode(self):
        return self.state.angle_mode

    @property
    def memory(self):
        return self.state.memory

    @property
    def pending_operator(self):
        """Symbol of the operator awaiting its right operand, or None"""
        if self.state.pending is None:
            return None
        return self.state.pending.operator.value

    @property
    def parentheses(self):
        return self.state.parentheses
