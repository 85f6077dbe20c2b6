"""
Keyboard and button adapter: turns UI input into core actions.

The window never calls the calculator directly. Buttons and key presses are
both translated into CoreAction values and run through dispatch().
"""

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import Qt

from .state import BinaryOperator, MemoryOperation


@dataclass(frozen=True)
class CoreAction:
    name: str
    argument: Optional[str] = None


DIGIT = "digit"
DECIMAL = "decimal"
OPERATOR = "operator"
EVALUATE = "evaluate"
FUNCTION = "function"
MEMORY = "memory"
TOGGLE_ANGLE = "toggle_angle"
CLEAR_ALL = "clear_all"
CLEAR_ENTRY = "clear_entry"
BACKSPACE = "backspace"

# Typed characters that map straight to an action
TEXT_ACTIONS = {
    ".": CoreAction(DECIMAL),
    "+": CoreAction(OPERATOR, BinaryOperator.ADD.value),
    "-": CoreAction(OPERATOR, BinaryOperator.SUBTRACT.value),
    "*": CoreAction(OPERATOR, BinaryOperator.MULTIPLY.value),
    "/": CoreAction(OPERATOR, BinaryOperator.DIVIDE.value),
    "^": CoreAction(OPERATOR, BinaryOperator.POWER.value),
    "(": CoreAction(OPERATOR, "("),
    ")": CoreAction(OPERATOR, ")"),
    "=": CoreAction(EVALUATE),
    "!": CoreAction(FUNCTION, "n!"),
    "A": CoreAction(FUNCTION, "Ans"),
    "R": CoreAction(MEMORY, MemoryOperation.RECALL.value),
}

KEY_ACTIONS = {
    Qt.Key.Key_Return: CoreAction(EVALUATE),
    Qt.Key.Key_Enter: CoreAction(EVALUATE),
    Qt.Key.Key_Escape: CoreAction(CLEAR_ALL),
    Qt.Key.Key_Backspace: CoreAction(BACKSPACE),
    Qt.Key.Key_Delete: CoreAction(CLEAR_ENTRY),
}


def action_for_key(key, text=""):
    """Map a key press to a CoreAction, or None if the key is not bound"""
    if key in KEY_ACTIONS:
        return KEY_ACTIONS[key]

    text = (text or "").upper()
    if len(text) != 1:
        return None
    if text.isdigit():
        return CoreAction(DIGIT, text)
    return TEXT_ACTIONS.get(text)


def dispatch(calculator, action):
    """Run a CoreAction against a ScientificCalculator"""
    if action.name == DIGIT:
        calculator.append_digit(action.argument)
    elif action.name == DECIMAL:
        calculator.append_decimal()
    elif action.name == OPERATOR:
        calculator.set_operator(action.argument)
    elif action.name == EVALUATE:
        calculator.evaluate()
    elif action.name == FUNCTION:
        calculator.apply_function(action.argument)
    elif action.name == MEMORY:
        calculator.memory_op(action.argument)
    elif action.name == TOGGLE_ANGLE:
        calculator.toggle_angle_mode()
    elif action.name == CLEAR_ALL:
        calculator.clear_all()
    elif action.name == CLEAR_ENTRY:
        calculator.clear_entry()
    elif action.name == BACKSPACE:
        calculator.backspace()
    else:
        raise ValueError(f"Unknown action: {action.name}")
