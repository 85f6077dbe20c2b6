"""
Calculator state record and the closed sets of operators it works with.

A CalculatorState is owned by exactly one calculator; the handlers in
scicalc.engine receive it explicitly and mutate it in place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .history import HistoryLog


class SymbolEnum(Enum):
    """Enum looked up by symbol, by member name, or by one of its aliases"""

    @classmethod
    def _aliases(cls):
        return {}

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        alias = cls._aliases().get(value)
        if alias is not None:
            return cls(alias)
        return cls.__members__.get(value.upper())


class AngleMode(Enum):
    DEG = "deg"
    RAD = "rad"

    def toggled(self):
        return AngleMode.RAD if self is AngleMode.DEG else AngleMode.DEG


class BinaryOperator(SymbolEnum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "x^y"
    REVERSE_POWER = "y^x"
    COMBINATION = "nCr"
    PERMUTATION = "nPr"

    @classmethod
    def _aliases(cls):
        return {"−": "-", "*": "×", "/": "÷", "^": "x^y"}


class Parenthesis(Enum):
    OPEN = "("
    CLOSE = ")"


class MemoryOperation(SymbolEnum):
    CLEAR = "MC"
    RECALL = "MR"
    ADD = "M+"
    SUBTRACT = "M-"
    STORE = "STO"
    RECALL_VARIABLE = "RCL"

    @classmethod
    def _aliases(cls):
        return {"M−": "M-"}


DEFAULT_VARIABLE = "A"


@dataclass
class PendingOperation:
    """Operator waiting for its right operand"""
    operator: BinaryOperator
    left: float


@dataclass
class CalculatorState:
    display: str = "0"
    pending: Optional[PendingOperation] = None
    awaiting_operand: bool = False
    memory: float = 0.0
    variables: Dict[str, float] = field(default_factory=dict)
    angle_mode: AngleMode = AngleMode.DEG
    parentheses: int = 0
    last_result: Optional[float] = None
    history: HistoryLog = field(default_factory=HistoryLog)
