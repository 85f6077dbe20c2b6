"""
Scientific calculator core: accumulator, pending binary operation,
scientific functions, memory and history.
"""

from .engine import ScientificCalculator
from .functions import ScientificFunction, combination, factorial, permutation
from .history import HistoryEntry, HistoryLog
from .state import AngleMode, BinaryOperator, CalculatorState, MemoryOperation

__all__ = [
    'ScientificCalculator', 'CalculatorState', 'ScientificFunction',
    'BinaryOperator', 'MemoryOperation', 'AngleMode',
    'HistoryEntry', 'HistoryLog',
    'factorial', 'combination', 'permutation',
]
