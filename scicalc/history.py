"""
Bounded, newest-first log of completed calculations.
"""

from dataclasses import dataclass, field
from datetime import datetime

HISTORY_CAPACITY = 20


@dataclass(frozen=True)
class HistoryEntry:
    """A single completed evaluation"""
    expression: str
    result: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self):
        return f"{self.expression} = {self.result}"


class HistoryLog:
    """History of calculations, newest first"""

    def __init__(self, capacity=HISTORY_CAPACITY):
        self.capacity = capacity
        self.entries = []

    def add(self, expression, result):
        """Record a calculation and return the new entry"""
        entry = HistoryEntry(expression, result)

        # Insert at the top
        self.entries.insert(0, entry)

        # Keep only the last `capacity` items
        if len(self.entries) > self.capacity:
            self.entries.pop()

        return entry

    def clear(self):
        """Clear all history"""
        self.entries.clear()

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]
