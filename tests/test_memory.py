import pytest

from scicalc import MemoryOperation
from tests.conftest import enter


def test_memory_add_then_recall(calc):
    enter(calc, "7")
    calc.memory_op("M+")
    calc.memory_op("M+")
    calc.clear_all()
    calc.memory_op("MR")
    assert calc.get_display() == "14"


def test_memory_subtract(calc):
    enter(calc, "3")
    calc.memory_op("M-")
    assert calc.memory == -3
    assert calc.get_display() == "3"


def test_memory_clear_resets_register(calc):
    enter(calc, "9")
    calc.memory_op("M+")
    calc.memory_op("MC")
    calc.memory_op("MR")
    assert calc.get_display() == "0"


def test_recall_replaces_on_next_digit(calc):
    enter(calc, "6")
    calc.memory_op("M+")
    calc.memory_op("MR")
    calc.append_digit("2")
    assert calc.get_display() == "2"


def test_memory_does_not_touch_pending_operation(calc):
    enter(calc, "4")
    calc.memory_op("M+")
    calc.set_operator("+")
    enter(calc, "5")
    calc.memory_op("M+")
    calc.memory_op("MC")
    assert calc.pending_operator == "+"
    calc.evaluate()
    assert calc.get_display() == "9"


def test_recall_feeds_right_operand(calc):
    enter(calc, "10")
    calc.memory_op("M+")
    calc.clear_all()
    enter(calc, "5")
    calc.set_operator("×")
    calc.memory_op("MR")
    calc.evaluate()
    assert calc.get_display() == "50"


def test_memory_operations_are_not_logged(calc):
    enter(calc, "1")
    for name in ("M+", "M-", "MR", "MC", "STO", "RCL"):
        calc.memory_op(name)
    assert calc.get_history() == []


def test_store_and_recall_variable(calc):
    enter(calc, "2.5")
    calc.memory_op("STO")
    calc.clear_all()
    calc.memory_op("RCL")
    assert calc.get_display() == "2.5"


def test_recall_unset_variable_is_zero(calc):
    enter(calc, "8")
    calc.memory_op("RCL")
    assert calc.get_display() == "0"


def test_named_variables_are_independent(calc):
    enter(calc, "1")
    calc.memory_op("STO", "A")
    calc.clear_entry()
    enter(calc, "2")
    calc.memory_op("STO", "B")
    calc.memory_op("RCL", "A")
    assert calc.get_display() == "1"
    calc.memory_op("RCL", "B")
    assert calc.get_display() == "2"


def test_memory_operation_lookup():
    assert MemoryOperation("M+") is MemoryOperation.ADD
    assert MemoryOperation("store") is MemoryOperation.STORE
    assert MemoryOperation("M−") is MemoryOperation.SUBTRACT


def test_unknown_memory_operation_rejected(calc):
    with pytest.raises(ValueError):
        calc.memory_op("MS")
