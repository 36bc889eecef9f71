import pytest

from arithdemo.counter import IntCell, decrement_value, increment_value


def test_increment_value_none_fails():
    with pytest.raises(ValueError):
        increment_value(None)


def test_increment_value_updates_cell():
    cell = IntCell(1)
    assert increment_value(cell) == 2
    assert cell.value == 2


def test_decrement_value_updates_cell():
    cell = IntCell(5)
    assert decrement_value(cell) == 4
    assert cell.value == 4


def test_decrement_value_none_does_not_fail():
    assert decrement_value(None) is None


def test_increment_then_decrement_restores():
    cell = IntCell(-3)
    increment_value(cell)
    decrement_value(cell)
    assert cell.value == -3


def test_default_cell_is_zero():
    cell = IntCell()
    assert increment_value(cell) == 1