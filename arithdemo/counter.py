"""Increment and decrement a mutable integer cell."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class IntCell:
    """A mutable holder for one integer."""

    value: int = 0


def increment_value(cell: IntCell | None) -> int:
    """Add one to ``cell`` and return the new value.

    A missing cell is a precondition failure and raises ValueError.
    """
    if cell is None:
        raise ValueError("cell must not be None")
    cell.value += 1
    return cell.value


def decrement_value(cell: IntCell | None) -> int | None:
    """Subtract one from ``cell`` if given and return the new value.

    A missing cell is silently ignored and None is returned.
    """
    if cell is None:
        return None
    cell.value -= 1
    return cell.value