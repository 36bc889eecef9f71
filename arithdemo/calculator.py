"""Evaluate a left-to-right chain of integer binary operations."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

BinaryOperator = Callable[[int, int], int]

_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class CalculatorError(Exception):
    """Raised when an expression cannot be evaluated."""


@dataclass(frozen=True)
class OperationResult:
    """Final value of an expression and the value after each operation."""

    value: int
    intermediate_values: tuple[int, ...] = ()


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return ``a * b``."""
    return a * b


def divide(a: int, b: int) -> int:
    """Return ``a / b`` truncated toward zero.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


OPERATORS: Mapping[str, BinaryOperator] = MappingProxyType(
    {"+": add, "-": subtract, "*": multiply, "/": divide}
)


def find_operator_function(
    operators: Mapping[str, BinaryOperator] | None, operator_string: str | None
) -> BinaryOperator | None:
    """Return the function bound to ``operator_string``, or None if absent."""
    if operators is None:
        raise ValueError("operators must not be None")
    if operator_string is None:
        raise ValueError("operator_string must not be None")
    return operators.get(operator_string)


def _parse_int(text: str) -> int | None:
    """Parse a leading decimal integer, ignoring trailing text."""
    match = _INTEGER_PREFIX.match(text)
    return int(match.group(1)) if match else None


def perform_operation(
    arguments: Sequence[str] | None,
    operators: Mapping[str, BinaryOperator] | None = OPERATORS,
) -> OperationResult:
    """Evaluate ``arguments`` as ``value (operator value)*`` with no precedence.

    Raises CalculatorError when a value cannot be parsed, an operator is
    unknown or an operator lacks its right-hand value.
    """
    if arguments is None:
        raise ValueError("arguments must not be None")
    if operators is None:
        raise ValueError("operators must not be None")
    if not arguments:
        return OperationResult(0)

    value = _parse_int(arguments[0])
    if value is None:
        raise CalculatorError(
            f"Unable to parse integer from argument {arguments[0]}"
        )

    intermediate: list[int] = []
    position = 1
    while position < len(arguments):
        operator_string = arguments[position]
        function = find_operator_function(operators, operator_string)
        if function is None:
            raise CalculatorError(
                f"Unknown operator {operator_string}, argument {position}"
            )
        position += 1
        if position == len(arguments):
            raise CalculatorError(
                f"Binary operator {operator_string} missing argument"
            )
        other_value = _parse_int(arguments[position])
        if other_value is None:
            raise CalculatorError(
                f"Unable to parse integer {arguments[position]} "
                f"of argument {position}"
            )
        position += 1
        value = function(value, other_value)
        intermediate.append(value)

    return OperationResult(value, tuple(intermediate))


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the command-line expression and print each step."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        result = perform_operation(args, OPERATORS)
    except CalculatorError as error:
        print(error, file=sys.stderr)
        return 1

    if args:
        print(args[0])
        steps = zip(args[1::2], args[2::2], result.intermediate_values)
        for operator_string, operand, step_value in steps:
            print(f"  {operator_string} {operand} = {step_value}")
        print(f"= {result.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())