# arithdemo

A small integer calculator that evaluates expressions strictly from left to
right, with no operator precedence, together with two tiny helper modules:
a status-code lookup and a mutable integer counter.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
arithdemo 1 + 3 '*' 10
```

prints the first value, each intermediate step and the final result:

```
1
  + 3 = 4
  * 10 = 40
= 40
```

With no arguments nothing is printed and the exit status is 0.

Supported operators are `+`, `-`, `*` and `/` (integer division truncating
toward zero). Each value is read from its leading decimal integer, so
`12abc` counts as `12`. An unknown operator, a missing operand or a value that
does not start with an integer is reported on standard error, and the command
exits with status 1. Dividing by zero raises `ZeroDivisionError`.

## Library

### Calculator

```python
from arithdemo.calculator import perform_operation, CalculatorError

result = perform_operation(["1", "+", "3", "*", "10"])
print(result.value)                # 40
print(result.intermediate_values)  # (4, 40)

try:
    perform_operation(["1", "+"])
except CalculatorError as exc:
    print(exc)                     # Binary operator + missing argument
```

`perform_operation(arguments, operators=OPERATORS)` returns an
`OperationResult`, a frozen dataclass with `value` and the tuple
`intermediate_values`. An empty argument list gives a value of 0. The
`operators` argument is a mapping from operator strings to two-argument
functions, so you can supply your own; `OPERATORS` holds the four built-in
ones. Passing `None` for `arguments` or `operators` raises `ValueError`.

`find_operator_function(operators, operator_string)` looks an operator up and
returns `None` when it is not found; it raises `ValueError` if either argument
is `None`.

The functions `add`, `subtract`, `multiply` and `divide` are available
directly. `divide` truncates toward zero and raises `ZeroDivisionError` for a
zero divisor.

`main(argv=None)` runs the command line shown above and returns the exit
status; without an argument it reads `sys.argv`.

### Status codes

```python
from arithdemo.status_codes import get_status_code_string, string_to_status_code

get_status_code_string(0)                     # "Address not found"
string_to_status_code("Connection dropped")   # 1
```

The known descriptions are `"Address not found"`, `"Connection dropped"` and
`"Connection timed out"`, numbered 0 to 2. `get_status_code_string` raises
`IndexError` for a code outside that range, and `string_to_status_code` raises
`ValueError` for an unknown description.

### Counter cells

```python
from arithdemo.counter import IntCell, increment_value, decrement_value

cell = IntCell(5)
increment_value(cell)   # returns 6, cell.value == 6
decrement_value(cell)   # returns 5, cell.value == 5
```

`increment_value` insists on being given a cell and raises `ValueError` for
`None`. `decrement_value` quietly does nothing when given `None` and returns
`None`.