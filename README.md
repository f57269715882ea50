# chad-input

Read numbers from a console and check them before your program uses them.
Every read goes through the same steps:

1. write a prompt, showing the allowed range when the read is restricted;
2. read one line, rejecting it if it is longer than `max_char_count`
   characters (the rest of that line is then discarded);
3. parse the whole line as a number; for floating-point reads, commas are
   first turned into dots, so `3,14` reads as `3.14`;
4. reject values that do not fit the chosen numeric kind (overflow, and for
   floating-point kinds also underflow);
5. if the read is restricted, check the value against a minimum and a
   maximum, each inclusive or exclusive;
6. for floating-point reads, warn when the line holds more digits than the
   kind keeps, and ask the user whether to go on.

Prompts and messages are in Ukrainian. Errors, warnings and success messages
are coloured with ANSI escape codes; prompts are plain.

## Installation

```
pip install chad-input
```

The package has no dependencies outside the standard library.

## The console

`chad_input.console.Console(stdin, stdout)` wraps the two text streams used
for reading and writing. Both default to `sys.stdin` and `sys.stdout`, so any
`io.StringIO` can stand in for them in tests.

It offers `show_error`, `show_warning` and `show_success` for coloured
messages, `read_input(max_char_count, name)` to read one line,
`clear_stdin()` to discard the rest of a line, and `ask_repeat()`, which
returns `True` only when the user answers with a lone `+`.

## Reading an integer

```python
import sys

from chad_input.console import Console, InputError
from chad_input.integers import IntKind, read_integer_and_validate

console = Console(sys.stdin, sys.stdout)

try:
    age = read_integer_and_validate(
        console, IntKind.INT,
        "вік", "вік",
        10,            # max_char_count
        True,          # is_restricted
        120, 0,        # max_value, min_value
        True, True,    # is_max_included, is_min_included
    )
except InputError:
    age = None
```

The line must be a base-10 integer, optionally preceded by whitespace and a
sign, and followed directly by the newline: `123abc` or `123 ` are rejected.

`IntKind` picks the width the value must fit: `IntKind.INT` (32 bits),
`IntKind.LONG` and `IntKind.LONG_LONG` (64 bits). Each kind exposes
`bits`, `min_value` and `max_value`.

The pieces are available on their own too: `parse_integer`,
`validate_overflow_integer`, `validate_range_integer`,
`format_prompt_integer` and `format_range_error_integer`.

## Reading a floating-point value

```python
from chad_input.floats import FloatKind, format_truncated, read_float_and_validate

value = read_float_and_validate(
    console, FloatKind.DOUBLE,
    "температура", "t",
    20, True, 100.0, -50.0, True, True,
)
print(format_truncated(value, 2, FloatKind.DOUBLE))
```

`FloatKind` selects `FLOAT`, `DOUBLE` or `LONG_DOUBLE`. Each kind has its own
`epsilon` (the tolerance used at the range bounds), `min_abs` and `max_abs`
(the underflow and overflow limits) and `digits` (how many digits may be
entered before the precision warning). `FLOAT` values are rounded to single
precision. `LONG_DOUBLE` values are held as Python floats, so their range is
that of a double; only their tolerance and digit count differ.

`parse_float` accepts decimal and hexadecimal notation as well as `inf`,
`infinity` and `nan`, and reports whether the number fell outside the
representable range.

`truncate_to_precision(num, decimal_places, kind)` cuts a value to a number
of decimal places without rounding, and `format_truncated` returns it as text
with exactly that many decimals.

Also available: `validate_overflow_float`, `validate_range_float`,
`format_prompt_float` and `format_range_error_float`.

## Range checks

`validate_range_integer` and `validate_range_float` return a
`RangeCheckResult`:

| Result          | Meaning                                      |
|-----------------|----------------------------------------------|
| `LESS`          | below an inclusive minimum                   |
| `LESS_EQUAL`    | at or below an exclusive minimum             |
| `GREATER`       | above an inclusive maximum                   |
| `GREATER_EQUAL` | at or above an exclusive maximum             |
| `WITHIN_RANGE`  | the value is allowed                         |

Overflow is reported as `GREATER` for integers and `GREATER_EQUAL` for
floating-point kinds; underflow as `LESS` for integers and `LESS_EQUAL` for
floating-point kinds.

## Errors

Every failed read raises a subclass of `chad_input.console.InputError`. By
then the message has already been written to the console.

| Exception                | Raised when                                        |
|--------------------------|----------------------------------------------------|
| `ReadError`              | no line could be read (end of input)               |
| `OverlengthError`        | the line is longer than `max_char_count`           |
| `NotANumberError`        | the line is not a number, or has extra characters  |
| `OutOfRangeError`        | overflow, underflow, or outside the allowed range  |
| `PrecisionDeclinedError` | too many digits, and the user did not answer `+`   |

`OutOfRangeError` carries the failing `RangeCheckResult` in its `result`
attribute.

## Text helpers

`chad_input.console` also provides the individual checks on a line of input:
`replace_commas_with_dots`, `is_input_floating_point`,
`is_numeric_input_precise`, `is_input_within_length` and
`is_input_number_after_conversion`.

## What this package does not do

It is a library only: there is no command-line program. It reads one value
per call and does not loop until valid input arrives; retrying is up to the
caller.

## Tests

```
pip install -e ".[test]"
pytest
```