"""Reading and validating whole numbers of fixed C integer widths."""

from __future__ import annotations

import re
from enum import Enum

from chad_input.console import (
    Console,
    NotANumberError,
    OutOfRangeError,
    OverlengthError,
    RangeCheckResult,
    is_input_number_after_conversion,
    is_input_within_length,
)

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_WIDTHS = {"int": 32, "long int": 64, "long long int": 64}


class IntKind(Enum):
    """Integer widths a value may be read as."""

    INT = "int"
    LONG = "long int"
    LONG_LONG = "long long int"

    @property
    def bits(self) -> int:
        return _WIDTHS[self.value]

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1


def parse_integer(text: str) -> tuple[int, str]:
    """Parse a leading base-10 integer; return it and the unparsed rest.

    Leading whitespace and a sign are accepted. When no digits are found the
    value is 0 and the rest is the whole text.
    """
    match = _INTEGER.match(text)
    if match is None:
        return 0, text
    return int(match.group(1)), text[match.end():]


def format_prompt_integer(name: str, is_restricted: bool, min_value: int, max_value: int) -> str:
    if is_restricted:
        return f"Введіть {name} (від {min_value} до {max_value}): "
    return f"Введіть {name}: "


def format_range_error_integer(
    name: str, result: RangeCheckResult, min_value: int, max_value: int
) -> str:
    """Message describing a failed range check; empty for a value in range."""
    if result is RangeCheckResult.LESS:
        return f"{name} має бути більший-рівний {min_value}.\n"
    if result is RangeCheckResult.LESS_EQUAL:
        return f"{name} має бути більший за {min_value}.\n"
    if result is RangeCheckResult.GREATER:
        return f"{name} має бути менший-рівний {max_value}.\n"
    if result is RangeCheckResult.GREATER_EQUAL:
        return f"{name} має бути менший за {max_value}.\n"
    return ""


def validate_range_integer(
    value: int,
    min_value: int,
    max_value: int,
    is_min_included: bool,
    is_max_included: bool,
) -> RangeCheckResult:
    if is_min_included and value < min_value:
        return RangeCheckResult.LESS
    if not is_min_included and value <= min_value:
        return RangeCheckResult.LESS_EQUAL
    if is_max_included and value > max_value:
        return RangeCheckResult.GREATER
    if not is_max_included and value >= max_value:
        return RangeCheckResult.GREATER_EQUAL
    return RangeCheckResult.WITHIN_RANGE


def validate_overflow_integer(value: int, kind: IntKind) -> RangeCheckResult:
    """Check that the value fits the integer width."""
    if value > kind.max_value:
        return RangeCheckResult.GREATER
    if value < kind.min_value:
        return RangeCheckResult.LESS
    return RangeCheckResult.WITHIN_RANGE


def _fail_range(
    console: Console, name: str, result: RangeCheckResult, min_value: int, max_value: int
) -> OutOfRangeError:
    message = format_range_error_integer(name, result, min_value, max_value)
    console.show_error(message)
    return OutOfRangeError(message, result)


def read_integer_and_validate(
    console: Console,
    kind: IntKind,
    full_name: str,
    short_name: str,
    max_char_count: int,
    is_restricted: bool,
    max_value: int,
    min_value: int,
    is_max_included: bool,
    is_min_included: bool,
) -> int:
    """Prompt for an integer, read one line and return the validated value."""
    console.write(format_prompt_integer(full_name, is_restricted, min_value, max_value))

    text = console.read_input(max_char_count, full_name)

    if not is_input_within_length(text):
        message = console.show_error_overlength(full_name, max_char_count)
        console.clear_stdin()
        raise OverlengthError(message)

    value, rest = parse_integer(text)
    if not is_input_number_after_conversion(rest, text):
        raise NotANumberError(console.show_error_not_number(full_name))

    overflow = validate_overflow_integer(value, kind)
    if overflow is not RangeCheckResult.WITHIN_RANGE:
        raise _fail_range(console, short_name, overflow, min_value, max_value)

    if is_restricted:
        check = validate_range_integer(
            value, min_value, max_value, is_min_included, is_max_included
        )
        if check is not RangeCheckResult.WITHIN_RANGE:
            raise _fail_range(console, full_name, check, min_value, max_value)

    return value