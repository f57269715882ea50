"""Reading and validating floating-point numbers of C float widths."""

from __future__ import annotations

import math
import re
import struct
import sys
from enum import Enum
from typing import NamedTuple

from chad_input.console import (
    Console,
    NotANumberError,
    OutOfRangeError,
    OverlengthError,
    PrecisionDeclinedError,
    RangeCheckResult,
    is_input_number_after_conversion,
    is_input_within_length,
    is_numeric_input_precise,
    replace_commas_with_dots,
)

_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<number>[+-]?(?:"
    r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
    r"|(?P<special>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?|[nN][aA][nN])"
    r"|(?P<decimal>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r"))"
)


class _Limits(NamedTuple):
    epsilon: float
    min_abs: float
    max_abs: float
    digits: int


_FLT_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]

# Long doubles are held as Python floats, so their range is the float's range.
_LIMITS = {
    "float": _Limits(2.0**-23, 2.0**-126, _FLT_MAX, 6),
    "double": _Limits(
        sys.float_info.epsilon, sys.float_info.min, sys.float_info.max, sys.float_info.dig
    ),
    "long double": _Limits(2.0**-63, sys.float_info.min, sys.float_info.max, 18),
}


class FloatKind(Enum):
    """Floating-point widths a value may be read as."""

    FLOAT = "float"
    DOUBLE = "double"
    LONG_DOUBLE = "long double"

    @property
    def epsilon(self) -> float:
        return _LIMITS[self.value].epsilon

    @property
    def min_abs(self) -> float:
        return _LIMITS[self.value].min_abs

    @property
    def max_abs(self) -> float:
        return _LIMITS[self.value].max_abs

    @property
    def digits(self) -> int:
        return _LIMITS[self.value].digits


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    if not math.isfinite(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _round(kind: FloatKind, value: float) -> float:
    return _f32(value) if kind is FloatKind.FLOAT else float(value)


def _trunc(value: float) -> float:
    return float(math.trunc(value)) if math.isfinite(value) else value


def _mantissa_is_zero(match: re.Match[str]) -> bool:
    if match.group("hex") is not None:
        mantissa = re.split(r"[pP]", match.group("hex"))[0][2:]
    else:
        mantissa = re.split(r"[eE]", match.group("decimal"))[0]
    return all(char in "0." for char in mantissa)


def parse_float(text: str, kind: FloatKind) -> tuple[float, str, bool]:
    """Parse a leading floating-point number.

    Returns the value, the unparsed rest of the text and whether the number
    fell outside the representable range. When nothing is parsed the value
    is 0.0 and the rest is the whole text.
    """
    match = _FLOAT.match(text)
    if match is None:
        return 0.0, text, False

    number = match.group("number")
    rest = text[match.end():]

    if match.group("special") is not None:
        return _round(kind, float(number)), rest, False

    if match.group("hex") is not None:
        try:
            value = float.fromhex(number)
        except OverflowError:
            value = -math.inf if number.startswith("-") else math.inf
    else:
        value = float(number)
    value = _round(kind, value)

    if math.isinf(value):
        out_of_range = True
    elif abs(value) < kind.min_abs:
        out_of_range = value != 0.0 or not _mantissa_is_zero(match)
    else:
        out_of_range = False
    return value, rest, out_of_range


def format_prompt_float(name: str, is_restricted: bool, min_value: float, max_value: float) -> str:
    if is_restricted:
        return f"Введіть {name} (від {min_value:g} до {max_value:g}): "
    return f"Введіть {name}: "


def format_range_error_float(
    name: str, result: RangeCheckResult, min_value: float, max_value: float
) -> str:
    """Message describing a failed range check; empty for a value in range."""
    if result is RangeCheckResult.LESS:
        return f"{name} має бути більший-рівний {min_value:g}.\n"
    if result is RangeCheckResult.LESS_EQUAL:
        return f"{name} має бути більший за {min_value:g}.\n"
    if result is RangeCheckResult.GREATER:
        return f"{name} має бути менший-рівний {max_value:g}.\n"
    if result is RangeCheckResult.GREATER_EQUAL:
        return f"{name} має бути менший за {max_value:g}.\n"
    return ""


def validate_range_float(
    value: float,
    min_value: float,
    max_value: float,
    is_min_included: bool,
    is_max_included: bool,
    kind: FloatKind = FloatKind.DOUBLE,
) -> RangeCheckResult:
    """Compare against the bounds, allowing the kind's epsilon as tolerance."""
    value = _round(kind, value)
    min_value = _round(kind, min_value)
    max_value = _round(kind, max_value)
    eps = kind.epsilon

    if is_min_included and value < _round(kind, min_value - eps):
        return RangeCheckResult.LESS
    if not is_min_included and value <= _round(kind, min_value + eps):
        return RangeCheckResult.LESS_EQUAL
    if is_max_included and value > _round(kind, max_value + eps):
        return RangeCheckResult.GREATER
    if not is_max_included and value >= _round(kind, max_value - eps):
        return RangeCheckResult.GREATER_EQUAL
    return RangeCheckResult.WITHIN_RANGE


def validate_overflow_float(
    value: float, out_of_range: bool, kind: FloatKind = FloatKind.DOUBLE
) -> RangeCheckResult:
    """Classify a parse that went out of range as overflow or underflow."""
    if out_of_range:
        magnitude = abs(_round(kind, value))
        if magnitude == math.inf:
            return RangeCheckResult.GREATER_EQUAL
        if magnitude < kind.min_abs:
            return RangeCheckResult.LESS_EQUAL
    return RangeCheckResult.WITHIN_RANGE


def truncate_to_precision(
    num: float, decimal_places: int, kind: FloatKind = FloatKind.DOUBLE
) -> float:
    """Drop digits past ``decimal_places`` without rounding."""
    factor = _round(kind, 10.0**decimal_places)
    product = _round(kind, _round(kind, num) * factor)
    return _round(kind, _trunc(product) / factor)


def format_truncated(num: float, decimal_places: int, kind: FloatKind = FloatKind.DOUBLE) -> str:
    value = truncate_to_precision(num, decimal_places, kind)
    return f"{value:.{decimal_places}f}"


def _fail_range(
    console: Console, name: str, result: RangeCheckResult, min_value: float, max_value: float
) -> OutOfRangeError:
    message = format_range_error_float(name, result, min_value, max_value)
    console.show_error(message)
    return OutOfRangeError(message, result)


def read_float_and_validate(
    console: Console,
    kind: FloatKind,
    full_name: str,
    short_name: str,
    max_char_count: int,
    is_restricted: bool,
    max_value: float,
    min_value: float,
    is_max_included: bool,
    is_min_included: bool,
) -> float:
    """Prompt for a number, read one line and return the validated value."""
    min_value = _round(kind, min_value)
    max_value = _round(kind, max_value)

    console.stdout.write(format_prompt_float(full_name, is_restricted, min_value, max_value))

    text = console.read_input(max_char_count, full_name)

    if not is_input_within_length(text):
        message = console.show_error_overlength(full_name, max_char_count)
        console.clear_stdin()
        raise OverlengthError(message)

    text = replace_commas_with_dots(text)

    value, rest, out_of_range = parse_float(text, kind)
    if not is_input_number_after_conversion(rest, text):
        raise NotANumberError(console.show_error_not_number(full_name))

    overflow = validate_overflow_float(value, out_of_range, kind)
    if overflow is not RangeCheckResult.WITHIN_RANGE:
        raise _fail_range(console, short_name, overflow, min_value, max_value)

    if is_restricted:
        check = validate_range_float(
            value, min_value, max_value, is_min_included, is_max_included, kind
        )
        if check is not RangeCheckResult.WITHIN_RANGE:
            raise _fail_range(console, full_name, check, min_value, max_value)

    if not is_numeric_input_precise(text, kind.digits):
        message = console.show_warning_not_precise(kind.digits)
        if not console.ask_repeat():
            raise PrecisionDeclinedError(message)

    return value