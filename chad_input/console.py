"""Console I/O helpers and the text checks shared by the numeric readers."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

_DIGITS = frozenset("0123456789")
_FLOAT_MARKERS = frozenset(".,eE")

_REPEAT_PROMPT = (
    "Продовжити? Введіть '+' для продовження або будь-яку іншу клавішу, якщо "
    "не погоджуєтесь: "
)


class RangeCheckResult(Enum):
    """Outcome of comparing a value against its allowed bounds."""

    GREATER_EQUAL = "greater_equal"
    GREATER = "greater"
    LESS = "less"
    LESS_EQUAL = "less_equal"
    WITHIN_RANGE = "within_range"


class InputError(Exception):
    """Raised when console input cannot be accepted."""


class ReadError(InputError):
    """Nothing could be read from the input stream."""


class OverlengthError(InputError):
    """The entered line is longer than allowed."""


class NotANumberError(InputError):
    """The entered line is not a number."""


class OutOfRangeError(InputError):
    """The entered number lies outside its allowed bounds."""

    def __init__(self, message: str, result: RangeCheckResult) -> None:
        super().__init__(message)
        self.result = result


class PrecisionDeclinedError(InputError):
    """The user declined to continue with an imprecise number."""


class Console:
    """A pair of text streams used for prompting and reading answers."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _show(self, colour: str, label: str, message: str) -> None:
        self.write(f"\n{colour}{label} {message}{RESET}\n")

    def show_error(self, message: str) -> None:
        self._show(RED, "ПОМИЛКА!", message)

    def show_warning(self, message: str) -> None:
        self._show(YELLOW, "УВАГА!", message)

    def show_success(self, message: str) -> None:
        self._show(GREEN, "ПЕРЕМОГА!", message)

    def show_error_overlength(self, name: str, max_char_count: int) -> str:
        message = f"Довжина {name} в символах має бути меншою за {max_char_count}.\n"
        self.show_error(message)
        return message

    def show_warning_not_precise(self, max_significant_digits: int) -> str:
        message = (
            "Кількість значущих цифр перевищує максимальну дозволену кількість цифр "
            f"{max_significant_digits}. Розрахунки можуть бути неточними"
        )
        self.show_warning(message)
        return message

    def show_error_not_number(self, name: str) -> str:
        message = f"{name} має бути числом і не містити додаткових символів!"
        self.show_error(message)
        return message

    def clear_stdin(self) -> None:
        """Discard the rest of the current input line."""
        self.stdin.readline()

    def read_input(self, max_char_count: int, name: str) -> str:
        """Read at most one line, keeping at most ``max_char_count + 1`` characters."""
        text = self.stdin.readline(max_char_count + 1)
        if not text:
            message = f"Не вдалося прочитати ввід для {name}.\n"
            self.show_error(message)
            raise ReadError(message)
        return text

    def ask_repeat(self) -> bool:
        """Ask whether to continue; only a lone '+' line means yes."""
        self.write(_REPEAT_PROMPT)
        choice = self.stdin.readline(2)
        if not choice:
            self.write("Помилка читання вводу.\n")
            self.clear_stdin()
            return False
        return choice == "+\n"


def replace_commas_with_dots(string: str) -> str:
    return string.replace(",", ".")


def is_input_floating_point(text: str) -> bool:
    return any(char in _FLOAT_MARKERS for char in text)


def is_numeric_input_precise(text: str, max_significant_digits: int) -> bool:
    """Whether the text holds no more decimal digits than allowed."""
    return sum(char in _DIGITS for char in text) <= max_significant_digits


def is_input_within_length(text: str) -> bool:
    """A line that fitted into the read limit still ends with its newline."""
    return text.endswith("\n")


def is_input_number_after_conversion(rest: str, text: str) -> bool:
    """Whether parsing consumed something and stopped right at the newline."""
    return len(rest) < len(text) and rest.startswith("\n")