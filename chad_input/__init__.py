"""Validated numeric console input: integers and floating-point values with length, range, overflow and precision checks."""

__version__ = "0.1.0"

__all__ = ["console", "integers", "floats"]