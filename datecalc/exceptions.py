"""Exceptions raised by datecalc."""


class InvalidDateError(ValueError):
    """Raised when a value cannot be interpreted as a date or time."""


class InvalidArgumentError(ValueError):
    """Raised when a numeric or structural argument is out of range."""
