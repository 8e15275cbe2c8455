"""Exception types raised by the formatting engine."""

from __future__ import annotations


class DateFormatError(Exception):
    """Base class for every error raised by datefmt."""


class ArgumentTypeError(DateFormatError, TypeError):
    """An argument passed to a public operation has an unsupported type."""


class InvalidDateError(DateFormatError, ValueError):
    """A textual or numeric date cannot be resolved to a valid calendar point."""

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text
