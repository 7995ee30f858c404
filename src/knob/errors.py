"""Exception classes for settings lookups and argument loading.

This module defines two families of errors:

- FetchError and its subclasses, raised when a stored setting cannot be
  retrieved as the requested type.
- ArgumentError and its subclasses, describing problems found while loading
  a command line. These are collected and returned, not raised.
"""

from __future__ import annotations

from typing import Optional


class KnobError(Exception):
    """Base class for every error raised or reported by knob."""


class FetchError(KnobError):
    """A setting could not be fetched.

    Carries the normalised key that was requested.
    """

    def __init__(self, key: str, message: str) -> None:
        """Initialize the exception.

        Args:
            key: Settings key that was requested
            message: Human-readable error message
        """
        super().__init__(message)
        self.key: str = key


class MissingKey(FetchError):
    """Raised when a key is absent from the store."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"setting not found: {key!r}")


class ParseFailure(FetchError):
    """Raised when a stored value cannot be converted to the requested type."""

    def __init__(
        self, key: str, raw_value: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            key: Settings key that was requested
            raw_value: The stored string that failed to parse
            original_error: The original exception that was caught
        """
        super().__init__(key, f"setting could not be parsed: {key!r} = {raw_value!r}")
        self.raw_value: str = raw_value
        self.original_error = original_error


class ArgumentError(KnobError):
    """A problem with one flag of a loaded argument list."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize the error.

        Args:
            option: The flag name involved, without leading dashes
            message: Human-readable error message
        """
        super().__init__(message)
        self.option: str = option
        self.message: str = message


class UnrecognizedOption(ArgumentError):
    """A flag that matches no registered option."""

    def __init__(self, option: str) -> None:
        super().__init__(option, f"Unrecognized option: '{option}'")


class ArgumentMissing(ArgumentError):
    """An option that requires an argument was given none."""

    def __init__(self, option: str) -> None:
        super().__init__(option, f"Argument to option '{option}' missing")


class OptionMissing(ArgumentError):
    """A required option was not given at all."""

    def __init__(self, option: str) -> None:
        super().__init__(option, f"Required option '{option}' missing")


class OptionDuplicated(ArgumentError):
    """An option that may occur once was given several times."""

    def __init__(self, option: str) -> None:
        super().__init__(option, f"Option '{option}' given more than once")


class UnexpectedArgument(ArgumentError):
    """A switch was given an argument."""

    def __init__(self, option: str, argument: str) -> None:
        super().__init__(option, f"Option '{option}' does not take an argument")
        self.argument: str = argument
