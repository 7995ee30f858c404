"""Argument scanning and usage formatting for registered options.

The scanner follows the usual POSIX conventions: ``--name=value``,
``--name value``, ``-x value``, ``-xvalue`` and clustered switches such as
``-abc``. A bare ``--`` ends option parsing. Problems are collected as
``ArgumentError`` instances on the returned ``Matches`` rather than raised,
so a single pass reports everything that is wrong with a command line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Final, Optional

from knob.constants import USAGE_DESC_COLUMN, USAGE_INDENT
from knob.errors import (
    ArgumentError,
    ArgumentMissing,
    OptionDuplicated,
    OptionMissing,
    UnexpectedArgument,
    UnrecognizedOption,
)
from knob.options import HasArg, Occurrence, OptionDescriptor

logger: Final = logging.getLogger(__name__)


@dataclass
class Matches:
    """Result of scanning an argument list against a set of options.

    Every occurrence of an option is recorded in order; switches and
    ``HasArg.MAYBE`` options given without an argument record ``None``.
    """

    options: list[OptionDescriptor]
    errors: list[ArgumentError] = field(default_factory=list)
    free: list[str] = field(default_factory=list)
    _values: dict[int, list[Optional[str]]] = field(default_factory=dict, repr=False)

    def record(self, index: int, value: Optional[str]) -> None:
        self._values.setdefault(index, []).append(value)

    def _index(self, descriptor: OptionDescriptor) -> int:
        # Identity first so equal descriptors registered twice stay apart.
        for index, candidate in enumerate(self.options):
            if candidate is descriptor:
                return index
        return self.options.index(descriptor)

    def count(self, descriptor: OptionDescriptor) -> int:
        """Number of times ``descriptor`` was given."""
        return len(self._values.get(self._index(descriptor), []))

    def present(self, descriptor: OptionDescriptor) -> bool:
        return self.count(descriptor) > 0

    def values(self, descriptor: OptionDescriptor) -> list[str]:
        """All arguments given to ``descriptor``, in command-line order."""
        occurrences = self._values.get(self._index(descriptor), [])
        return [value for value in occurrences if value is not None]

    def first_value(self, descriptor: OptionDescriptor) -> Optional[str]:
        """First argument given to ``descriptor``, or None."""
        values = self.values(descriptor)
        return values[0] if values else None


def find_option(
    options: Sequence[OptionDescriptor], name: str, long: bool = True
) -> Optional[int]:
    """Return the index of the first option registered under ``name``.

    ``long`` selects whether ``name`` came from ``--name`` or ``-x``.
    """
    if not name:
        return None
    for index, descriptor in enumerate(options):
        registered = descriptor.long_name if long else descriptor.short_name
        if name == registered:
            return index
    return None


def _take_next(
    arguments: list[str], position: int, has_arg: HasArg
) -> tuple[Optional[str], int, bool]:
    """Take the argument following a flag.

    Returns ``(value, new_position, missing)``.
    """
    if position < len(arguments):
        candidate = arguments[position]
        if has_arg is HasArg.YES or not candidate.startswith("-"):
            return candidate, position + 1, False
    return None, position, has_arg is HasArg.YES


def scan_arguments(
    arguments: Iterable[str], options: Sequence[OptionDescriptor]
) -> Matches:
    """Scan ``arguments`` against ``options``.

    Args:
        arguments: Command-line arguments without the program name
        options: Registered option descriptors; on name collisions the first wins

    Returns:
        Matches holding recorded values, free arguments and collected errors
    """
    args = list(arguments)
    matches = Matches(options=list(options))
    position = 0

    while position < len(args):
        arg = args[position]
        position += 1

        if arg == "--":
            matches.free.extend(args[position:])
            break

        if len(arg) < 2 or not arg.startswith("-"):
            matches.free.append(arg)
            continue

        if arg.startswith("--"):
            name, sep, attached = arg[2:].partition("=")
            index = find_option(options, name)
            if index is None:
                matches.errors.append(UnrecognizedOption(name))
                continue
            descriptor = options[index]

            if descriptor.has_arg is HasArg.NO:
                if sep:
                    matches.errors.append(UnexpectedArgument(name, attached))
                else:
                    matches.record(index, None)
                continue

            if sep:
                matches.record(index, attached)
                continue

            value, position, missing = _take_next(args, position, descriptor.has_arg)
            if missing:
                matches.errors.append(ArgumentMissing(name))
            else:
                matches.record(index, value)
            continue

        # Short flags, possibly clustered: -abc, -p3000
        cluster = arg[1:]
        for offset, name in enumerate(cluster):
            index = find_option(options, name, long=False)
            if index is None:
                matches.errors.append(UnrecognizedOption(name))
                continue
            descriptor = options[index]

            if descriptor.has_arg is HasArg.NO:
                matches.record(index, None)
                continue

            rest = cluster[offset + 1 :]
            if rest:
                matches.record(index, rest)
                break

            value, position, missing = _take_next(args, position, descriptor.has_arg)
            if missing:
                matches.errors.append(ArgumentMissing(name))
            else:
                matches.record(index, value)
            break

    for descriptor in matches.options:
        given = matches.count(descriptor)
        if descriptor.occurrence is Occurrence.REQ and given == 0:
            matches.errors.append(OptionMissing(descriptor.key))
        elif descriptor.occurrence is not Occurrence.MULTI and given > 1:
            matches.errors.append(OptionDuplicated(descriptor.key))

    logger.debug(
        "Scanned %d argument(s): %d free, %d error(s)",
        len(args),
        len(matches.free),
        len(matches.errors),
    )
    return matches


# ───────────────────────── usage formatting ─────────────────────────────────


def _hint(descriptor: OptionDescriptor) -> str:
    hint = " ".join(descriptor.hint.split()) or "VALUE"
    if descriptor.has_arg is HasArg.YES:
        return f" {hint}"
    if descriptor.has_arg is HasArg.MAYBE:
        return f" [{hint}]"
    return ""


def format_option_row(descriptor: OptionDescriptor) -> str:
    """Format one usage row; always a single line."""
    row = USAGE_INDENT + ", ".join(descriptor.flags()) + _hint(descriptor)
    description = " ".join(descriptor.description.split())
    if not description:
        return row
    if len(row) < USAGE_DESC_COLUMN:
        row = row.ljust(USAGE_DESC_COLUMN)
    else:
        row += "  "
    return row + description


def format_usage(brief: str, options: Sequence[OptionDescriptor]) -> str:
    """Return ``brief`` followed by one row per option."""
    rows = [format_option_row(descriptor) for descriptor in options]
    return "\n".join([brief, "", "Options:", *rows]) + "\n"


def format_short_usage(program: str, options: Sequence[OptionDescriptor]) -> str:
    """Return a one-line synopsis, e.g. ``Usage: prog -p 4000 [-v]``."""
    parts: list[str] = []
    for descriptor in options:
        flag = descriptor.flags()[0]
        part = flag + _hint(descriptor)
        if descriptor.occurrence is not Occurrence.REQ:
            part = f"[{part}]"
        if descriptor.occurrence is Occurrence.MULTI:
            part += ".."
        parts.append(part)
    return " ".join([f"Usage: {program}", *parts])
