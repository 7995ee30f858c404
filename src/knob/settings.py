"""The settings container.

``Settings`` stores every value as a string and converts it to the type the
caller asks for when it is fetched. Values can be set directly or loaded from
a command line using registered option descriptors.

Examples:
    settings = Settings()
    settings.set("ip", "0.0.0.0")
    ip = settings.fetch("ip", IPv4Address)

    settings.opt(optopt("p", "port", "the port to bind to", "4000"))
    errors = settings.load_os_args()
    if errors:
        print(settings.usage("Try one of these:"))
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Final, Optional, TypeVar, overload

from pydantic import ValidationError

from knob.arguments import format_short_usage, format_usage, scan_arguments
from knob.constants import PROGNAME_KEY, SWITCH_VALUE
from knob.errors import ArgumentError, MissingKey, ParseFailure
from knob.options import OptionDescriptor
from knob.parsing import parse_value

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def setting_key(key: Any) -> str:
    """Normalise a key to the string used in the store.

    Enum members use their value when it is a string, otherwise their name.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    return str(key)


def serialize(value: Any) -> str:
    """Serialize a value for storage.

    Booleans become ``true``/``false`` and enum members store their value.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class Settings:
    """Settings container holding serialized values and registered options.

    Values are kept as strings; ``fetch`` parses them into the requested type
    on every call. The option table is only consulted by ``load_args``.
    """

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.options: list[OptionDescriptor] = []
        self.free_args: list[str] = []

    def __repr__(self) -> str:
        return f"Settings(store={self.store!r}, options={len(self.options)})"

    def __contains__(self, key: Any) -> bool:
        return setting_key(key) in self.store

    # ---- copying ----
    def copy(self) -> Settings:
        """Return an independent duplicate of these settings."""
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate.store = dict(self.store)
        duplicate.options = list(self.options)  # descriptors are immutable
        duplicate.free_args = list(self.free_args)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Settings:
        return self.copy()

    # ---- storing ----
    def set(self, key: Any, value: Any) -> None:
        """Set a settings key to a value. The value will be serialized."""
        name = setting_key(key)
        self.store[name] = serialize(value)
        logger.debug("Set %s = %r", name, self.store[name])

    def set_opt(self, key: Any, value: Optional[Any]) -> None:
        """Set a key only if ``value`` is not None.

        Lets callers store the result of an earlier lookup without checking
        it first.
        """
        if value is not None:
            self.set(key, value)

    # ---- fetching ----
    @overload
    def fetch(self, key: Any) -> str: ...

    @overload
    def fetch(self, key: Any, type_: type[T]) -> T: ...

    def fetch(self, key: Any, type_: Any = str) -> Any:
        """Fetch a setting and parse it as ``type_``.

        Args:
            key: Settings key
            type_: Type to parse the stored string into (default: str)

        Returns:
            The parsed value

        Raises:
            MissingKey: If the key was never set
            ParseFailure: If the stored value cannot be parsed as ``type_``
        """
        name = setting_key(key)
        try:
            raw = self.store[name]
        except KeyError:
            raise MissingKey(name) from None

        try:
            return parse_value(raw, type_)
        except ValidationError as err:
            raise ParseFailure(name, raw, err) from err

    @overload
    def fetch_with(self, key: Any, function: Callable[[str], R]) -> R: ...

    @overload
    def fetch_with(self, key: Any, function: Callable[[T], R], type_: type[T]) -> R: ...

    def fetch_with(self, key: Any, function: Callable[[Any], R], type_: Any = str) -> R:
        """Fetch a setting and pass it to ``function``, returning its result.

        ``function`` is not called when the fetch fails.
        """
        value = self.fetch(key, type_)
        return function(value)

    @overload
    def get(self, key: Any) -> Optional[str]: ...

    @overload
    def get(self, key: Any, type_: type[T]) -> Optional[T]: ...

    @overload
    def get(self, key: Any, type_: type[T], default: T) -> T: ...

    def get(self, key: Any, type_: Any = str, default: Any = None) -> Any:
        """Fetch a setting, returning ``default`` if it was never set.

        Values that are present but unparsable still raise ParseFailure.
        """
        try:
            return self.fetch(key, type_)
        except MissingKey:
            return default

    # ---- command-line options ----
    def opt(self, descriptor: OptionDescriptor) -> None:
        """Register a command-line option for later use with ``load_args``.

        Colliding flag names are kept; the first registration wins when
        arguments are scanned.
        """
        for existing in self.options:
            shared = set(existing.flags()) & set(descriptor.flags())
            if shared:
                logger.warning(
                    "Option %s already registered; the earlier registration takes precedence",
                    ", ".join(sorted(shared)),
                )
                break
        self.options.append(descriptor)

    def load_args(self, arguments: Iterable[str]) -> list[ArgumentError]:
        """Load a list of command-line arguments (without the program name).

        Every matched option is stored under its long name, or its short name
        if it has none. Switches given without a value store ``"true"``.
        Options that parsed are applied even when others failed.

        Returns:
            The errors found, empty if the whole list was understood
        """
        matches = scan_arguments(arguments, self.options)

        for descriptor in matches.options:
            if not matches.present(descriptor):
                continue
            value = matches.first_value(descriptor)
            self.set(descriptor.key, SWITCH_VALUE if value is None else value)

        self.free_args = list(matches.free)

        for error in matches.errors:
            logger.warning("Argument error: %s", error)
        return list(matches.errors)

    def load_os_args(self) -> list[ArgumentError]:
        """Load the command line the process was started with.

        Stores the program name under ``knob.progname``.
        """
        if sys.argv:
            self.set(PROGNAME_KEY, sys.argv[0])
        return self.load_args(sys.argv[1:])

    def usage(self, brief: str) -> str:
        """Return usage text for the registered options, preceded by ``brief``."""
        return format_usage(brief, self.options)

    def short_usage(self, program: Optional[str] = None) -> str:
        """Return a one-line synopsis of the registered options.

        Uses the stored program name when ``program`` is not given.
        """
        name = program if program is not None else self.get(PROGNAME_KEY, str, "")
        return format_short_usage(name, self.options)
