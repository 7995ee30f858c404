"""String-to-value parsing for stored settings.

Any type pydantic can build from a string can be fetched: ``int``, ``float``,
``bool``, ``Decimal``, ``Path``, the ``ipaddress`` types, ``datetime``,
enums, ``Literal`` choices, and ``Annotated`` types carrying validators.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar, cast

from pydantic import TypeAdapter

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def adapter_for(type_: Any) -> TypeAdapter[Any]:
    """Return a cached ``TypeAdapter`` for ``type_``.

    Unhashable type expressions get a fresh adapter on every call.
    """
    try:
        hash(type_)
    except TypeError:
        return TypeAdapter(type_)
    return _adapter(type_)


def parse_value(raw: str, type_: type[T]) -> T:
    """Convert ``raw`` into an instance of ``type_``.

    Args:
        raw: Stored string value
        type_: Target type chosen by the caller

    Returns:
        The parsed value

    Raises:
        pydantic.ValidationError: If ``raw`` is not a valid ``type_``
        pydantic.PydanticSchemaGenerationError: If pydantic cannot handle ``type_``
    """
    return cast(T, adapter_for(type_).validate_python(raw))
