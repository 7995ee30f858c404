"""Command-line option descriptors.

An ``OptionDescriptor`` describes one flag: its short and long names, help
text, the hint shown for its argument, whether it takes an argument and how
often it may occur. The factory functions at the bottom of this module cover
the usual combinations.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class HasArg(Enum):
    """Whether an option takes an argument."""

    YES = "yes"  # argument is mandatory
    MAYBE = "maybe"  # argument may be omitted
    NO = "no"  # boolean switch


class Occurrence(Enum):
    """How often an option may be given."""

    REQ = "req"  # must be given exactly once
    OPTIONAL = "optional"  # may be given at most once
    MULTI = "multi"  # may be given any number of times


class OptionDescriptor(BaseModel):
    """One registered command-line option.

    Names are stored without leading dashes. The short name is a single
    character and is matched by ``-x``; the long name is matched by
    ``--name``. One of them may be empty but not both.
    """

    model_config = ConfigDict(frozen=True)

    short_name: str = Field("", max_length=1, description="Single-character flag name")
    long_name: str = Field("", description="Long flag name")
    description: str = Field("", description="Help text shown in usage")
    hint: str = Field("", description="Placeholder for the argument in usage")
    has_arg: HasArg = HasArg.YES
    occurrence: Occurrence = Occurrence.OPTIONAL

    # ---- validators ----
    @field_validator("short_name", "long_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if v.startswith("-"):
            raise ValueError("option names are given without leading dashes")
        if any(ch.isspace() or ch == "=" for ch in v):
            raise ValueError("option names cannot contain whitespace or '='")
        return v

    @model_validator(mode="after")
    def check_has_name(self) -> OptionDescriptor:
        if not self.short_name and not self.long_name:
            raise ValueError("an option needs a short or a long name")
        return self

    # ---- convenience ----
    @property
    def key(self) -> str:
        """Settings key written when this option is loaded."""
        return self.long_name or self.short_name

    def flags(self) -> list[str]:
        """Flag spellings as typed on a command line, e.g. ``["-p", "--port"]``."""
        result: list[str] = []
        if self.short_name:
            result.append(f"-{self.short_name}")
        if self.long_name:
            result.append(f"--{self.long_name}")
        return result


def reqopt(short_name: str, long_name: str, description: str, hint: str) -> OptionDescriptor:
    """Option that must be given once, with an argument."""
    return OptionDescriptor(
        short_name=short_name,
        long_name=long_name,
        description=description,
        hint=hint,
        has_arg=HasArg.YES,
        occurrence=Occurrence.REQ,
    )


def optopt(short_name: str, long_name: str, description: str, hint: str) -> OptionDescriptor:
    """Option that may be given once, with an argument."""
    return OptionDescriptor(
        short_name=short_name,
        long_name=long_name,
        description=description,
        hint=hint,
        has_arg=HasArg.YES,
        occurrence=Occurrence.OPTIONAL,
    )


def optflag(short_name: str, long_name: str, description: str) -> OptionDescriptor:
    """Switch that may be given once."""
    return OptionDescriptor(
        short_name=short_name,
        long_name=long_name,
        description=description,
        has_arg=HasArg.NO,
        occurrence=Occurrence.OPTIONAL,
    )


def optflagmulti(short_name: str, long_name: str, description: str) -> OptionDescriptor:
    """Switch that may be repeated."""
    return OptionDescriptor(
        short_name=short_name,
        long_name=long_name,
        description=description,
        has_arg=HasArg.NO,
        occurrence=Occurrence.MULTI,
    )


def optflagopt(short_name: str, long_name: str, description: str, hint: str) -> OptionDescriptor:
    """Option that may be given once, with or without an argument."""
    return OptionDescriptor(
        short_name=short_name,
        long_name=long_name,
        description=description,
        hint=hint,
        has_arg=HasArg.MAYBE,
        occurrence=Occurrence.OPTIONAL,
    )


def optmulti(short_name: str, long_name: str, description: str, hint: str) -> OptionDescriptor:
    """Option that may be repeated, each time with an argument."""
    return OptionDescriptor(
        short_name=short_name,
        long_name=long_name,
        description=description,
        hint=hint,
        has_arg=HasArg.YES,
        occurrence=Occurrence.MULTI,
    )


__all__ = [
    "HasArg",
    "Occurrence",
    "OptionDescriptor",
    "optflag",
    "optflagmulti",
    "optflagopt",
    "optmulti",
    "optopt",
    "reqopt",
]
