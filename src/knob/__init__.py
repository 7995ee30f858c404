"""A convenient structure to store and load settings.

knob is meant for items that are rarely read and stored, like command-line
flags or application configuration. Values are stored as strings and parsed
into the type the caller asks for when fetched.

This package provides:
- Settings: the settings container
- OptionDescriptor and the option factories: command-line option schema
- FetchError / ArgumentError: error hierarchies for lookups and loading
"""

from knob.errors import (
    ArgumentError,
    ArgumentMissing,
    FetchError,
    KnobError,
    MissingKey,
    OptionDuplicated,
    OptionMissing,
    ParseFailure,
    UnexpectedArgument,
    UnrecognizedOption,
)
from knob.options import (
    HasArg,
    Occurrence,
    OptionDescriptor,
    optflag,
    optflagmulti,
    optflagopt,
    optmulti,
    optopt,
    reqopt,
)
from knob.settings import Settings

__all__ = [
    "ArgumentError",
    "ArgumentMissing",
    "FetchError",
    "HasArg",
    "KnobError",
    "MissingKey",
    "Occurrence",
    "OptionDescriptor",
    "OptionDuplicated",
    "OptionMissing",
    "ParseFailure",
    "Settings",
    "UnexpectedArgument",
    "UnrecognizedOption",
    "optflag",
    "optflagmulti",
    "optflagopt",
    "optmulti",
    "optopt",
    "reqopt",
]
