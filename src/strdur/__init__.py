"""strdur - Duration values that round-trip through config formats."""

from __future__ import annotations

try:
    from strdur._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from strdur._errors import (
    DecodeError,
    DurationError,
    Int64OverflowError,
    InvalidByteLengthError,
    InvalidDurationError,
)
from strdur._format import format_duration
from strdur._grammar import parse_duration
from strdur._value import StringDuration
from strdur.capability import Settable, TextUnmarshaler
from strdur.decode import DurationJSONEncoder, loads_toml
from strdur.flags import add_duration_argument, flag_var_type_func

__all__ = [
    "StringDuration",
    "parse_duration",
    "format_duration",
    "loads_toml",
    "add_duration_argument",
    "flag_var_type_func",
    "DurationJSONEncoder",
    "Settable",
    "TextUnmarshaler",
    "DurationError",
    "DecodeError",
    "Int64OverflowError",
    "InvalidByteLengthError",
    "InvalidDurationError",
]
