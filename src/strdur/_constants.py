"""Unit and range constants for duration parsing and encoding."""

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # MICRO SIGN
    "μs": MICROSECOND,  # GREEK SMALL LETTER MU
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}
"""Accepted unit suffixes mapped to their length in nanoseconds."""

MAX_INT64 = (1 << 63) - 1
MIN_INT64 = -(1 << 63)

UINT64_MASK = (1 << 64) - 1

BINARY_WIDTH = 8
"""Byte length of the fixed-width binary encoding."""

ZERO_DURATION = "0s"
"""Canonical rendering of the zero duration."""

NULL_LITERAL = b"null"
