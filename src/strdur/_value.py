"""StringDuration - a duration value stored as its canonical text."""

from __future__ import annotations

import logging
import struct
from datetime import timedelta
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from strdur._constants import (
    BINARY_WIDTH,
    MAX_INT64,
    MICROSECOND,
    MIN_INT64,
    NULL_LITERAL,
    SECOND,
    UINT64_MASK,
    ZERO_DURATION,
)
from strdur._errors import (
    Int64OverflowError,
    InvalidByteLengthError,
    InvalidDurationError,
)
from strdur._format import format_duration
from strdur._grammar import parse_duration

logger = logging.getLogger(__name__)

_UINT64_LE = struct.Struct("<Q")


def _decode_text(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidDurationError(
            "invalid duration encoding",
            f"duration bytes are not valid UTF-8: {exc}",
            wrapped=exc,
        ) from exc


class StringDuration:
    """A time span that round-trips through text, JSON and binary forms.

    The value is kept as the canonical rendering of its nanosecond count,
    so ``StringDuration("24h")`` reads back as ``"24h0m0s"``. A
    default-constructed instance behaves as the zero duration.

    Every mutator either replaces the whole value or raises, leaving the
    previous value in place.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str = "") -> None:
        self._text = ""
        if text:
            self.set(text)

    @classmethod
    def from_nanoseconds(cls, ns: int) -> StringDuration:
        sd = cls()
        sd.from_duration(ns)
        return sd

    # --- Text ---

    def __str__(self) -> str:
        return format_duration(self.duration())

    def __repr__(self) -> str:
        return f"StringDuration({str(self)!r})"

    def set(self, text: str) -> None:
        """Replace the value with the canonical form of ``text``.

        An empty string sets the zero duration.

        Raises:
            InvalidDurationError: If ``text`` is not a duration expression.
        """
        if text == "":
            self._text = ZERO_DURATION
            return
        self._text = format_duration(parse_duration(text))

    def duration(self) -> int:
        """Return the value in nanoseconds.

        An unparsable backing string reads as zero.
        """
        if not self._text:
            return 0
        try:
            return parse_duration(self._text)
        except InvalidDurationError as exc:
            logger.debug("unparsable stored duration %r: %s", self._text, exc.internal())
            return 0

    def from_duration(self, d: int | timedelta) -> None:
        """Replace the value with a nanosecond count or a timedelta.

        Raises:
            Int64OverflowError: If the value does not fit in a signed 64-bit
                integer.
            TypeError: If ``d`` is neither an int nor a timedelta.
        """
        if isinstance(d, timedelta):
            ns = (d.days * 86_400 + d.seconds) * SECOND + d.microseconds * MICROSECOND
        elif isinstance(d, int) and not isinstance(d, bool):
            ns = d
        else:
            raise TypeError(f"expected int nanoseconds or timedelta, got {type(d).__name__}")
        if not MIN_INT64 <= ns <= MAX_INT64:
            raise Int64OverflowError(
                "duration out of range",
                f"{ns}ns does not fit in a signed 64-bit integer",
            )
        self._text = format_duration(ns)

    def to_timedelta(self) -> timedelta:
        """Return the value as a timedelta, truncated to whole microseconds."""
        ns = self.duration()
        us = abs(ns) // MICROSECOND
        return timedelta(microseconds=-us if ns < 0 else us)

    def marshal_text(self) -> bytes:
        return str(self).encode("utf-8")

    def unmarshal_text(self, data: bytes) -> None:
        """Set the value from text bytes. The literal ``null`` is ignored."""
        if bytes(data) == NULL_LITERAL:
            return
        self.set(_decode_text(data))

    # --- JSON ---

    def marshal_json(self) -> bytes:
        return b'"' + self.marshal_text() + b'"'

    def unmarshal_json(self, data: bytes) -> None:
        """Set the value from a JSON string token.

        ``null`` is ignored. Surrounding double quotes are stripped without
        any further unescaping; an empty string sets the zero duration.
        """
        raw = bytes(data)
        if raw == NULL_LITERAL:
            return
        clean = raw.strip(b'"')
        if not clean:
            self._text = ZERO_DURATION
            return
        self.set(_decode_text(clean))

    # --- Binary ---

    def marshal_binary(self) -> bytes:
        """Encode as 8 little-endian bytes of the two's-complement count."""
        return _UINT64_LE.pack(self.duration() & UINT64_MASK)

    def unmarshal_binary(self, data: bytes) -> None:
        """Decode 8 little-endian bytes as an unsigned nanosecond count.

        Values with the top bit set are rejected, including the encoding of
        any negative duration.

        Raises:
            InvalidByteLengthError: If ``data`` is not exactly 8 bytes.
            Int64OverflowError: If the decoded value exceeds the int64 range.
        """
        if len(data) != BINARY_WIDTH:
            raise InvalidByteLengthError(
                f"expected {BINARY_WIDTH} bytes, saw {len(data)}"
            )
        (uv,) = _UINT64_LE.unpack(bytes(data))
        if uv > MAX_INT64:
            raise Int64OverflowError(f"int64 overflow: {uv}")
        self._text = format_duration(uv)

    def __bytes__(self) -> bytes:
        return self.marshal_binary()

    # --- Structured decoding ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate model fields through text decoding; dump as canonical text."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> StringDuration:
        if isinstance(value, StringDuration):
            return value
        if isinstance(value, (str, bytes)):
            sd = cls()
            sd.unmarshal_text(value.encode("utf-8") if isinstance(value, str) else value)
            return sd
        raise InvalidDurationError(
            "expected a duration string",
            f"cannot decode {type(value).__name__} as a duration",
        )

    # --- Value semantics ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringDuration):
            return NotImplemented
        return str(self) == str(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> StringDuration:
        sd = StringDuration()
        sd._text = self._text
        return sd

    __copy__ = copy
