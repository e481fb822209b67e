"""Lark grammar and left-to-right evaluation of duration expressions."""

from __future__ import annotations

from lark import Lark
from lark.exceptions import LarkError

from strdur._constants import UNITS
from strdur._errors import (
    InvalidDurationError,
    invalid_duration,
    missing_unit,
    quote,
    unknown_unit,
)

DURATION_GRAMMAR = r"""
start: SIGN? term+

term: NUMBER UNIT?

SIGN: /[+-]/
NUMBER: /[0-9]+(?:\.[0-9]*)?|\.[0-9]+/
UNIT: /[^0-9.]+/
"""

_parser = Lark(DURATION_GRAMMAR, parser="lalr", lexer="contextual")

_LIMIT = 1 << 63


def _lead_int(digits: str, orig: str) -> int:
    """Accumulate integer digits, failing as soon as the value passes 2**63."""
    x = 0
    for ch in digits:
        if x > _LIMIT // 10:
            raise invalid_duration(orig)
        x = x * 10 + int(ch)
        if x > _LIMIT:
            raise invalid_duration(orig)
    return x


def _lead_fraction(digits: str) -> tuple[int, float]:
    """Accumulate fraction digits, ignoring those beyond 63-bit precision.

    Returns (value, scale) where the fraction equals value / scale.
    """
    x = 0
    scale = 1.0
    overflow = False
    for ch in digits:
        if overflow:
            continue
        if x > ((1 << 63) - 1) // 10:
            overflow = True
            continue
        y = x * 10 + int(ch)
        if y > _LIMIT:
            overflow = True
            continue
        x = y
        scale *= 10
    return x, scale


def _term_value(whole: int, frac: str, unit: str, orig: str) -> int:
    if unit not in UNITS:
        raise unknown_unit(unit, orig)
    unit_ns = UNITS[unit]
    if whole > _LIMIT // unit_ns:
        raise invalid_duration(orig)
    v = whole * unit_ns
    if frac:
        f, scale = _lead_fraction(frac)
        v += int(float(f) * (float(unit_ns) / scale))
        if v > _LIMIT:
            raise invalid_duration(orig)
    return v


def parse_duration(text: str) -> int:
    """Parse a duration expression such as ``"1h30m"`` into nanoseconds.

    Terms are checked as the lexer produces them, so the first problem
    reading left to right is the one reported.

    Args:
        text: Optional sign followed by one or more number/unit terms.
            Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``,
            ``m`` and ``h``. The bare literal ``0`` needs no unit.

    Returns:
        The signed nanosecond count.

    Raises:
        InvalidDurationError: If the text is not a valid duration or the
            result does not fit in a signed 64-bit integer.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    if body == "0":
        return 0
    if not body:
        raise invalid_duration(text)

    neg = False
    total = 0
    pending: tuple[int, str] | None = None
    interactive = _parser.parse_interactive(text)
    try:
        for token in interactive.iter_parse():
            if token.type == "SIGN":
                neg = token == "-"
            elif token.type == "NUMBER":
                if pending is not None:
                    raise missing_unit(text)
                whole, _, frac = str(token).partition(".")
                pending = (_lead_int(whole, text), frac)
            else:
                if pending is None:
                    raise invalid_duration(text)
                total += _term_value(*pending, str(token), text)
                pending = None
                if total > _LIMIT:
                    raise invalid_duration(text)
        if pending is not None:
            raise missing_unit(text)
        interactive.feed_eof()
    except LarkError as exc:
        raise InvalidDurationError(
            f"invalid duration {quote(text)}", str(exc), wrapped=exc
        ) from exc

    if neg:
        return -total
    if total > _LIMIT - 1:
        raise invalid_duration(text)
    return total
