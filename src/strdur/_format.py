"""Canonical rendering of nanosecond durations."""

from __future__ import annotations

from strdur._constants import MICROSECOND, MILLISECOND, SECOND, UINT64_MASK


def _fmt_frac(v: int, prec: int) -> tuple[str, int]:
    """Split off the low ``prec`` digits of v as a fraction.

    Trailing zeros are omitted, and the decimal point too when the whole
    fraction is zero.
    """
    digits: list[str] = []
    printing = False
    for _ in range(prec):
        digit = v % 10
        printing = printing or digit != 0
        if printing:
            digits.append(str(digit))
        v //= 10
    if printing:
        return "." + "".join(reversed(digits)), v
    return "", v


def format_duration(ns: int) -> str:
    """Render a nanosecond count in canonical form, e.g. ``"72h3m0.5s"``.

    Leading zero units are omitted. Durations under one second use a
    smaller unit (``ms``, ``µs`` or ``ns``) so the leading digit is
    non-zero. The zero duration renders as ``"0s"``.
    """
    u = ns & UINT64_MASK
    neg = ns < 0
    if neg:
        u = -u & UINT64_MASK

    if u < SECOND:
        if u == 0:
            return "0s"
        if u < MICROSECOND:
            prec, unit = 0, "ns"
        elif u < MILLISECOND:
            prec, unit = 3, "µs"
        else:
            prec, unit = 6, "ms"
        frac, u = _fmt_frac(u, prec)
        out = f"{u}{frac}{unit}"
    else:
        frac, u = _fmt_frac(u, 9)
        out = f"{u % 60}{frac}s"
        u //= 60
        if u > 0:
            out = f"{u % 60}m{out}"
            u //= 60
            if u > 0:
                out = f"{u}h{out}"

    if neg:
        return "-" + out
    return out
