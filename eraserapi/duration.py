"""Duration strings in the "1h30m", "500ms", "24h0m0s" notation."""

from __future__ import annotations

import re
from fractions import Fraction

__all__ = ["parse_duration", "format_duration"]

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX = 2**63 - 1

_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "\u00b5s": MICROSECOND,
    "\u03bcs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")


def parse_duration(text: str) -> int:
    """Parse a duration string and return it as a number of nanoseconds."""
    if not isinstance(text, str):
        raise ValueError(f"invalid duration {text!r}")
    original = text
    sign = 1
    if text[:1] in "+-" and text:
        if text[0] == "-":
            sign = -1
        text = text[1:]
    if text == "0":
        return 0
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = 0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            if re.match(r"\d*\.?\d*", text[pos:]).group():
                raise ValueError(f"missing unit in duration {original!r}")
            raise ValueError(f"invalid duration {original!r}")
        number, unit = match.groups()
        total += int(Fraction(number) * _UNITS[unit])
        if total > _MAX + (1 if sign < 0 else 0):
            raise ValueError(f"invalid duration {original!r}")
        pos = match.end()
    return sign * total


def _fraction(value: int, precision: int) -> tuple[int, str]:
    scale = 10**precision
    digits = str(value % scale).rjust(precision, "0").rstrip("0")
    return value // scale, f".{digits}" if digits else ""


def format_duration(nanoseconds: int) -> str:
    """Render nanoseconds in the canonical duration notation."""
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    u = abs(nanoseconds)

    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            whole, frac = _fraction(u, 3)
            return f"{sign}{whole}{frac}\u00b5s"
        whole, frac = _fraction(u, 6)
        return f"{sign}{whole}{frac}ms"

    seconds, frac = _fraction(u, 9)
    out = f"{seconds % 60}{frac}s"
    minutes = seconds // 60
    if minutes > 0:
        out = f"{minutes % 60}m{out}"
        hours = minutes // 60
        if hours > 0:
            out = f"{hours}h{out}"
    return sign + out