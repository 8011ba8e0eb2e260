"""Resource quantities such as "25Mi", "7m" or "2Gi"."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from fractions import Fraction

__all__ = ["Quantity"]

_BINARY = {"Ki": 10, "Mi": 20, "Gi": 30, "Ti": 40, "Pi": 50, "Ei": 60}
_DECIMAL = {"n": -9, "u": -6, "m": -3, "": 0, "k": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18}

_PATTERN = re.compile(
    r"^([+-]?)(\d+(?:\.\d*)?|\.\d+)(Ki|Mi|Gi|Ti|Pi|Ei|n|u|m|k|M|G|T|P|E|[eE][+-]?\d+)?$"
)

BINARY_SI = "BinarySI"
DECIMAL_SI = "DecimalSI"
DECIMAL_EXPONENT = "DecimalExponent"


@dataclass(frozen=True)
class Quantity:
    """An exact amount of a resource together with its preferred notation."""

    value: Fraction = Fraction(0)
    format: str = field(default=DECIMAL_SI, compare=False)

    @classmethod
    def parse(cls, text: str) -> "Quantity":
        """Parse a quantity string; raise ValueError if it is malformed."""
        if not isinstance(text, str):
            raise ValueError(f"quantities must be strings, got {text!r}")
        match = _PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"quantities must match the regular expression: {text!r}")
        sign, number, suffix = match.groups()
        suffix = suffix or ""
        amount = Fraction(number)
        if suffix in _BINARY:
            amount *= 2 ** _BINARY[suffix]
            fmt = BINARY_SI
        elif suffix in _DECIMAL:
            amount *= Fraction(10) ** _DECIMAL[suffix]
            fmt = DECIMAL_SI
        else:
            amount *= Fraction(10) ** int(suffix[1:])
            fmt = DECIMAL_EXPONENT
        if sign == "-":
            amount = -amount
        nanos = amount * 10**9
        if nanos.denominator != 1:
            amount = Fraction(math.ceil(nanos), 10**9)
        return cls(amount, fmt)

    def is_zero(self) -> bool:
        return self.value == 0

    def to_json(self) -> str:
        """Return the canonical string form."""
        value = self.value
        if value == 0:
            return "0"
        sign = "-" if value < 0 else ""
        magnitude = abs(value)
        if self.format == BINARY_SI and magnitude.denominator == 1:
            whole = magnitude.numerator
            for suffix, shift in sorted(_BINARY.items(), key=lambda kv: -kv[1]):
                if whole % (1 << shift) == 0:
                    return f"{sign}{whole >> shift}{suffix}"
            if whole < 1024:
                return f"{sign}{whole}"
        exponent = self._best_exponent(magnitude)
        mantissa = int(magnitude / Fraction(10) ** exponent)
        if self.format == DECIMAL_EXPONENT:
            return f"{sign}{mantissa}" + (f"e{exponent}" if exponent else "")
        suffix = next(s for s, e in _DECIMAL.items() if e == exponent)
        return f"{sign}{mantissa}{suffix}"

    @staticmethod
    def _best_exponent(magnitude: Fraction) -> int:
        for exponent in range(18, -10, -3):
            if (magnitude / Fraction(10) ** exponent).denominator == 1:
                return exponent
        return -9

    def __str__(self) -> str:
        return self.to_json()