"""
Core datatypes used by the parser, table and fast-path engine.

These datatypes are intentionally minimal and immutable so that lexing,
table lookup and rounding remain deterministic and testable, and so the
shared power-of-ten table can be read concurrently without locking.

Notes:
- Mantissas and significands are plain Python ints; widths are enforced at
  construction (u64 lanes, 11-bit exponent field, 52-bit fraction).
- `ManExp10` is exact: (-1)**neg * man * 10**e10.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .constants import (
    BIAS,
    EXP10_MIN,
    EXP10_MAX,
    F64_EXPONENT_BITS,
    F64_EXPONENT_MAX,
    F64_MANTISSA_BITS,
    F64_MANTISSA_MASK,
    MANTISSA_LIMIT,
    U64_BITS,
    U64_MASK,
)
from .exc import InvariantViolation
from .fmt import bits_to_float, float_to_bits, fmt_u64


# ---------------------------------------------------------------------------
# ManExp10
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ManExp10:
    """Normalised decimal literal: sign, integer mantissa, decimal exponent.

    Fields:
    - neg: True for a leading '-'.
    - man: collapsed digit string, 0 <= man < 10**19.
    - e10: implicit (decimal point) plus explicit (suffix) exponent, i16 range.
    """

    neg: bool
    man: int
    e10: int

    def __post_init__(self):
        if self.man < 0 or self.man >= MANTISSA_LIMIT:
            raise InvariantViolation(f"mantissa out of range: {self.man}")
        if self.e10 < EXP10_MIN or self.e10 > EXP10_MAX:
            raise InvariantViolation(f"decimal exponent out of i16 range: {self.e10}")

    def is_zero(self) -> bool:
        return self.man == 0


# ---------------------------------------------------------------------------
# Lookup table entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LUTEntry:
    """128-bit approximation of 10**e10, truncated toward zero.

    (hi64 << 64) | lo64 has its top bit set and equals
    floor(10**e10 * 2**-e2), with biased_e2 = e2 + BIAS.
    """

    e10: int
    hi64: int
    lo64: int
    biased_e2: int

    def __post_init__(self):
        if not (0 <= self.hi64 <= U64_MASK and 0 <= self.lo64 <= U64_MASK):
            raise InvariantViolation(f"table lanes out of u64 range for 10^{self.e10}")

    @property
    def m128(self) -> int:
        return (self.hi64 << U64_BITS) | self.lo64

    @property
    def e2(self) -> int:
        return self.biased_e2 - BIAS

    def as_triple(self):
        return (self.hi64, self.lo64, self.biased_e2)

    def __str__(self) -> str:
        return f"10^{self.e10}: ({fmt_u64(self.hi64)}, {fmt_u64(self.lo64)}, {self.biased_e2})"


# ---------------------------------------------------------------------------
# Binary64 view
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FloatBits:
    """IEEE-754 binary64 fields.

    Normals carry an implicit leading 1; a zero biased exponent marks zero
    and subnormals. An all-ones exponent with zero mantissa is infinity.
    """

    sign: int
    biased_exponent: int
    mantissa: int

    def __post_init__(self):
        if self.sign not in (0, 1):
            raise InvariantViolation(f"sign must be a single bit: {self.sign}")
        if not 0 <= self.biased_exponent <= F64_EXPONENT_MAX:
            raise InvariantViolation(
                f"biased exponent must fit {F64_EXPONENT_BITS} bits: {self.biased_exponent}"
            )
        if not 0 <= self.mantissa <= F64_MANTISSA_MASK:
            raise InvariantViolation(
                f"mantissa must fit {F64_MANTISSA_BITS} bits: {self.mantissa}"
            )

    @classmethod
    def infinity(cls, neg: bool) -> "FloatBits":
        return cls(int(neg), F64_EXPONENT_MAX, 0)

    @classmethod
    def from_bits(cls, u: int) -> "FloatBits":
        return cls(
            (u >> 63) & 1,
            (u >> F64_MANTISSA_BITS) & F64_EXPONENT_MAX,
            u & F64_MANTISSA_MASK,
        )

    @classmethod
    def from_float(cls, x: float) -> "FloatBits":
        return cls.from_bits(float_to_bits(x))

    def to_bits(self) -> int:
        return (
            (self.sign << 63)
            | (self.biased_exponent << F64_MANTISSA_BITS)
            | self.mantissa
        )

    def to_float(self) -> float:
        return bits_to_float(self.to_bits())

    def is_subnormal(self) -> bool:
        return self.biased_exponent == 0 and self.mantissa != 0


# ---------------------------------------------------------------------------
# Parse report
# ---------------------------------------------------------------------------

class ParsePath(Enum):
    """Tier that produced a parse result."""
    ZERO = "zero"
    FAST = "fast"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ParseReport:
    """Diagnostic view of a single `parse_float` call.

    `lexed` is None when the lexer rejected the text; the value then comes
    from the fallback.
    """

    text: Any
    value: float
    path: ParsePath
    lexed: Optional[ManExp10] = None

    @property
    def used_fast_path(self) -> bool:
        """True unless the fallback ran. The signed-zero shortcut counts as fast."""
        return self.path is not ParsePath.FALLBACK


__all__ = [
    "ManExp10",
    "LUTEntry",
    "FloatBits",
    "ParsePath",
    "ParseReport",
]
