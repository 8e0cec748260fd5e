"""
elparse Core Constants (integer domain)
=======================================

Only integer constants live here: the power-of-ten table layout, the
IEEE-754 binary64 field layout, and the lexer limits. Bit-level bridges and
hex formatting helpers live in `fmt.py`.
"""

# NOTE: BIAS, N and the log2(10) approximation are coupled. Changing any of
# them (or the table range) means the table self-check must still pass for
# every entry, otherwise importing `elparse.tables` fails.

# ---------------------------------------------------------------------------
# Power-of-ten table generation
# ---------------------------------------------------------------------------

#: Working precision for table generation. (1 << N) is comfortably larger
#: than 10**POW10_GENERATOR_LIMIT, so no precision is lost before normalisation.
TABLE_WORK_BITS: int = 2048

#: Significand width of one table entry.
TABLE_SIGNIFICAND_BITS: int = 128

#: 1214 = 1023 + 191. 1023 is the binary64 exponent bias; 191 is
#: (3 * 64) - 1, the top bit of the 192-bit product of a 64-bit mantissa and
#: a 128-bit table significand.
BIAS: int = 1214

#: Fixed-point approximation of log2(10): 217706 / 65536 ~= 3.321930.
LOG2_10_NUMERATOR: int = 217706
LOG2_10_SHIFT: int = 16

#: 1087 = 1023 + 64. Offset of the estimated biased exponent.
LOG2_10_OFFSET: int = 1087

#: Inclusive decimal exponent range of the shipped table. Any non-zero
#: mantissa below 10**19 scaled by 10**-343 is under half the smallest
#: subnormal; scaled by 10**309 it is beyond the largest finite double.
POW10_MIN_EXP: int = -342
POW10_MAX_EXP: int = 308

#: Hard generator limit on |e10|. Must cover the table range above.
POW10_GENERATOR_LIMIT: int = 350


# ---------------------------------------------------------------------------
# IEEE-754 binary64 layout
# ---------------------------------------------------------------------------

F64_MANTISSA_BITS: int = 52
F64_EXPONENT_BITS: int = 11
F64_EXPONENT_BIAS: int = 1023

#: All-ones biased exponent (infinity / NaN).
F64_EXPONENT_MAX: int = (1 << F64_EXPONENT_BITS) - 1   # 2047

F64_MANTISSA_MASK: int = (1 << F64_MANTISSA_BITS) - 1
F64_IMPLICIT_BIT: int = 1 << F64_MANTISSA_BITS
F64_SIGN_BIT: int = 1 << 63


# ---------------------------------------------------------------------------
# Wide-integer lanes
# ---------------------------------------------------------------------------

U64_BITS: int = 64
U64_MASK: int = (1 << U64_BITS) - 1

#: Width of the full mantissa-by-table product (64 x 128).
PRODUCT_BITS: int = 192


# ---------------------------------------------------------------------------
# Lexer limits
# ---------------------------------------------------------------------------

#: At most 19 decimal digits fit a u64 with headroom; the 20th aborts.
MANTISSA_MAX_DIGITS: int = 19
MANTISSA_LIMIT: int = 10 ** MANTISSA_MAX_DIGITS

#: Signed 16-bit exponent range.
EXP10_MIN: int = -(1 << 15)   # -32768
EXP10_MAX: int = (1 << 15) - 1   # 32767


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "TABLE_WORK_BITS",
    "TABLE_SIGNIFICAND_BITS",
    "BIAS",
    "LOG2_10_NUMERATOR",
    "LOG2_10_SHIFT",
    "LOG2_10_OFFSET",
    "POW10_MIN_EXP",
    "POW10_MAX_EXP",
    "POW10_GENERATOR_LIMIT",
    "F64_MANTISSA_BITS",
    "F64_EXPONENT_BITS",
    "F64_EXPONENT_BIAS",
    "F64_EXPONENT_MAX",
    "F64_MANTISSA_MASK",
    "F64_IMPLICIT_BIT",
    "F64_SIGN_BIT",
    "U64_BITS",
    "U64_MASK",
    "PRODUCT_BITS",
    "MANTISSA_MAX_DIGITS",
    "MANTISSA_LIMIT",
    "EXP10_MIN",
    "EXP10_MAX",
]
