"""
elparse Core
============

Unified exports for the integer-domain constants, datatypes, bit-level
helpers and exceptions shared by the lexer, the power-of-ten table and the
Eisel-Lemire engine.
"""

# NOTE:
#   Everything in `core` is dependency-free and side-effect free. The
#   power-of-ten table itself is built in `elparse.tables`, not here, so that
#   importing the core never pays the table construction cost.

# Integer-domain constants
from .constants import (
    BIAS,
    TABLE_WORK_BITS,
    TABLE_SIGNIFICAND_BITS,
    LOG2_10_NUMERATOR,
    LOG2_10_SHIFT,
    LOG2_10_OFFSET,
    POW10_MIN_EXP,
    POW10_MAX_EXP,
    MANTISSA_MAX_DIGITS,
    EXP10_MIN,
    EXP10_MAX,
)

# Bit-level bridges and formatting helpers
from .fmt import (
    float_to_bits,
    bits_to_float,
    fmt_u64,
    fmt_bits,
    fmt_wide,
)

# Core datatypes
from .datatypes import (
    ManExp10,
    LUTEntry,
    FloatBits,
    ParsePath,
    ParseReport,
)

# Core exceptions
from .exc import ElparseError, ParseFloatError, TableGenerationError, InvariantViolation

__all__ = [
    # constants
    "BIAS",
    "TABLE_WORK_BITS",
    "TABLE_SIGNIFICAND_BITS",
    "LOG2_10_NUMERATOR",
    "LOG2_10_SHIFT",
    "LOG2_10_OFFSET",
    "POW10_MIN_EXP",
    "POW10_MAX_EXP",
    "MANTISSA_MAX_DIGITS",
    "EXP10_MIN",
    "EXP10_MAX",
    # fmt
    "float_to_bits",
    "bits_to_float",
    "fmt_u64",
    "fmt_bits",
    "fmt_wide",
    # datatypes
    "ManExp10",
    "LUTEntry",
    "FloatBits",
    "ParsePath",
    "ParseReport",
    # exceptions
    "ElparseError",
    "ParseFloatError",
    "TableGenerationError",
    "InvariantViolation",
]
