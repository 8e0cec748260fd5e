# Top-level API for elparse.
"""
Top-level API for elparse.

Decimal literal -> binary64 conversion with the Eisel-Lemire fast path:
  - parse_float: the single entry point (fast path, then fallback)
  - parse_float_report: same, plus which tier produced the value
  - try_parse_float_fast: fast path only, None when it abstains

The lexer, the power-of-ten table and the engine are exported for hosts
that want to drive the stages themselves.
"""

from __future__ import annotations

from .parse import (
    Fallback,
    parse_float,
    parse_float_report,
    try_parse_float_fast,
)
from .lexer import (
    parse_leading_sign,
    parse_mantissa,
    parse_exp10,
    parse_man_exp10,
)
from .tables import (
    POW10_TABLE,
    PowerTable,
    build_power_table,
    gen_lut_entry,
    render_table,
    verify_table,
)
from .eisel_lemire import eisel_lemire

# Core data types and exceptions
from .core import (
    ManExp10,
    LUTEntry,
    FloatBits,
    ParsePath,
    ParseReport,
    ElparseError,
    ParseFloatError,
    TableGenerationError,
    InvariantViolation,
)

__all__ = [
    # entry points
    "Fallback",
    "parse_float",
    "parse_float_report",
    "try_parse_float_fast",
    # lexer
    "parse_leading_sign",
    "parse_mantissa",
    "parse_exp10",
    "parse_man_exp10",
    # table
    "POW10_TABLE",
    "PowerTable",
    "build_power_table",
    "gen_lut_entry",
    "render_table",
    "verify_table",
    # engine
    "eisel_lemire",
    # core data types
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
