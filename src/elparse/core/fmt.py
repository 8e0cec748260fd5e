"""
float <-> binary64 bit pattern, and hex rendering of 64-bit lanes.

The engine never needs these on its hot path except to assemble the final
float from its bit pattern. Everything else here serves debug traces, test
messages and the rendered table source.
"""

import os
import struct

from .constants import U64_MASK

# Debug printing control
DEBUG_FMT = bool(int(os.environ.get("ELPARSE_DEBUG_FMT", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# float <-> bits
# ---------------------------------------------------------------------------

def float_to_bits(x: float) -> int:
    """Return the binary64 bit pattern of `x` as an unsigned 64-bit integer."""
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def bits_to_float(u: int) -> float:
    """Inverse of `float_to_bits`. `u` must fit in 64 bits."""
    if u < 0 or u > U64_MASK:
        raise ValueError(f"bit pattern out of u64 range: {u}")
    return struct.unpack("<d", struct.pack("<Q", u))[0]


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_u64(u: int) -> str:
    """Zero-padded hex for one 64-bit lane, e.g. 0x8000000000000000."""
    return f"0x{u:016x}"


def fmt_bits(x: float) -> str:
    """Hex bit pattern of a float; stable for logs and test messages.

      1.0   -> '0x3ff0000000000000'
      -0.0  -> '0x8000000000000000'
    """
    return fmt_u64(float_to_bits(x))


def fmt_wide(u: int, lanes: int) -> str:
    """Render a wide integer as '_'-separated 64-bit lanes, most significant first."""
    parts = []
    for i in reversed(range(lanes)):
        parts.append(f"{(u >> (64 * i)) & U64_MASK:016x}")
    _dbg(f"fmt_wide: lanes={lanes} parts={parts}")
    return "0x" + "_".join(parts)


__all__ = [
    "float_to_bits",
    "bits_to_float",
    "fmt_u64",
    "fmt_bits",
    "fmt_wide",
]
