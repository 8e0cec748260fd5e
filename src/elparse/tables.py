"""
Power-of-ten lookup table for the Eisel-Lemire fast path.

Each entry is a 128-bit approximation of 10**e10 with its top bit set,
truncated toward zero, plus a biased binary exponent:

    10**e10 ~= ((hi64 << 64) | lo64) * 2**(biased_e2 - BIAS)

Generation uses exact big-integer arithmetic at a working precision of
TABLE_WORK_BITS bits. Negative powers are produced by floor division, so the
table underestimates 10**e10 whenever the power is not exactly representable
in 128 bits; the engine's ambiguity check accounts for that.

Every entry is self-checked against an independent linear estimate of its
binary exponent. A mismatch raises TableGenerationError, and since
POW10_TABLE is built when this module is imported, a bad table can never be
handed to a caller.

Alignment notes:
- The table is immutable and shared; lookups are O(1) by (e10 - min_exp).
- Big-integer arithmetic only runs here, never on the parsing hot path.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Iterator, List, Optional, Tuple

from .core.constants import (
    BIAS,
    LOG2_10_NUMERATOR,
    LOG2_10_OFFSET,
    LOG2_10_SHIFT,
    POW10_GENERATOR_LIMIT,
    POW10_MAX_EXP,
    POW10_MIN_EXP,
    TABLE_SIGNIFICAND_BITS,
    TABLE_WORK_BITS,
    U64_BITS,
    U64_MASK,
)
from .core.datatypes import LUTEntry
from .core.exc import TableGenerationError
from .core.fmt import fmt_u64

# Debug printing control
DEBUG_TABLE = bool(int(os.environ.get("ELPARSE_DEBUG_TABLE", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_TABLE:
        print(msg)


# ----------------------------
# Entry generation
# ----------------------------

def estimate_biased_e2(e10: int) -> int:
    """Cheap estimate of the biased exponent of 10**e10.

    floor(e10 * log2(10)) + 1087, with log2(10) approximated by
    217706 / 65536. Python's >> floors negative values, which is what the
    estimate needs.
    """
    return ((LOG2_10_NUMERATOR * e10) >> LOG2_10_SHIFT) + LOG2_10_OFFSET


def gen_lut_entry(e10: int) -> LUTEntry:
    """Build and self-check the table entry for 10**e10."""
    if not -POW10_GENERATOR_LIMIT <= e10 <= POW10_GENERATOR_LIMIT:
        raise TableGenerationError(e10, f"outside generator range +/-{POW10_GENERATOR_LIMIT}")

    # (1 << N) dwarfs 10**|e10|, so the floor division below keeps well over
    # 128 significant bits.
    z = 1 << TABLE_WORK_BITS
    if e10 >= 0:
        z *= 10 ** e10
    else:
        z //= 10 ** (-e10)

    # Truncate to exactly 128 significant bits. A single shift by the surplus
    # floors exactly like shifting one bit at a time.
    e2 = -TABLE_WORK_BITS
    surplus = z.bit_length() - TABLE_SIGNIFICAND_BITS
    if surplus > 0:
        z >>= surplus
        e2 += surplus
    if z.bit_length() != TABLE_SIGNIFICAND_BITS:
        raise TableGenerationError(e10, f"significand has {z.bit_length()} bits, expected {TABLE_SIGNIFICAND_BITS}")

    biased_e2 = e2 + BIAS
    approx = estimate_biased_e2(e10)
    if approx != biased_e2:
        raise TableGenerationError(e10, f"estimated exponent {approx} does not match biased exponent {biased_e2}")

    entry = LUTEntry(e10=e10, hi64=z >> U64_BITS, lo64=z & U64_MASK, biased_e2=biased_e2)
    _dbg(f"table: {entry}")
    return entry


# ----------------------------
# Table
# ----------------------------

@dataclass(frozen=True)
class PowerTable:
    """Immutable sequence of LUTEntry covering [min_exp, max_exp] without gaps."""

    entries: Tuple[LUTEntry, ...]
    min_exp: int

    def __post_init__(self):
        if not self.entries:
            raise TableGenerationError(self.min_exp, "empty table")
        for i, entry in enumerate(self.entries):
            if entry.e10 != self.min_exp + i:
                raise TableGenerationError(entry.e10, f"out of order at index {i}")

    @property
    def max_exp(self) -> int:
        return self.min_exp + len(self.entries) - 1

    def lookup(self, e10: int) -> Optional[LUTEntry]:
        """Return the entry for 10**e10, or None outside the table range."""
        if e10 < self.min_exp or e10 > self.max_exp:
            return None
        return self.entries[e10 - self.min_exp]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[LUTEntry]:
        return iter(self.entries)

    def __contains__(self, e10: object) -> bool:
        return isinstance(e10, int) and self.min_exp <= e10 <= self.max_exp


def build_power_table(min_exp: int = POW10_MIN_EXP, max_exp: int = POW10_MAX_EXP) -> PowerTable:
    """Generate the table for every e10 in [min_exp, max_exp]."""
    if min_exp > max_exp:
        raise TableGenerationError(min_exp, f"empty range [{min_exp}, {max_exp}]")
    entries = tuple(gen_lut_entry(e10) for e10 in range(min_exp, max_exp + 1))
    _dbg(f"table: built {len(entries)} entries for [{min_exp}, {max_exp}]")
    return PowerTable(entries=entries, min_exp=min_exp)


def verify_table(table: PowerTable) -> None:
    """Re-derive every entry with exact rationals; raise on the first mismatch.

    Checks that each stored significand is floor(10**e10 / 2**e2) with
    exactly 128 bits and that the biased exponent matches the estimate.
    """
    for entry in table:
        e10, e2 = entry.e10, entry.e2
        exact = Fraction(10) ** e10 / Fraction(2) ** e2
        expected = math.floor(exact)
        if entry.m128 != expected:
            raise TableGenerationError(e10, f"significand {entry.m128:#x} != floor value {expected:#x}")
        if expected.bit_length() != TABLE_SIGNIFICAND_BITS:
            raise TableGenerationError(e10, f"floor value has {expected.bit_length()} bits")
        if entry.biased_e2 != estimate_biased_e2(e10):
            raise TableGenerationError(e10, f"biased exponent {entry.biased_e2} fails estimate")


def render_table(table: PowerTable, name: str = "POW10_TABLE") -> str:
    """Render the table as Python source, for hosts that ship it as a generated module."""
    lines: List[str] = [
        "# Generated by elparse.tables.render_table; do not edit.",
        f"{name}_MIN_EXP = {table.min_exp}",
        f"{name}_MAX_EXP = {table.max_exp}",
        f"{name}_BIAS = {BIAS}",
        f"{name} = (",
    ]
    for entry in table:
        lines.append(
            f"    ({fmt_u64(entry.hi64)}, {fmt_u64(entry.lo64)}, {entry.biased_e2}),"
            f"  # 10^{entry.e10}, pow2 = {entry.e2}"
        )
    lines.append(")")
    return "\n".join(lines) + "\n"


def table_from_triples(triples: Iterable[Tuple[int, int, int]], min_exp: int) -> PowerTable:
    """Rebuild a PowerTable from (hi64, lo64, biased_e2) triples, e.g. a rendered module."""
    entries = tuple(
        LUTEntry(e10=min_exp + i, hi64=hi, lo64=lo, biased_e2=be)
        for i, (hi, lo, be) in enumerate(triples)
    )
    return PowerTable(entries=entries, min_exp=min_exp)


# Process-wide table: built once at import, read-only afterwards.
POW10_TABLE: PowerTable = build_power_table(POW10_MIN_EXP, POW10_MAX_EXP)


__all__ = [
    "estimate_biased_e2",
    "gen_lut_entry",
    "PowerTable",
    "build_power_table",
    "verify_table",
    "render_table",
    "table_from_triples",
    "POW10_TABLE",
]
