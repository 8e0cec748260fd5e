"""
Eisel-Lemire fast path: ManExp10 -> correctly rounded binary64, or abstain.

The decimal mantissa is normalised to 64 bits and multiplied by the 128-bit
table approximation of 10**e10. With BIAS = 1023 + 191 folded into the
table, the biased binary64 exponent falls straight out of the product:

    exp = biased_e2 - clz(man) - (1 - msb(product))

The table entry is a lower bound (floor) of the true power of ten, so the
exact product lies somewhere in [P, P + m64). A result is returned only when
no rounding boundary (a value exactly halfway between two doubles) falls in
that window; then every candidate for the exact product rounds to the same
double. Otherwise the engine returns None and the caller falls back to an
exact parser. An exact tie is always handed to the fallback.

Alignment notes:
- Subnormals are rounded once, directly from the full product, at the
  subnormal bit position; the ambiguity check is re-run there.
- Overflow past the largest finite double is a provable result: signed
  infinity, not an abstention.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

from .core.constants import (
    F64_EXPONENT_MAX,
    F64_IMPLICIT_BIT,
    F64_MANTISSA_BITS,
    F64_MANTISSA_MASK,
    PRODUCT_BITS,
    U64_BITS,
    U64_MASK,
)
from .core.datatypes import FloatBits, ManExp10
from .core.fmt import fmt_wide
from .tables import POW10_TABLE, PowerTable

# Debug printing control
DEBUG_ENGINE = bool(int(os.environ.get("ELPARSE_DEBUG_ENGINE", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_ENGINE:
        print(msg)


# Bits kept from the product: 53 significand bits plus one round bit.
_CANDIDATE_BITS = F64_MANTISSA_BITS + 2


def wide_mul_64x128(m64: int, hi64: int, lo64: int) -> Tuple[int, int]:
    """Full 64 x 128 -> 192-bit product, split as (top 128 bits, low 64 bits).

    Computed from the two 64 x 64 partial products so that nothing is
    truncated along the way.
    """
    lo_prod = m64 * lo64
    hi_prod = m64 * hi64
    product = (hi_prod << U64_BITS) + lo_prod
    return product >> U64_BITS, product & U64_MASK


def _round_or_abstain(product: int, shift: int, error: int) -> Optional[int]:
    """Round `product` to nearest at bit `shift`, or None if that is not provable.

    The true product lies in [product, product + error). Halfway points are
    the odd multiples of 2**shift; if one falls inside that window,
    including its first value, the rounding direction is unknown.
    """
    half = 1 << shift
    upper = product + error - 1
    # Count of halfway points <= x is (x + half) >> (shift + 1).
    if (upper + half) >> (shift + 1) != (product - 1 + half) >> (shift + 1):
        return None
    cand = product >> shift
    return (cand >> 1) + (cand & 1)


def eisel_lemire(me: ManExp10, table: PowerTable = POW10_TABLE) -> Optional[float]:
    """Correctly rounded value of `me`, or None when it cannot be proven.

    `me.man` must be non-zero; zero is the orchestrator's shortcut.
    """
    if me.man == 0:
        raise ValueError("eisel_lemire requires a non-zero mantissa")

    entry = table.lookup(me.e10)
    if entry is None:
        _dbg(f"engine: e10={me.e10} outside table [{table.min_exp}, {table.max_exp}]")
        return None

    # Normalise so the top bit of the 64-bit mantissa is set.
    clz = U64_BITS - me.man.bit_length()
    m64 = me.man << clz

    hi128, lo64 = wide_mul_64x128(m64, entry.hi64, entry.lo64)
    product = (hi128 << U64_BITS) | lo64
    # Both factors are normalised, so the product has 191 or 192 bits.
    msb = product >> (PRODUCT_BITS - 1)
    exp = entry.biased_e2 - clz - (1 - msb)
    shift = PRODUCT_BITS - _CANDIDATE_BITS - (1 - msb)
    if DEBUG_ENGINE:
        _dbg(f"engine: e10={me.e10} m64={m64:#x} product={fmt_wide(product, 3)} exp={exp} shift={shift}")

    mantissa = _round_or_abstain(product, shift, m64)
    if mantissa is None:
        _dbg(f"engine: ambiguous rounding for man={me.man} e10={me.e10}")
        return None

    if exp <= 0:
        # Subnormal: drop 1 - exp more bits and round once from the full product.
        shift += 1 - exp
        exp = 0
        mantissa = _round_or_abstain(product, shift, m64)
        if mantissa is None:
            _dbg(f"engine: ambiguous subnormal rounding for man={me.man} e10={me.e10}")
            return None
        # Rounding up to 2**52 lands on the smallest normal.
        if mantissa & F64_IMPLICIT_BIT:
            exp = 1
    elif mantissa >> (F64_MANTISSA_BITS + 1):
        # Carry out of 53 bits.
        mantissa >>= 1
        exp += 1

    if exp >= F64_EXPONENT_MAX:
        _dbg(f"engine: overflow to infinity for man={me.man} e10={me.e10}")
        return FloatBits.infinity(me.neg).to_float()

    bits = FloatBits(sign=int(me.neg), biased_exponent=exp, mantissa=mantissa & F64_MANTISSA_MASK)
    return bits.to_float()


__all__ = [
    "wide_mul_64x128",
    "eisel_lemire",
]
