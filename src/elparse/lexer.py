"""
Decimal literal lexer: text -> ManExp10 (sign, integer mantissa, decimal exponent).

Accepted grammar (underscores are no-op separators among digits):

    literal  := [sign] mantissa [('e' | 'E') [sign] digit {digit | '_'}]
    mantissa := digit run containing at most one '.', at least one digit
    sign     := '+' | '-'

Anything else, a mantissa of 20 or more digits, or an exponent outside the
signed 16-bit range is rejected with None. A rejection is not an error: the
orchestrator hands the original text to the fallback parser.

The cursor-level helpers take `(text, pos)` and report where they stopped so
that they can be chained, and tested, one piece at a time.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

from .core.constants import EXP10_MIN, EXP10_MAX, MANTISSA_MAX_DIGITS
from .core.datatypes import ManExp10

# Debug printing control
DEBUG_LEXER = bool(int(os.environ.get("ELPARSE_DEBUG_LEXER", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_LEXER:
        print(msg)


def _is_digit(c: str) -> bool:
    # str.isdigit() would also accept non-ASCII digits.
    return "0" <= c <= "9"


def parse_leading_sign(text: str, pos: int = 0) -> Optional[Tuple[bool, int]]:
    """Consume an optional '+'/'-' at `pos`.

    Returns (is_negative, next_pos), or None when there is no input left at
    all. A lone sign is accepted here; the mantissa parser rejects it.
    """
    if pos >= len(text):
        return None
    c = text[pos]
    if c == "+" or c == "-":
        return c == "-", pos + 1
    return False, pos


def parse_mantissa(text: str, pos: int = 0) -> Optional[Tuple[int, int, bool, int]]:
    """Collapse the digit run at `pos` into an integer mantissa.

    Returns (mantissa, implicit_e10, has_exponent, next_pos) such that
    mantissa * 10**implicit_e10 is the value of the digits. When
    has_exponent is True, next_pos is just past the 'e'/'E' marker.

    Returns None for a second '.', any character outside [0-9._eE], no
    digits at all, or more than 19 digits (leading zeros included).
    """
    n = len(text)
    decimal_seen = False
    digits = 0
    digits_pre_decimal = 0
    mantissa = 0
    has_exponent = False

    while pos < n:
        c = text[pos]
        pos += 1
        if c == "_":
            continue
        if c == ".":
            if decimal_seen:
                return None
            decimal_seen = True
        elif c == "e" or c == "E":
            has_exponent = True
            break
        elif _is_digit(c):
            digits += 1
            if digits > MANTISSA_MAX_DIGITS:
                return None
            mantissa = mantissa * 10 + (ord(c) - 48)
            if not decimal_seen:
                digits_pre_decimal += 1
        else:
            return None

    if digits == 0:
        return None
    return mantissa, digits_pre_decimal - digits, has_exponent, pos


def parse_exp10(text: str, pos: int = 0) -> Optional[int]:
    """Parse the explicit exponent starting just after 'e'/'E'.

    Consumes the rest of the text: an optional sign, then a digit run in
    which underscores are skipped. The first character after the marker (or
    after the sign) must be a digit. Accumulation stops as soon as the value
    leaves the signed 16-bit range, so arbitrarily long digit runs are cheap.
    """
    n = len(text)
    if pos >= n:
        return None

    neg = False
    c = text[pos]
    if c == "+" or c == "-":
        neg = c == "-"
        pos += 1
        if pos >= n:
            return None
        c = text[pos]
    if not _is_digit(c):
        return None

    limit = -EXP10_MIN if neg else EXP10_MAX
    exp10 = 0
    while pos < n:
        c = text[pos]
        pos += 1
        if c == "_":
            continue
        if not _is_digit(c):
            return None
        exp10 = exp10 * 10 + (ord(c) - 48)
        if exp10 > limit:
            return None
    return -exp10 if neg else exp10


def parse_man_exp10(text: str) -> Optional[ManExp10]:
    """Reduce a whole literal to ManExp10, or None if the fast path cannot take it."""
    sign = parse_leading_sign(text)
    if sign is None:
        _dbg("lexer: empty input")
        return None
    neg, pos = sign

    mant = parse_mantissa(text, pos)
    if mant is None:
        _dbg(f"lexer: mantissa rejected in {text!r}")
        return None
    man, implicit_e10, has_exponent, pos = mant

    explicit_e10 = 0
    if has_exponent:
        explicit_e10 = parse_exp10(text, pos)
        if explicit_e10 is None:
            _dbg(f"lexer: exponent rejected in {text!r}")
            return None

    # Each operand is in range on its own; the sum is checked too.
    e10 = implicit_e10 + explicit_e10
    if e10 < EXP10_MIN or e10 > EXP10_MAX:
        _dbg(f"lexer: exponent sum {e10} out of i16 range in {text!r}")
        return None

    return ManExp10(neg=neg, man=man, e10=e10)


__all__ = [
    "parse_leading_sign",
    "parse_mantissa",
    "parse_exp10",
    "parse_man_exp10",
]
