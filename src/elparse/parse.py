"""
Orchestrator: lexer -> Eisel-Lemire fast path -> fallback.

`parse_float` is the single public entry point. It is pure and reentrant:
the only shared state is the immutable POW10_TABLE.

Escalation:
  1. Lex failure (grammar, digit/exponent overflow, empty input) -> fallback.
  2. Fast-path abstention (out-of-table exponent, ambiguous rounding) -> fallback.
  3. Fallback failure -> ParseFloatError carrying the original text.

The fallback always receives the original, unmodified text. By default it
is the built-in float(), which rounds correctly.
"""

from __future__ import annotations

import os
from typing import Callable, Optional, Tuple

from .core.datatypes import ManExp10, ParsePath, ParseReport
from .core.exc import ParseFloatError
from .eisel_lemire import eisel_lemire
from .lexer import parse_man_exp10

# Debug printing control
DEBUG_PARSE = bool(int(os.environ.get("ELPARSE_DEBUG_PARSE", "0")))

def _dbg(msg: str) -> None:
    if DEBUG_PARSE:
        print(msg)


Fallback = Callable[[str], float]


def _signed_zero(neg: bool) -> float:
    return -0.0 if neg else 0.0


def try_parse_float_fast(text: str) -> Optional[float]:
    """Lexer, zero shortcut and fast path only. None means 'use the fallback'."""
    me = parse_man_exp10(text)
    if me is None:
        return None
    if me.is_zero():
        return _signed_zero(me.neg)
    return eisel_lemire(me)


def _run_fallback(text: str, fallback: Optional[Fallback]) -> float:
    parse = float if fallback is None else fallback
    try:
        return parse(text)
    except ParseFloatError:
        raise
    except (ValueError, TypeError, OverflowError) as exc:
        raise ParseFloatError(text, str(exc)) from exc


def _parse(text: str, fallback: Optional[Fallback]) -> Tuple[float, ParsePath, Optional[ManExp10]]:
    if not isinstance(text, str):
        raise ParseFloatError(text, f"expected str, got {type(text).__name__}")

    me = parse_man_exp10(text)
    if me is not None:
        if me.is_zero():
            return _signed_zero(me.neg), ParsePath.ZERO, me
        value = eisel_lemire(me)
        if value is not None:
            return value, ParsePath.FAST, me

    _dbg(f"parse: fallback for {text!r} (lexed={me})")
    return _run_fallback(text, fallback), ParsePath.FALLBACK, me


def parse_float(text: str, *, fallback: Optional[Fallback] = None) -> float:
    """Parse a decimal literal into the nearest binary64 (ties to even).

    Raises ParseFloatError when neither the fast path nor the fallback
    accepts the text.
    """
    value, _, _ = _parse(text, fallback)
    return value


def parse_float_report(text: str, *, fallback: Optional[Fallback] = None) -> ParseReport:
    """Like parse_float, but also report which tier produced the value."""
    value, path, me = _parse(text, fallback)
    return ParseReport(text=text, value=value, path=path, lexed=me)


__all__ = [
    "Fallback",
    "parse_float",
    "parse_float_report",
    "try_parse_float_fast",
]
