"""
Core exception types for elparse.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "ElparseError",
    "ParseFloatError",
    "TableGenerationError",
    "InvariantViolation",
]


class ElparseError(Exception):
    """Base class for every error raised by elparse."""
    pass


class ParseFloatError(ElparseError, ValueError):
    """Raised when no tier (fast path or fallback) can parse the literal.

    Attributes
    ----------
    text : Any
        The original, unmodified input handed to `parse_float`.
    """

    def __init__(self, text, reason=None):
        msg = f"could not convert literal to float: {text!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.text = text
        self.reason = reason


class TableGenerationError(ElparseError):
    """Raised when a power-of-ten table entry fails its self-check.

    This is fatal: a table in this state must never be served.
    """

    def __init__(self, e10, detail):
        super().__init__(f"power-of-ten table entry for 10^{e10} is invalid: {detail}")
        self.e10 = e10
        self.detail = detail


class InvariantViolation(ElparseError, ValueError):
    """Raised when a core datatype is built with out-of-range fields."""
    pass
