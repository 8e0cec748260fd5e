import pytest

from elparse.core import ManExp10, MANTISSA_MAX_DIGITS
from elparse.lexer import (
    parse_exp10,
    parse_leading_sign,
    parse_mantissa,
    parse_man_exp10,
)


# -----------------------------
# parse_exp10
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("-2639", -2639),
        ("+173", 173),
        ("0_00___0", 0),
        ("0+0_0", None),
        ("999999", None),
        ("", None),
        ("32767", 32767),
        ("32768", None),
        ("-32768", -32768),
        ("-32769", None),
        ("+", None),
        ("-", None),
        ("_5", None),
        ("1_2", 12),
        ("12.7", None),
        ("9" * 500, None),
    ],
)
def test_parse_exp10(text, expected):
    print(f"[parse_exp10] {text[:20]!r} -> expect {expected}")
    assert parse_exp10(text) == expected


def test_parse_exp10_starts_at_pos():
    print("[parse_exp10-pos] '1e-17' from pos=2 -> -17")
    assert parse_exp10("1e-17", 2) == -17


# -----------------------------
# parse_leading_sign
# -----------------------------

@pytest.mark.parametrize(
    "text,expected,next_char",
    [
        ("-3", True, "3"),
        ("+7", False, "7"),
        ("00", False, "0"),
        ("90", False, "9"),
        ("-", True, None),
    ],
)
def test_parse_leading_sign_and_next_char(text, expected, next_char):
    print(f"[parse_leading_sign] {text!r} -> neg={expected}, next={next_char!r}")
    neg, pos = parse_leading_sign(text)
    assert neg is expected
    assert (text[pos] if pos < len(text) else None) == next_char


def test_parse_leading_sign_empty_is_none():
    print("[parse_leading_sign-empty] '' -> None")
    assert parse_leading_sign("") is None


# -----------------------------
# parse_mantissa
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45e10", (12345, -2, True, 7)),
        ("123.", (123, 0, False, 4)),
        ("123e1", (123, 0, True, 4)),
        (".5", (5, -1, False, 2)),
        ("1_000.000_1", (10000001, -4, False, 11)),
        ("+", None),
        (".", None),
        ("e5", None),
        ("", None),
        ("1.2.3", None),
        ("12a", None),
        ("1 ", None),
        ("\u0661", None),  # ARABIC-INDIC DIGIT ONE
    ],
)
def test_parse_mantissa(text, expected):
    print(f"[parse_mantissa] {text!r} -> expect {expected}")
    assert parse_mantissa(text) == expected


def test_parse_mantissa_digit_limit():
    print(f"[parse_mantissa-limit] {MANTISSA_MAX_DIGITS} digits accepted, one more rejected")
    nineteen = "9" * MANTISSA_MAX_DIGITS
    assert parse_mantissa(nineteen) == (int(nineteen), 0, False, len(nineteen))
    assert parse_mantissa(nineteen + "9") is None
    # Leading zeros count toward the limit.
    assert parse_mantissa("0." + "0" * 18 + "1") is None
    # Underscores do not.
    assert parse_mantissa("1_" * MANTISSA_MAX_DIGITS) is not None


# -----------------------------
# parse_man_exp10
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        # valid numbers with exponent
        ("137.25e+17", ManExp10(neg=False, man=13725, e10=15)),
        ("-137.25e17", ManExp10(neg=True, man=13725, e10=15)),
        ("-137.25e-17", ManExp10(neg=True, man=13725, e10=-19)),
        ("24e3", ManExp10(neg=False, man=24, e10=3)),
        ("-24e3", ManExp10(neg=True, man=24, e10=3)),
        ("-24000e-3", ManExp10(neg=True, man=24000, e10=-3)),
        ("1E5", ManExp10(neg=False, man=1, e10=5)),
        # naughty exponents
        ("125.25e-16-12", None),
        ("125e+-112", None),
        ("-125e-112.7", None),
        ("+125e999999", None),
        ("1e", None),
        ("1e+", None),
        # valid numbers without exponent
        ("2.56", ManExp10(neg=False, man=256, e10=-2)),
        ("-2.56", ManExp10(neg=True, man=256, e10=-2)),
        ("3.", ManExp10(neg=False, man=3, e10=0)),
        ("+.2777", ManExp10(neg=False, man=2777, e10=-4)),
        ("-0", ManExp10(neg=True, man=0, e10=0)),
        # pathologies
        ("", None),
        ("-", None),
        ("--2.5", None),
        ("-+2.5", None),
        ("2.5.3", None),
        ("inf", None),
        ("nan", None),
        ("0x1p3", None),
        (" 1.5", None),
    ],
)
def test_parse_man_exp10(text, expected):
    print(f"[parse_man_exp10] {text!r} -> expect {expected}")
    assert parse_man_exp10(text) == expected


def test_exponent_sum_overflow_rejected():
    print("[parse_man_exp10-sum] implicit + explicit exponent leaving i16 range -> None")
    # 0.5e-32768: explicit exponent is in range, the sum (-32769) is not.
    assert parse_man_exp10("0.5e-32768") is None
    assert parse_man_exp10("5e-32768") == ManExp10(neg=False, man=5, e10=-32768)
    # A positive explicit exponent pulled back into range by the implicit one.
    assert parse_man_exp10("0.5e32767") == ManExp10(neg=False, man=5, e10=32766)


def test_lexer_is_deterministic():
    print("[parse_man_exp10-determinism] repeated calls give identical results")
    results = {parse_man_exp10("6.02214076e23") for _ in range(5)}
    assert results == {ManExp10(neg=False, man=602214076, e10=15)}
