"""
Tests for unit normalization and lenient integer parsing.
"""

from __future__ import annotations

from decimal import Decimal, getcontext

import pytest

from backend_arcwallet.analytics.units import (
    format_fixed,
    parse_hex_quantity,
    parse_int,
    to_decimal,
    wei_to_decimal,
    wide_context,
)


def test_to_decimal_one_unit():
    assert to_decimal("1000000000000000000") == "1.0000"
    assert to_decimal(10**18) == "1.0000"


def test_to_decimal_rounds_to_four_places():
    # 0.00005 -> half up
    assert to_decimal("50000000000000") == "0.0001"
    assert to_decimal("49999999999999") == "0.0000"
    assert to_decimal("123456789000000000000") == "123.4568"


def test_to_decimal_absent_or_garbage_is_zero():
    assert to_decimal(None) == "0.0000"
    assert to_decimal("") == "0.0000"
    assert to_decimal("not-a-number") == "0.0000"


def test_to_decimal_large_balance_no_precision_loss():
    """Whale-sized balances stay exact (float would drop digits)."""
    raw = "123456789123456789123456789"
    assert wei_to_decimal(raw) == Decimal("123456789.123456789123456789")
    assert to_decimal(raw) == "123456789.1235"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("21000", 21000),
        (" 42 ", 42),
        (7, 7),
        (None, 0),
        ("", 0),
        ("abc", 0),
        ("-5", 0),
        ("+5", 0),
        ("1.5", 0),
        (True, 0),
        ("1_000", 0),
        ("\u0661\u0662\u0663", 0),  # Arabic-Indic digits
        ("\uff11\uff12", 0),  # fullwidth digits
    ],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [("0x1bc16d674ec80000", 2 * 10**18), ("0x5", 5), ("0X0", 0), ("0x", 0), (None, 0), ("0xzz", 0), ("0x1_0", 0), ("0x-1", 0)],
)
def test_parse_hex_quantity(raw, expected):
    assert parse_hex_quantity(raw) == expected


def test_format_fixed_places():
    assert format_fixed(Decimal("8.279858"), 2) == "8.28"
    assert format_fixed(Decimal("99.99828"), 1) == "100.0"
    assert format_fixed(0, 1) == "0.0"
    assert format_fixed(Decimal("0")) == "0.0000"


def test_to_decimal_fifty_digit_amount():
    raw = "12345678901234567890123456789012345678901234567890"
    assert wei_to_decimal(raw) == Decimal("12345678901234567890123456789012.345678901234567890")
    assert to_decimal(raw) == "12345678901234567890123456789012.3457"


def test_format_fixed_beyond_default_precision():
    value = Decimal("9" * 40 + ".99995")
    assert format_fixed(value) == "1" + "0" * 40 + ".0000"
    assert format_fixed(value, 2) == "1" + "0" * 40 + ".00"


def test_wide_context_grows_with_operands():
    assert wide_context(Decimal(0)).prec == getcontext().prec
    assert wide_context(Decimal(10) ** 40).prec == getcontext().prec + 41
    assert wide_context(Decimal("0.001")).prec == getcontext().prec
