"""Unit tests for suffix parsing and money helpers."""

from decimal import Decimal

import pytest

from mozuk.domain.formatting import (
    extract_suffix_number,
    extract_suffix_segment,
    format_currency,
    pad_number,
    to_money,
)


@pytest.mark.parametrize(
    "display_id, expected",
    [
        ("1000-007", 7),
        ("1000-003-12", 12),
        ("XXXX-001", 1),
        ("1000-XYZ", None),
        ("1000-", None),
        ("1000", None),
        ("1000-\u0669\u0669\u0669", None),
        ("1000-007\n", None),
        ("", None),
        (None, None),
        (42, None),
    ],
)
def test_extract_suffix_number(display_id, expected):
    assert extract_suffix_number(display_id) == expected


def test_extract_suffix_segment_keeps_padding():
    assert extract_suffix_segment("1000-007") == "007"
    assert extract_suffix_segment("1000-abc") is None


def test_pad_number():
    assert pad_number(7, 3) == "007"
    assert pad_number(12, 2) == "12"
    assert pad_number(1234, 3) == "1234"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Decimal("0.00")),
        (True, Decimal("0.00")),
        (100, Decimal("100.00")),
        (0.1, Decimal("0.10")),
        (Decimal("2.005"), Decimal("2.01")),
        ("1,234.5", Decimal("1234.50")),
        ("  ", Decimal("0.00")),
        ("abc", Decimal("0.00")),
        ("NaN", Decimal("0.00")),
        ("-3", Decimal("-3.00")),
        (Decimal("1e30"), Decimal("1000000000000000000000000000000.00")),
        (Decimal("123456789012345678901234567890.125"), Decimal("123456789012345678901234567890.13")),
        (object(), Decimal("0.00")),
    ],
)
def test_to_money(value, expected):
    assert to_money(value) == expected


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(-50) == "-$50.00"
    assert format_currency("12", symbol="€") == "€12.00"


def test_format_currency_beyond_default_precision():
    assert format_currency(Decimal("1e30")) == "$1,000,000,000,000,000,000,000,000,000,000.00"
    assert format_currency(Decimal("-1e30")) == "-$1,000,000,000,000,000,000,000,000,000,000.00"


def test_to_money_keeps_amounts_too_large_to_quantize():
    assert to_money(Decimal("1e1000000")) == Decimal("1e1000000")
