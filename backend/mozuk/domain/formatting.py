"""Parsing and formatting helpers shared by identifier derivation and the ledger.

All functions are total: malformed input degrades to a neutral value
(``None`` / zero) instead of raising.
"""

import re
from decimal import (
    MAX_PREC,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Exact arithmetic for money: cent quantisation and sums never round,
# and overflow yields Infinity instead of trapping
MONEY_CONTEXT = Context(prec=MAX_PREC, rounding=ROUND_HALF_UP, traps=[])

SEGMENT_SEPARATOR = "-"

# ASCII digits after the final separator, e.g. "1000-003" -> "003"
_SUFFIX_PATTERN = re.compile(r"-([0-9]+)\Z")


def extract_suffix_number(display_id: str | None) -> int | None:
    """Return the trailing numeric suffix of a display id, or None."""
    if not isinstance(display_id, str):
        return None
    match = _SUFFIX_PATTERN.search(display_id)
    if match is None:
        return None
    return int(match.group(1))


def extract_suffix_segment(display_id: str | None) -> str | None:
    """Return the trailing numeric suffix as written (zero padding kept)."""
    if not isinstance(display_id, str):
        return None
    match = _SUFFIX_PATTERN.search(display_id)
    return match.group(1) if match else None


def pad_number(value: int, digits: int) -> str:
    """Left-pad ``value`` with zeros to ``digits``; wider values are kept as-is."""
    return str(value).zfill(digits)


def to_money(value: object) -> Decimal:
    """Coerce an amount to a cent-precision Decimal.

    Floats go through ``str()`` so that ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary expansion.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    if not amount.is_finite():
        return ZERO
    with localcontext(MONEY_CONTEXT):
        money = amount.quantize(CENT)
    # Exponents past Emax cannot be quantized; keep the exact value
    return money if money.is_finite() else amount


def format_currency(amount: object, symbol: str = "$") -> str:
    """Render an amount as currency text, e.g. ``$1,234.50`` or ``-$50.00``."""
    money = to_money(amount)
    sign = "-" if money < 0 else ""
    return f"{sign}{symbol}{money.copy_abs():,.2f}"
