"""
Currency formatting for narrative and display output.

Amounts are rendered the way the en-IN locale does: whole rupees, the last
three digits grouped together and every pair of digits above that separated
by a comma (12,34,567).
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

RUPEE_SYMBOL = "₹"
NOT_AVAILABLE = "N/A"


def group_indian_digits(digits: str) -> str:
    """Insert en-IN thousands separators into a string of digits."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(value: Optional[float], include_symbol: bool = False) -> str:
    """
    Format an amount as whole rupees with en-IN grouping.

    Args:
        value: Amount to format; None, NaN and infinities render as "N/A"
        include_symbol: Prefix the rupee sign

    Returns:
        Formatted amount, e.g. "12,34,568" or "-₹5,000"
    """
    if value is None or not math.isfinite(value):
        return NOT_AVAILABLE

    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    negative = rounded < 0
    grouped = group_indian_digits(str(abs(int(rounded))))
    if include_symbol:
        grouped = f"{RUPEE_SYMBOL}{grouped}"
    return f"-{grouped}" if negative else grouped


def format_currency_list(values: Iterable[float], include_symbol: bool = False) -> str:
    """Comma-and-space separated list of formatted amounts."""
    return ", ".join(format_currency(value, include_symbol) for value in values)
