"""Formatting helpers for estimate output.

Amounts are shown the way Indian home builders read them: Indian digit
grouping (12,34,567) and lakh/crore short forms (e.g. '₹42.5 L', '₹1.25 Cr').
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from griha.models.estimate import CostRange

LAKH = Decimal(100_000)
CRORE = Decimal(10_000_000)


def group_indian(whole: int) -> str:
    """Group digits as thousands, then pairs: 1234567 -> '12,34,567'."""
    digits = str(whole)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def _to_decimal(amount: Decimal | float) -> Decimal:
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def format_inr(amount: Decimal | float) -> str:
    """Format an amount in rupees.

    - Amounts >= ₹10,000: no paise (e.g., '₹12,34,567')
    - Amounts < ₹10,000: with paise (e.g., '₹9,876.54')
    """
    value = _to_decimal(amount)
    sign = "-" if value < 0 else ""
    value = abs(value)
    if value >= 10_000:
        whole = int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        return f"{sign}₹{group_indian(whole)}"
    cents = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    whole = int(cents)
    paise = int((cents - whole) * 100)
    return f"{sign}₹{group_indian(whole)}.{paise:02d}"


def format_inr_short(amount: Decimal | float) -> str:
    """Short lakh/crore form; falls back to :func:`format_inr` below a lakh."""
    value = _to_decimal(amount)
    if abs(value) >= CRORE:
        return f"₹{value / CRORE:.2f} Cr"
    if abs(value) >= LAKH:
        return f"₹{value / LAKH:.1f} L"
    return format_inr(value)


def format_cost_range(cr: CostRange) -> str:
    """Format a CostRange as '₹X L - ₹Y L'."""
    return f"{format_inr_short(cr.low)} - {format_inr_short(cr.high)}"
