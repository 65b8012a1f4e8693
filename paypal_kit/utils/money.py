from __future__ import annotations

from decimal import Decimal, InvalidOperation


def parse_amount(raw: object) -> Decimal:
    """Parse a provider amount such as ``"12.50"``; anything unparseable is zero."""
    if raw is None or isinstance(raw, bool):
        return Decimal("0")
    try:
        d = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not d.is_finite():
        return Decimal("0")
    return d


def format_amount(amount: int | float | Decimal) -> str:
    # 10.0 -> "10", 9.90 -> "9.9", 1e2 -> "100"; inf and nan pass through as text
    d = Decimal(str(amount))
    if not d.is_finite():
        return str(amount)
    return format(d.normalize(), "f")


__all__ = ["parse_amount", "format_amount"]
