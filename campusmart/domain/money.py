from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


def dollars_to_cents(text: str | None) -> int:
    """Parse a dollar amount typed by a user into integer cents (bad input -> 0)."""
    s = (text or "").strip().lstrip("$").replace(",", "")
    if not s:
        return 0
    try:
        d = Decimal(s)
    except InvalidOperation:
        return 0
    if not d.is_finite() or d < 0:
        return 0
    return int((d * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_cents(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    dollars, rem = divmod(abs(int(cents)), 100)
    return f"{sign}${dollars:,}.{rem:02d}"
