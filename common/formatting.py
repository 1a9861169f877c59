"""Currency and date presentation helpers."""

from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def _round(amount: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    """US dollars without cents, e.g. ``$2,450``."""
    rounded = _round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def format_amount(amount: float) -> str:
    """Compact dollars for stat cards: ``$1.2M``, ``$14K``, else full currency."""
    if amount >= 1_000_000:
        return f"${_round(amount / 1_000_000, 1)}M"
    if amount >= 1_000:
        return f"${_round(amount / 1_000)}K"
    return format_currency(amount)


def format_date(value: Optional[date]) -> str:
    """``Jan 15, 2024`` or ``N/A``."""
    if value is None:
        return "N/A"
    return value.strftime("%b %d, %Y")


def today_utc() -> date:
    return datetime.now(timezone.utc).date()
