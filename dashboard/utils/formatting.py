"""
Display formatting helpers for dashboard values.

Money is stored in cents and rendered as USD; dates are rendered with the
CLDR "medium" pattern for the requested locale (e.g. "Jan 1, 2022").
Formatting is delegated to Babel so separators and sign placement follow
locale data instead of hand-built strings.
"""

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Sequence

from babel import Locale
from babel.core import UnknownLocaleError
from babel.dates import format_date
from babel.numbers import format_currency as format_money

from dashboard.db.types import RevenuePoint, YAxis

DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"

# Returned instead of raising when a date cannot be parsed
INVALID_DATE = "Invalid Date"

CENTS = Decimal("0.01")
Y_AXIS_STEP = 1000


def _to_decimal(amount: Optional[int | float | Decimal | str]) -> Decimal:
    if amount is None:
        return Decimal(0)
    if isinstance(amount, Decimal):
        return amount
    # str() keeps floats at their shortest repr instead of binary expansion
    return Decimal(str(amount))


def _resolve_locale(locale: Optional[str]) -> Locale:
    """Parse a BCP-47 ("en-US") or POSIX ("en_US") tag, falling back to en_US."""
    if not locale:
        return Locale.parse(DEFAULT_LOCALE)
    try:
        return Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        return Locale.parse(DEFAULT_LOCALE)


def format_currency(amount: Optional[int | float | Decimal | str]) -> str:
    """
    Format an amount in cents as a USD currency string.

    Args:
        amount: Amount in minor units. Postgres SUM() results may arrive as
            str or Decimal, both are accepted. None renders as $0.00.

    Returns:
        String like "$1,234.56" ("-$10.00" for negative amounts).

    Examples:
        >>> format_currency(0)
        '$0.00'
        >>> format_currency(1000000)
        '$10,000.00'
    """
    cents = _to_decimal(amount)

    # Room for every integer digit plus the two cents digits
    with localcontext() as context:
        context.prec = max(context.prec, cents.adjusted() + 3)
        dollars = (cents / 100).quantize(CENTS, rounding=ROUND_HALF_UP)
        return format_money(dollars, DEFAULT_CURRENCY, locale=DEFAULT_LOCALE)


def _parse_calendar_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Unsupported date value: {type(value).__name__}")

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        # Time of day (and any offset) is dropped; only the written date counts
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text)


def format_date_to_local(date_string: str | date, locale: str = "en-US") -> str:
    """
    Format an ISO-8601 date or date-time as a localized display date.

    Args:
        date_string: "2022-01-01", "2022-01-01T12:34:56", or a date object
        locale: BCP-47 locale tag. Unknown locales fall back to en-US.

    Returns:
        Localized medium date ("Jan 1, 2022" for en-US), or INVALID_DATE if
        the input cannot be parsed.
    """
    try:
        day = _parse_calendar_date(date_string)
    except (TypeError, ValueError):
        return INVALID_DATE

    return format_date(day, format="medium", locale=_resolve_locale(locale))


def generate_y_axis(revenue: Optional[Sequence[RevenuePoint]]) -> YAxis:
    """
    Build the revenue chart's Y axis labels.

    Labels step down from the highest revenue (rounded up to the next
    thousand) to zero, in thousands: ["$12K", "$11K", ..., "$0K"].
    Revenue values are whole dollars and are not divided by 100.
    """
    highest_record = max(
        (point.get("revenue") or 0 for point in revenue or []),
        default=0,
    )
    highest_record = max(highest_record, 0)
    top_label = int(math.ceil(highest_record / Y_AXIS_STEP)) * Y_AXIS_STEP

    y_axis_labels = [
        f"${value // Y_AXIS_STEP}K"
        for value in range(top_label, -1, -Y_AXIS_STEP)
    ]

    return {"y_axis_labels": y_axis_labels, "top_label": top_label}
