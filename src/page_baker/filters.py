"""Jinja2 filters available to page templates."""

import re
import unicodedata
from datetime import date, datetime


def format_date(value, fmt: str = "%B %d, %Y") -> str:
    """Format a date, a datetime or an ISO date string for display.

    Args:
        value: date, datetime, or string like "2026-01-29" / "2026-01-29 06:51:50"
        fmt: strftime format

    Returns:
        Formatted date string like "January 29, 2026", or the input unchanged
        if it can't be parsed

    Examples:
        >>> format_date("2026-01-05")
        'January 5, 2026'
    """
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if not isinstance(value, (date, datetime)):
        return str(value)
    return value.strftime(fmt).replace(" 0", " ")


def slugify(value: str) -> str:
    """Turn a title into a lowercase, dash-separated URL segment.

    Examples:
        >>> slugify("Hello, Wörld!")
        'hello-world'
    """
    if not value:
        return ""
    value = unicodedata.normalize("NFKD", str(value)).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value).strip().lower()
    return re.sub(r"[-\s_]+", "-", value)


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "slugify": slugify,
}
