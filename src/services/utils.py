"""Shared utility functions for services."""
from datetime import date, datetime
from typing import Optional


def parse_timestamp(value) -> Optional[datetime]:
    """Parse a backend timestamp into a datetime.

    Handles ISO 8601 strings (with or without a trailing 'Z'), epoch
    milliseconds/seconds and datetime/date objects. Returns None when
    the value can't be interpreted.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        # Heuristic: anything past year ~2286 in seconds is really milliseconds
        seconds = value / 1000 if value > 1e10 else value
        try:
            return datetime.fromtimestamp(seconds)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned.endswith("Z"):
            cleaned = cleaned[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(cleaned)
        except ValueError:
            return None
    return None


def format_date(value, na_text: str = "") -> str:
    """Format a timestamp as MM/DD/YYYY."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return na_text
    return parsed.strftime("%m/%d/%Y")


def format_price(value, na_text: str = "-") -> str:
    """Format a single price into a display string."""
    if value is None or value == "":
        return na_text
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return str(value)


def as_number(value) -> Optional[float]:
    """Coerce a numeric field (possibly sent as a string) to float, or None."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
