"""
Calendar-date helpers.

All business rules compare plain calendar dates in the server's local
timezone. A ``YYYY-MM-DD`` string is always turned into exactly that
year/month/day, so a plant watered on 2024-01-15 never shows up as the 14th.
"""
import re
from datetime import date, datetime
from typing import Any, Optional

YMD_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def today() -> date:
    """Local calendar date."""
    return date.today()


def parse_local_date(value: Any) -> Optional[date]:
    """
    Parse a request value into a local calendar date.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and, as a
    fallback, any ISO-8601 date-time string. Returns None for empty or
    invalid input instead of raising.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _to_local(value).date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text or not text.isascii():
        return None

    match = YMD_PATTERN.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return _to_local(parsed).date()


def _to_local(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone()


def is_not_future(value: date) -> bool:
    return value <= today()


def is_strict_future(value: date) -> bool:
    return value > today()


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")
