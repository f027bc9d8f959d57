"""Helpers for the calendar dates used as rates record keys."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Final

from eurofx.errors import DateParseError

# First business day with published euro reference rates.
MIN_DATE: Final[date] = date(1999, 1, 4)
DATE_FORMAT: Final[str] = "%Y-%m-%d"

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateLike = str | date


def parse_date(value: DateLike) -> date:
    """Parse ``value`` into a :class:`date`.

    ``date`` instances are returned unchanged, ``datetime`` instances are
    truncated to their calendar day and strings must use the ``YYYY-MM-DD``
    form. Anything else raises :class:`DateParseError`.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.match(value.strip()):
        raise DateParseError(value)
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(value) from exc


def format_date(value: date) -> str:
    """Return ``value`` in canonical ``YYYY-MM-DD`` form."""

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def days_between(later: date, earlier: date) -> int:
    """Return the signed number of whole days from ``earlier`` to ``later``."""

    return (later - earlier).days


def shift_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


__all__ = [
    "DATE_FORMAT",
    "DateLike",
    "MIN_DATE",
    "days_between",
    "format_date",
    "parse_date",
    "shift_days",
]
