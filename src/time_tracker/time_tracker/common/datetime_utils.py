from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import DATE_FORMAT

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def is_iso_date(value: object) -> bool:
    """True for a real calendar day written as zero-padded YYYY-MM-DD."""
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def to_iso_date(value: date | datetime | str) -> str:
    """Coerce a date-like value into the opaque ``YYYY-MM-DD`` key.

    Strings carrying a time part (``2025-04-15T00:00:00.000Z``) keep only the
    calendar day as written; no timezone conversion is applied.
    """
    if isinstance(value, datetime):
        return value.date().strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return str(value).strip()[:10]


def iter_iso_dates(start: str, end: str) -> Iterator[str]:
    """Yield every day between two ``YYYY-MM-DD`` keys, both inclusive."""
    current = parse_iso_date(start)
    last = parse_iso_date(end)
    while current <= last:
        yield current.strftime(DATE_FORMAT)
        current += timedelta(days=1)


def today_iso() -> str:
    """Current local day.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today().strftime(DATE_FORMAT)
