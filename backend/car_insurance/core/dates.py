"""Calendar-date helpers for the YYYY-MM-DD wire format."""

from __future__ import annotations

import re
from datetime import date, datetime

from car_insurance.core.constants import DATE_FORMAT
from car_insurance.core.errors import InvalidDateFormatError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DEFAULT_DATE_FORMAT_MESSAGE = "Invalid date format. Use YYYY-MM-DD."


def parse_iso_date(value: str | None, message: str = DEFAULT_DATE_FORMAT_MESSAGE) -> date:
    """
    Parse a strict ``YYYY-MM-DD`` string.

    Raises InvalidDateFormatError for malformed strings and for
    impossible calendar dates such as ``2024-02-30``.
    """
    if value is None or not _ISO_DATE_RE.match(value.strip()):
        raise InvalidDateFormatError(message, value=value)
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormatError(message, value=value) from None


def add_years(value: date, years: int) -> date:
    """Shift a date by whole years; Feb 29 falls back to Feb 28."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)
