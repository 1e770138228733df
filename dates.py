# dates.py

import re
from datetime import date, datetime

from errors import InvalidDateFormat

TODAY = "today"
DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_date(token: str) -> date:
    """Turn a date token into a calendar date.

    `"today"` is the current local date; anything else must be a real
    `YYYY-MM-DD` date.
    """
    if token == TODAY:
        return date.today()
    # strptime alone would accept unpadded values like 2024-1-5
    if not _DATE_RE.match(token):
        raise InvalidDateFormat(f"Invalid date format: {token!r} does not match YYYY-MM-DD")
    try:
        return datetime.strptime(token, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormat(f"Invalid date format: {e}") from e


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)
