"""Pure functions for the YYYYMMDD date format used in data files and commands.

No I/O, no side effects.
"""

import re
from datetime import date, timedelta

from app.exceptions.custom import MalformedDateError

DATE_FORMAT = "%Y%m%d"
RANGE_SEPARATOR = "-"

_DATE_RE = re.compile(r"[0-9]{8}")


def parse_yyyymmdd(text: str) -> date:
    """Strictly parse an 8-digit YYYYMMDD string. Raises ValueError."""
    if not isinstance(text, str) or not _DATE_RE.fullmatch(text):
        raise ValueError(f"Invalid date '{text}', expected YYYYMMDD")
    return date(int(text[:4]), int(text[4:6]), int(text[6:]))


def parse_date(token: str) -> date:
    """Parse a command date token. Raises MalformedDateError."""
    try:
        return parse_yyyymmdd(token.strip())
    except ValueError:
        raise MalformedDateError(f"Invalid date '{token}', expected YYYYMMDD") from None


def _parse_range_part(part: str, token: str) -> date:
    # Halves are not trimmed: "20240901 - 20240903" is rejected.
    try:
        return parse_yyyymmdd(part)
    except ValueError:
        raise MalformedDateError(
            f"Invalid date range '{token}', expected YYYYMMDD-YYYYMMDD"
        ) from None


def parse_date_range(token: str) -> tuple[date, date]:
    """Parse ``YYYYMMDD`` or ``YYYYMMDD-YYYYMMDD`` into an inclusive (start, end).

    A single date yields (d, d).
    """
    token = token.strip()
    if RANGE_SEPARATOR not in token:
        day = parse_date(token)
        return day, day

    parts = token.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        raise MalformedDateError(
            f"Invalid date range '{token}', expected YYYYMMDD-YYYYMMDD"
        )
    return _parse_range_part(parts[0], token), _parse_range_part(parts[1], token)


def format_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def last_occupied_night(departure: date) -> date:
    """Departure is exclusive; the room is vacated that morning."""
    return departure - timedelta(days=1)
