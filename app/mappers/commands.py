"""Parsing and formatting for the text command prompt.

``Availability(H1, 20240901, SGL)``
``Availability(H1, 20240901-20240903, DBL)``
``Search(H1, 365, SGL)``
"""

import re
from datetime import date

from pydantic import BaseModel

from app.exceptions.custom import MalformedCommandError, MalformedIntegerError
from app.mappers.dates import format_date, parse_date_range
from app.schemas.responses import AvailabilityRange

AVAILABILITY = "Availability"
SEARCH = "Search"

_INT_RE = re.compile(r"[+-]?[0-9]+")


class AvailabilityCommand(BaseModel):
    model_config = {"frozen": True}

    hotel_id: str
    start_date: date
    end_date: date
    room_type: str


class SearchCommand(BaseModel):
    model_config = {"frozen": True}

    hotel_id: str
    days_ahead: int
    room_type: str


Command = AvailabilityCommand | SearchCommand


def _split_args(command: str, name: str) -> list[str]:
    inner = command[len(name) + 1:-1]
    return [arg.strip() for arg in inner.split(",")]


def parse_int(token: str) -> int:
    """Signed ASCII digits only; no underscores or other Unicode digits."""
    text = token.strip()
    if not _INT_RE.fullmatch(text):
        raise MalformedIntegerError(f"Invalid number '{token}'")
    return int(text)


def parse_command(command: str) -> Command:
    """Turn one line of input into a typed command. Raises AvailabilityError subclasses."""
    command = command.strip()

    if command.startswith(f"{AVAILABILITY}(") and command.endswith(")"):
        args = _split_args(command, AVAILABILITY)
        if len(args) != 3:
            raise MalformedCommandError(
                "Availability command requires 3 arguments: hotelId, date/dateRange, roomType"
            )
        hotel_id, date_token, room_type = args
        start_date, end_date = parse_date_range(date_token)
        return AvailabilityCommand(
            hotel_id=hotel_id, start_date=start_date, end_date=end_date, room_type=room_type,
        )

    if command.startswith(f"{SEARCH}(") and command.endswith(")"):
        args = _split_args(command, SEARCH)
        if len(args) != 3:
            raise MalformedCommandError(
                "Search command requires 3 arguments: hotelId, daysAhead, roomType"
            )
        hotel_id, days_token, room_type = args
        return SearchCommand(
            hotel_id=hotel_id, days_ahead=parse_int(days_token), room_type=room_type,
        )

    raise MalformedCommandError("Invalid command format")


def format_ranges(ranges: list[AvailabilityRange]) -> str:
    """``(20240901-20240902, 1), (20240904-20240905, 2)``; empty string for none."""
    return ", ".join(
        f"({format_date(r.start_date)}-{format_date(r.end_date)}, {r.available_rooms})"
        for r in ranges
    )
