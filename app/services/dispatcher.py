import logging
from collections.abc import Callable
from datetime import date

from app.exceptions.custom import AvailabilityError
from app.mappers.commands import (
    AvailabilityCommand,
    SearchCommand,
    format_ranges,
    parse_command,
)
from app.services.availability import AvailabilityService

logger = logging.getLogger(__name__)


class CommandDispatcher:
    def __init__(
        self,
        availability: AvailabilityService,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._availability = availability
        self._today = today

    def process(self, command: str) -> str:
        """Run one text command and render its result.

        Errors propagate as AvailabilityError subclasses; nothing is rendered
        for a failed command.
        """
        try:
            parsed = parse_command(command)
        except AvailabilityError as exc:
            logger.warning("Rejected command %r: %s", command, exc.message)
            raise

        if isinstance(parsed, AvailabilityCommand):
            count = self._availability.availability(
                parsed.hotel_id, parsed.start_date, parsed.end_date, parsed.room_type,
            )
            return str(count)

        if isinstance(parsed, SearchCommand):
            ranges = self._availability.search(
                parsed.hotel_id, parsed.days_ahead, parsed.room_type, self._today(),
            )
            return format_ranges(ranges)

        raise TypeError(f"Unhandled command {parsed!r}")
