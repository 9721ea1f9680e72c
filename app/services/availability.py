import logging
from collections import Counter, defaultdict
from collections.abc import Iterable
from datetime import date, timedelta

from app.exceptions.custom import HotelNotFoundError, MalformedIntegerError
from app.mappers.dates import last_occupied_night
from app.schemas.inventory import Booking, Hotel
from app.schemas.responses import AvailabilityRange

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


class AvailabilityService:
    """Room availability over a static hotel catalog and booking ledger."""

    def __init__(self, hotels: Iterable[Hotel], bookings: Iterable[Booking]) -> None:
        self._hotels: dict[str, Hotel] = {}
        self._room_counts: Counter[tuple[str, str]] = Counter()
        for hotel in hotels:
            if hotel.id in self._hotels:
                logger.warning("Duplicate hotel id %s ignored", hotel.id)
                continue
            self._hotels[hotel.id] = hotel
            for room in hotel.rooms:
                self._room_counts[(hotel.id, room.room_type)] += 1

        self._bookings: dict[tuple[str, str], list[Booking]] = defaultdict(list)
        for booking in bookings:
            self._bookings[(booking.hotel_id, booking.room_type)].append(booking)

    @property
    def hotel_count(self) -> int:
        return len(self._hotels)

    def get_hotel(self, hotel_id: str) -> Hotel:
        hotel = self._hotels.get(hotel_id)
        if hotel is None:
            raise HotelNotFoundError(hotel_id)
        return hotel

    def compute_availability(
        self, hotel: Hotel, start_date: date, end_date: date, room_type: str,
    ) -> int:
        """Rooms of *room_type* free for the whole inclusive span.

        Every booking whose occupied nights touch the span counts against it,
        so this is a worst case for the span, not a per-day minimum. The
        result goes negative when a type is overbooked.
        """
        key = (hotel.id, room_type)
        total = self._room_counts.get(key, 0)
        overlapping = sum(
            1
            for b in self._bookings.get(key, ())
            if b.arrival <= end_date and last_occupied_night(b.departure) >= start_date
        )
        return total - overlapping

    def find_available_ranges(
        self, hotel: Hotel, start_date: date, end_date: date, room_type: str,
    ) -> list[AvailabilityRange]:
        """Maximal runs of days with free rooms inside ``[start_date, end_date)``.

        Each range carries the lowest single-day availability seen in it.
        """
        ranges: list[AvailabilityRange] = []
        current = start_date

        while current < end_date:
            availability = self.compute_availability(hotel, current, current, room_type)
            if availability <= 0:
                current += _ONE_DAY
                continue

            range_end = current
            min_available = availability
            while range_end + _ONE_DAY < end_date:
                next_day = range_end + _ONE_DAY
                next_available = self.compute_availability(
                    hotel, next_day, next_day, room_type,
                )
                if next_available <= 0:
                    break
                range_end = next_day
                min_available = min(min_available, next_available)

            ranges.append(AvailabilityRange(
                start_date=current,
                end_date=range_end,
                available_rooms=min_available,
            ))
            current = range_end + _ONE_DAY

        logger.debug(
            "Found %d ranges for %s/%s in [%s, %s)",
            len(ranges), hotel.id, room_type, start_date, end_date,
        )
        return ranges

    def availability(
        self, hotel_id: str, start_date: date, end_date: date, room_type: str,
    ) -> int:
        hotel = self.get_hotel(hotel_id)
        return self.compute_availability(hotel, start_date, end_date, room_type)

    def search(
        self, hotel_id: str, days_ahead: int, room_type: str, today: date,
    ) -> list[AvailabilityRange]:
        """Scan *days_ahead* days starting at *today* (today included)."""
        hotel = self.get_hotel(hotel_id)
        try:
            end_date = today + timedelta(days=days_ahead)
        except OverflowError:
            raise MalformedIntegerError(f"Days ahead {days_ahead} out of range") from None
        return self.find_available_ranges(hotel, today, end_date, room_type)
