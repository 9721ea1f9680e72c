import json
from datetime import date

import httpx
import pytest
from httpx import ASGITransport

from app.schemas.inventory import Booking, Hotel
from app.services.availability import AvailabilityService

TODAY = date(2024, 8, 30)

HOTELS = [
    {
        "id": "H1",
        "name": "Hotel California",
        "roomTypes": [
            {"code": "SGL", "description": "Single Room", "amenities": ["WiFi"], "features": []},
            {"code": "DBL", "description": "Double Room", "amenities": ["WiFi", "TV"], "features": ["Sea View"]},
        ],
        "rooms": [
            {"roomType": "SGL", "roomId": "101"},
            {"roomType": "SGL", "roomId": "102"},
            {"roomType": "DBL", "roomId": "201"},
            {"roomType": "DBL", "roomId": "202"},
        ],
    },
    {
        "id": "H2",
        "name": "Tiny Inn",
        "rooms": [{"roomType": "SGL", "roomId": "1"}],
    },
]

BOOKINGS = [
    {"hotelId": "H1", "arrival": "20240901", "departure": "20240903", "roomType": "SGL", "roomRate": "Prepaid"},
    {"hotelId": "H1", "arrival": "20240902", "departure": "20240905", "roomType": "DBL", "roomRate": "Standard"},
    {"hotelId": "H2", "arrival": "20240901", "departure": "20240902", "roomType": "SGL"},
    {"hotelId": "H2", "arrival": "20240901", "departure": "20240903", "roomType": "SGL"},
]


@pytest.fixture
def hotels():
    return [Hotel.model_validate(h) for h in HOTELS]


@pytest.fixture
def bookings():
    return [Booking.model_validate(b) for b in BOOKINGS]


@pytest.fixture
def service(hotels, bookings):
    return AvailabilityService(hotels, bookings)


@pytest.fixture
def data_files(tmp_path):
    hotels_path = tmp_path / "hotels.json"
    bookings_path = tmp_path / "bookings.json"
    hotels_path.write_text(json.dumps(HOTELS), encoding="utf-8")
    bookings_path.write_text(json.dumps(BOOKINGS), encoding="utf-8")
    return hotels_path, bookings_path


@pytest.fixture
def mock_env(monkeypatch, data_files):
    hotels_path, bookings_path = data_files
    monkeypatch.setenv("HOTELS_FILE", str(hotels_path))
    monkeypatch.setenv("BOOKINGS_FILE", str(bookings_path))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        app.state.clock = lambda: TODAY
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
