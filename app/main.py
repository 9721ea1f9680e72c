import logging
import sys
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI

from app.config import LOG_FORMAT, Settings
from app.exceptions.custom import AvailabilityError, HotelNotFoundError
from app.exceptions.handlers import (
    availability_error_handler,
    hotel_not_found_handler,
)
from app.routers.availability import router as availability_router
from app.services.availability import AvailabilityService
from app.services.dispatcher import CommandDispatcher
from app.services.loader import load_bookings, load_hotels


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )

    hotels = load_hotels(settings.hotels_file)
    bookings = load_bookings(settings.bookings_file)
    service = AvailabilityService(hotels, bookings)

    app.state.clock = date.today
    app.state.availability_service = service
    app.state.command_dispatcher = CommandDispatcher(
        service, today=lambda: app.state.clock(),
    )

    yield


app = FastAPI(title="Hotel Availability", lifespan=lifespan)

app.add_exception_handler(HotelNotFoundError, hotel_not_found_handler)
app.add_exception_handler(AvailabilityError, availability_error_handler)

app.include_router(availability_router)
