import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import AvailabilityError, HotelNotFoundError

logger = logging.getLogger(__name__)


async def hotel_not_found_handler(_request: Request, exc: HotelNotFoundError) -> JSONResponse:
    logger.info("Hotel not found: %s", exc.hotel_id)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message},
    )


async def availability_error_handler(_request: Request, exc: AvailabilityError) -> JSONResponse:
    logger.warning("Rejected query: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message},
    )
