import logging

from fastapi import APIRouter, Query

from app.dependencies import AvailabilityDep, DispatcherDep, TodayDep
from app.mappers.dates import parse_date_range
from app.schemas.responses import (
    AvailabilityResponse,
    CommandRequest,
    CommandResponse,
    SearchResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/availability/{hotel_id}", response_model=AvailabilityResponse)
async def get_availability(
    hotel_id: str,
    service: AvailabilityDep,
    date_range: str = Query(alias="date", description="YYYYMMDD or YYYYMMDD-YYYYMMDD"),
    room_type: str = Query(),
) -> AvailabilityResponse:
    start_date, end_date = parse_date_range(date_range)
    available = service.availability(hotel_id, start_date, end_date, room_type)
    logger.info(
        "Availability %s/%s %s..%s: %d", hotel_id, room_type, start_date, end_date, available,
    )
    return AvailabilityResponse(
        hotel_id=hotel_id,
        room_type=room_type,
        start_date=start_date,
        end_date=end_date,
        available_rooms=available,
    )


@router.get("/search/{hotel_id}", response_model=SearchResponse)
async def search_availability(
    hotel_id: str,
    service: AvailabilityDep,
    today: TodayDep,
    days_ahead: int = Query(ge=0),
    room_type: str = Query(),
) -> SearchResponse:
    ranges = service.search(hotel_id, days_ahead, room_type, today)
    logger.info(
        "Search %s/%s from %s for %d days: %d ranges",
        hotel_id, room_type, today, days_ahead, len(ranges),
    )
    return SearchResponse(
        hotel_id=hotel_id,
        room_type=room_type,
        days_ahead=days_ahead,
        ranges=ranges,
    )


@router.post("/command", response_model=CommandResponse)
async def run_command(
    request: CommandRequest,
    dispatcher: DispatcherDep,
) -> CommandResponse:
    result = dispatcher.process(request.command)
    logger.info("Command %r -> %r", request.command, result)
    return CommandResponse(command=request.command, result=result)
