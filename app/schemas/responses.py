from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class AvailabilityRange(BaseModel):
    model_config = {"frozen": True}

    start_date: date
    end_date: date  # inclusive
    available_rooms: int  # minimum over every day in the range


class AvailabilityResponse(BaseModel):
    hotel_id: str
    room_type: str
    start_date: date
    end_date: date
    available_rooms: int


class SearchResponse(BaseModel):
    hotel_id: str
    room_type: str
    days_ahead: int
    ranges: list[AvailabilityRange] = []


class CommandRequest(BaseModel):
    command: str


class CommandResponse(BaseModel):
    command: str
    result: str
