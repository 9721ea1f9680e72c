from datetime import date

from pydantic import BaseModel, field_validator, model_validator

from app.mappers.dates import parse_yyyymmdd


def _match_field_names(model: type[BaseModel], data):
    """Map incoming keys onto field names ignoring case and underscores.

    ``RoomType``, ``roomType`` and ``room_type`` all land on ``room_type``.
    Unknown keys pass through and are ignored by pydantic.
    """
    if not isinstance(data, dict):
        return data
    lookup = {name.replace("_", "").lower(): name for name in model.model_fields}
    matched = {}
    for key, value in data.items():
        name = lookup.get(str(key).replace("_", "").lower(), key)
        matched.setdefault(name, value)
    return matched


class InventoryModel(BaseModel):
    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive_keys(cls, data):
        return _match_field_names(cls, data)


class RoomTypeInfo(InventoryModel):
    code: str
    description: str | None = None
    amenities: list[str] = []
    features: list[str] = []


class Room(InventoryModel):
    room_type: str
    room_id: str | None = None


class Hotel(InventoryModel):
    id: str
    name: str | None = None
    room_types: list[RoomTypeInfo] = []
    rooms: list[Room] = []


class Booking(InventoryModel):
    hotel_id: str
    room_type: str
    arrival: date  # inclusive
    departure: date  # exclusive
    room_rate: str | None = None

    @field_validator("arrival", "departure", mode="before")
    @classmethod
    def _parse_compact_date(cls, value):
        if isinstance(value, date):
            return value
        return parse_yyyymmdd(value)
