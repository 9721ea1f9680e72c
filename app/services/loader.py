import json
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions.custom import DataLoadError
from app.schemas.inventory import Booking, Hotel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _load_records(path: str | Path, model: type[T]) -> list[T]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(str(path), f"cannot read file ({exc.strerror})") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(str(path), f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(raw, list):
        raise DataLoadError(str(path), "expected a JSON array at top level")

    records: list[T] = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            raise DataLoadError(
                str(path), f"record {index} is not a valid {model.__name__}: {exc}"
            ) from exc
    return records


def load_hotels(path: str | Path) -> list[Hotel]:
    hotels = _load_records(path, Hotel)
    logger.info("Loaded %d hotels from %s", len(hotels), path)
    return hotels


def load_bookings(path: str | Path) -> list[Booking]:
    bookings = _load_records(path, Booking)
    logger.info("Loaded %d bookings from %s", len(bookings), path)
    return bookings
