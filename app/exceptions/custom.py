class AvailabilityError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class HotelNotFoundError(AvailabilityError):
    def __init__(self, hotel_id: str):
        self.hotel_id = hotel_id
        super().__init__(f"Hotel {hotel_id} not found")


class MalformedCommandError(AvailabilityError):
    pass


class MalformedDateError(AvailabilityError):
    pass


class MalformedIntegerError(AvailabilityError):
    pass


class DataLoadError(Exception):
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
