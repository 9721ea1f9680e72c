from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    hotels_file: str = "hotels.json"
    bookings_file: str = "bookings.json"
    log_level: str = "INFO"
