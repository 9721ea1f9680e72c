"""Interactive command prompt.

    python -m app.cli --hotels hotels.json --bookings bookings.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from app.config import LOG_FORMAT, Settings
from app.exceptions.custom import AvailabilityError, DataLoadError
from app.services.availability import AvailabilityService
from app.services.dispatcher import CommandDispatcher
from app.services.loader import load_bookings, load_hotels

logger = logging.getLogger(__name__)

BANNER = """Hotel Booking System
Enter commands (or blank line to exit):
Examples:
  Availability(H1, 20240901, SGL)
  Availability(H1, 20240901-20240903, DBL)
  Search(H1, 365, SGL)
"""


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="app.cli",
        description="Query hotel room availability from JSON data files.",
    )
    parser.add_argument("--hotels", default=settings.hotels_file, help="path to hotels.json")
    parser.add_argument("--bookings", default=settings.bookings_file, help="path to bookings.json")
    return parser


def run_prompt(dispatcher: CommandDispatcher, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands until a blank line or EOF. Errors never end the loop."""
    print(BANNER, file=stdout)
    while True:
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line or not line.strip():
            break

        try:
            result = dispatcher.process(line.strip())
        except AvailabilityError as exc:
            print(f"Error: {exc.message}", file=stdout)
            continue
        print(result, file=stdout)


def main(argv: list[str] | None = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    settings = Settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if not Path(args.hotels).is_file() or not Path(args.bookings).is_file():
        print("Error: One or both files not found.", file=stdout)
        return 1

    try:
        hotels = load_hotels(args.hotels)
        bookings = load_bookings(args.bookings)
    except DataLoadError as exc:
        logger.error("Failed to load data: %s", exc)
        print(f"Error: {exc}", file=stdout)
        return 1

    dispatcher = CommandDispatcher(AvailabilityService(hotels, bookings))
    run_prompt(dispatcher, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
