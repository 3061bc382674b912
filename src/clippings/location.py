"""Grammar for location numbers such as ``4071`` or ``4071-4072``."""

from .errors import InvalidLocation
from .models import Location
from .tokens import parse_unsigned

RANGE_SEPARATOR = "-"


def parse_location(text: str, pos: int = 0) -> tuple[Location, int]:
    """Parse a location or location range starting at pos.

    Raises:
        InvalidLocation: On a missing or out-of-range number, or a range
            whose end precedes its start
    """
    start_pos = pos
    start, pos = parse_unsigned(text, pos, InvalidLocation, "location")

    end = None
    if text.startswith(RANGE_SEPARATOR, pos):
        end, pos = parse_unsigned(
            text, pos + len(RANGE_SEPARATOR), InvalidLocation, "location range end"
        )
        if end < start:
            raise InvalidLocation(
                f"Location range ends before it starts: {start}-{end}", offset=start_pos
            )

    return Location(start=start, end=end), pos
