"""Grammar for the fixed 'Added on' timestamp.

Only one shape is accepted: ``Thursday, 19 April 2018 10:44:34``. Weekday and
month names come from the fixed English tables below, never from the host
locale. The weekday must be a real weekday name but is not checked against
the calendar date.
"""

import re
from datetime import datetime

from .errors import InvalidDate
from .tokens import line_end

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_NUMBERS: dict[str, int] = {name: number for number, name in enumerate(MONTHS, start=1)}

DATE_PATTERN = re.compile(
    r"(?P<weekday>[A-Za-z]+), (?P<day>[0-9]{1,2}) (?P<month>[A-Za-z]+) (?P<year>[0-9]{4}) "
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
)


def parse_date(text: str, pos: int = 0) -> tuple[datetime, int]:
    """Parse a timestamp that runs from pos to the end of the line.

    Returns:
        Tuple of (naive datetime, offset of the line end)

    Raises:
        InvalidDate: If the shape, a name, or the calendar values are wrong
    """
    end = line_end(text, pos)
    raw = text[pos:end]

    match = DATE_PATTERN.fullmatch(text, pos, end)
    if not match:
        raise InvalidDate(
            f"Date does not match 'Weekday, D Month YYYY HH:MM:SS': {raw!r}", offset=pos
        )

    weekday = match.group("weekday")
    if weekday not in WEEKDAYS:
        raise InvalidDate(f"Unknown weekday {weekday!r}", offset=match.start("weekday"))

    month_name = match.group("month")
    month = MONTH_NUMBERS.get(month_name)
    if month is None:
        raise InvalidDate(f"Unknown month {month_name!r}", offset=match.start("month"))

    try:
        date = datetime(
            int(match.group("year")),
            month,
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
        )
    except ValueError as e:
        raise InvalidDate(f"Not a valid calendar date/time {raw!r}: {e}", offset=pos) from e

    return date, end


def format_date(date: datetime) -> str:
    """Render a datetime in the same fixed shape parse_date accepts."""
    return (
        f"{WEEKDAYS[date.weekday()]}, {date.day} {MONTHS[date.month - 1]} "
        f"{date.year:04d} {date:%H:%M:%S}"
    )
