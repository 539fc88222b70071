import re
from typing import Union

from conflict_calendar.models.time_interval import MINUTES_PER_DAY

_CLOCK_PAT = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock(value: str) -> int:
    """
    "09:30" -> 570
    """
    m = _CLOCK_PAT.match((value or "").strip())
    if not m:
        raise ValueError(f"invalid time '{value}', expected HH:MM")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"invalid time '{value}', expected 00:00-23:59")
    return hours * 60 + minutes


def format_clock(minutes: int) -> str:
    """
    570 -> "09:30"
    """
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"minutes out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def to_minutes(value: Union[int, str]) -> int:
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError("time must be minutes or HH:MM")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        # "0930" is a clock typo, not 930 minutes
        return parse_clock(value)
    raise ValueError("time must be minutes or HH:MM")
