from enum import Enum


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def offset(self) -> int:
        """Days after the start of a Sunday-first week (Sunday=0 .. Saturday=6)."""
        return WEEK_OFFSETS[self]


# Sunday-first, the layout of the displayed week
WEEK_ORDER = (
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)
WEEK_OFFSETS = {day: i for i, day in enumerate(WEEK_ORDER)}
