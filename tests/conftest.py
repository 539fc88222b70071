import pytest

from conflict_calendar.models.course import Course
from conflict_calendar.models.time_interval import TimeInterval
from conflict_calendar.models.weekday import Weekday
from conflict_calendar.utils.timeslots import parse_clock


def make_course(course_id, start, end, *days, name=None):
    return Course(
        id=course_id,
        name=name or f"Course {course_id}",
        interval=TimeInterval(start=parse_clock(start), end=parse_clock(end)),
        days=frozenset(Weekday(d) for d in days),
    )


@pytest.fixture
def course_factory():
    return make_course


def record(course_id, start, end, days, name=None):
    """Wire shape used by the HTTP endpoints."""
    return {
        "id": course_id,
        "name": name or f"Course {course_id}",
        "startTime": parse_clock(start),
        "endTime": parse_clock(end),
        "days": list(days),
    }


@pytest.fixture
def record_factory():
    return record
