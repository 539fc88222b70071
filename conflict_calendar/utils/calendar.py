from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Set

from conflict_calendar.models.calendar_event import CalendarEvent
from conflict_calendar.models.course import Course


def week_start(anchor: date) -> date:
    """
    Sunday on or before `anchor`.
    date.weekday() is Monday=0, the displayed week starts on Sunday.
    """
    if isinstance(anchor, datetime):
        anchor = anchor.date()
    return anchor - timedelta(days=(anchor.weekday() + 1) % 7)


def shift_week(anchor: date, weeks: int) -> date:
    """Toolbar navigation: -1 previous, +1 next."""
    return week_start(anchor) + timedelta(weeks=weeks)


def event_id(course: Course, day) -> str:
    return f"{course.id}-{day.value}"


def project(
    courses: Iterable[Course],
    conflict_ids: Optional[Set[str]],
    week_anchor: date,
) -> List[CalendarEvent]:
    """
    One CalendarEvent per (course, active weekday) in the week containing week_anchor.
    """
    conflict_ids = conflict_ids or set()
    first_day = week_start(week_anchor)

    events = []
    for course in courses:
        has_conflict = course.id in conflict_ids
        for day in course.sorted_days():
            on = first_day + timedelta(days=day.offset)
            events.append(
                CalendarEvent(
                    id=event_id(course, day),
                    title=course.name,
                    weekday=day,
                    start=datetime.combine(on, course.interval.start_time()),
                    end=datetime.combine(on, course.interval.end_time()),
                    course=course,
                    has_conflict=has_conflict,
                )
            )

    # rendering positions by start time; course id keeps ties stable
    events.sort(key=lambda e: (e.start, e.course.id))
    return events


def visible_hours(events: Iterable[CalendarEvent], day_start: int, day_end: int):
    """
    Hour window for the week view: the configured window, widened so no event is cut off.
    """
    lo, hi = day_start, day_end
    for e in events:
        lo = min(lo, e.start.hour)
        end_hour = e.end.hour + (1 if e.end.minute else 0)
        hi = max(hi, end_hour)
    return lo, hi
