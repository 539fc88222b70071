from datetime import date, datetime

from conflict_calendar.models.weekday import Weekday
from conflict_calendar.utils.calendar import project, shift_week, visible_hours, week_start


def test_week_start_is_previous_sunday():
    # 2024-01-10 is a Wednesday
    assert week_start(date(2024, 1, 10)) == date(2024, 1, 7)
    assert week_start(date(2024, 1, 7)) == date(2024, 1, 7)
    assert week_start(date(2024, 1, 13)) == date(2024, 1, 7)
    assert week_start(datetime(2024, 1, 10, 15, 0)) == date(2024, 1, 7)


def test_shift_week():
    assert shift_week(date(2024, 1, 10), 1) == date(2024, 1, 14)
    assert shift_week(date(2024, 1, 10), -1) == date(2023, 12, 31)


def test_one_event_per_active_weekday(course_factory):
    c = course_factory("A", "09:00", "10:30", "Monday", "Wednesday", "Friday")
    events = project([c], set(), date(2024, 1, 10))

    assert len(events) == 3
    assert {e.id for e in events} == {"A-Monday", "A-Wednesday", "A-Friday"}
    monday = next(e for e in events if e.weekday is Weekday.MONDAY)
    assert monday.start == datetime(2024, 1, 8, 9, 0)
    assert monday.end == datetime(2024, 1, 8, 10, 30)
    assert monday.title == c.name
    assert monday.course == c


def test_sunday_lands_at_start_of_week(course_factory):
    c = course_factory("S", "18:00", "19:00", "Sunday", "Saturday")
    events = project([c], set(), date(2024, 1, 10))
    assert [e.start.date() for e in events] == [date(2024, 1, 7), date(2024, 1, 13)]


def test_conflict_flag_follows_conflict_ids(course_factory):
    a = course_factory("A", "09:00", "10:00", "Monday")
    b = course_factory("B", "12:00", "13:00", "Monday")
    events = project([a, b], {"A"}, date(2024, 1, 10))
    flags = {e.course.id: e.has_conflict for e in events}
    assert flags == {"A": True, "B": False}


def test_projection_is_idempotent(course_factory):
    courses = [
        course_factory("A", "09:00", "10:00", "Monday", "Thursday"),
        course_factory("B", "09:30", "11:00", "Thursday"),
    ]
    first = project(courses, {"A", "B"}, date(2024, 1, 10))
    second = project(courses, {"A", "B"}, date(2024, 1, 10))
    assert first == second
    assert [e.id for e in first] == ["A-Monday", "A-Thursday", "B-Thursday"]


def test_project_without_conflict_set(course_factory):
    c = course_factory("A", "09:00", "10:00", "Monday")
    assert not project([c], None, date(2024, 1, 10))[0].has_conflict


def test_visible_hours_widens_for_early_and_late_events(course_factory):
    early = course_factory("E", "06:30", "07:30", "Monday")
    late = course_factory("L", "21:00", "22:15", "Tuesday")
    assert visible_hours(project([], None, date(2024, 1, 10)), 7, 22) == (7, 22)
    events = project([early, late], None, date(2024, 1, 10))
    assert visible_hours(events, 7, 22) == (6, 23)
