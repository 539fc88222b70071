from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from conflict_calendar.models.weekday import Weekday
from conflict_calendar.schemas.course import CourseRecord


class ScheduleIn(BaseModel):
    courses: List[CourseRecord] = Field(default_factory=list)


class CalendarIn(ScheduleIn):
    # any day of the week to display; today when omitted
    week: Optional[date] = None
    # weeks to move from `week`: -1 previous, +1 next
    offset: int = 0


class ConflictPairOut(BaseModel):
    first: str
    second: str


class ConflictsOut(BaseModel):
    conflict_ids: List[str]
    pairs: List[ConflictPairOut]
    total: int


class CalendarEventOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    weekday: Weekday
    start: datetime
    end: datetime
    course_id: str
    has_conflict: bool


class CalendarOut(BaseModel):
    week_start: date
    week_end: date
    # hours shown by the week view
    day_start_hour: int
    day_end_hour: int
    conflict_ids: List[str]
    events: List[CalendarEventOut]


class CourseCheckIn(BaseModel):
    # raw body, validated by parse_course so errors come back per field
    course: Dict[str, Any]
    existing: List[CourseRecord] = Field(default_factory=list)
    # id of the course being edited, skipped by the name / time checks
    exclude_id: Optional[str] = None


class CourseCheckOut(BaseModel):
    course: CourseRecord
    has_conflict: bool
    conflicts_with: List[str]
