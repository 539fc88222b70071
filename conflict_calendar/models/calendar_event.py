from datetime import datetime

from pydantic import BaseModel, ConfigDict

from conflict_calendar.models.course import Course
from conflict_calendar.models.weekday import Weekday


class CalendarEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str             # "<course id>-<Weekday>"
    title: str
    weekday: Weekday
    start: datetime
    end: datetime
    course: Course
    has_conflict: bool = False
