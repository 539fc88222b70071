from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from conflict_calendar.models.course import Course
from conflict_calendar.models.time_interval import MINUTES_PER_DAY, TimeInterval
from conflict_calendar.models.weekday import Weekday
from conflict_calendar.utils.timeslots import to_minutes


def _minutes_in_day(v: int) -> int:
    if not 0 <= v < MINUTES_PER_DAY:
        raise ValueError(f"time must be between 0 and {MINUTES_PER_DAY - 1} minutes")
    return v


def _dedupe_days(days: List[Weekday]) -> List[Weekday]:
    # dedupe, keep order
    return list(dict.fromkeys(days))


class CourseRecord(BaseModel):
    """
    Stored / wire shape of a course:
    {id, name, startTime: minutes, endTime: minutes, days: ["Monday", ...]}
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    start_time: int = Field(..., alias="startTime")
    end_time: int = Field(..., alias="endTime")
    days: List[Weekday]

    @classmethod
    def from_course(cls, course: Course) -> "CourseRecord":
        return cls(
            id=course.id,
            name=course.name,
            start_time=course.start,
            end_time=course.end,
            days=course.sorted_days(),
        )

    def to_course(self) -> Course:
        return Course(
            id=self.id,
            name=self.name,
            interval=TimeInterval(start=self.start_time, end=self.end_time),
            days=frozenset(self.days),
        )


class CourseIn(BaseModel):
    """Creation request. Times are minutes since midnight or "HH:MM"."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    start_time: Union[int, str] = Field(..., alias="startTime")
    end_time: Union[int, str] = Field(..., alias="endTime")
    days: List[Weekday] = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_time(cls, v):
        return _minutes_in_day(to_minutes(v))

    @field_validator("days")
    @classmethod
    def _unique_days(cls, v: List[Weekday]):
        return _dedupe_days(v)

    @model_validator(mode="after")
    def _validate_range(self):
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be before endTime")
        return self

    def to_course(self, course_id: str) -> Course:
        return Course(
            id=course_id,
            name=self.name,
            interval=TimeInterval(start=self.start_time, end=self.end_time),
            days=frozenset(self.days),
        )


class CourseUpdate(BaseModel):
    """
    Partial update: only the fields present are replaced.
    The merged course is validated again as a whole.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Optional[str] = None
    start_time: Optional[Union[int, str]] = Field(default=None, alias="startTime")
    end_time: Optional[Union[int, str]] = Field(default=None, alias="endTime")
    days: Optional[List[Weekday]] = None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_time(cls, v):
        if v is None:
            return v
        return _minutes_in_day(to_minutes(v))
