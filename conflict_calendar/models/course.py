from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, field_validator

from conflict_calendar.models.time_interval import TimeInterval
from conflict_calendar.models.weekday import Weekday


class Course(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    interval: TimeInterval
    days: FrozenSet[Weekday]

    @field_validator("id", "name")
    @classmethod
    def _not_blank(cls, v: str, info):
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return v

    @field_validator("days")
    @classmethod
    def _has_days(cls, v):
        if not v:
            raise ValueError("days must contain at least one weekday")
        return v

    @property
    def start(self) -> int:
        return self.interval.start

    @property
    def end(self) -> int:
        return self.interval.end

    def sorted_days(self):
        """Days in calendar order (Sunday first)."""
        return sorted(self.days, key=lambda d: d.offset)
