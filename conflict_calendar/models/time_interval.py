from datetime import time

from pydantic import BaseModel, ConfigDict, Field, model_validator

MINUTES_PER_DAY = 24 * 60


class TimeInterval(BaseModel):
    """
    [start, end) in minutes since local midnight, inside a single day.
    """
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, lt=MINUTES_PER_DAY)
    end: int = Field(..., ge=0, lt=MINUTES_PER_DAY)

    @model_validator(mode="after")
    def _check_order(self):
        if self.start >= self.end:
            raise ValueError(f"interval start ({self.start}) must be before end ({self.end})")
        return self

    def overlaps(self, other: "TimeInterval") -> bool:
        # half-open: touching endpoints do not overlap
        return self.start < other.end and other.start < self.end

    def start_time(self) -> time:
        return time(self.start // 60, self.start % 60)

    def end_time(self) -> time:
        return time(self.end // 60, self.end % 60)
