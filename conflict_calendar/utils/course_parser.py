from typing import Any, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, ValidationError

from conflict_calendar.models.course import Course
from conflict_calendar.schemas.course import CourseIn, CourseRecord, CourseUpdate


class FieldError(BaseModel):
    field: str
    message: str


class CourseAccepted(BaseModel):
    status: Literal["accepted"] = "accepted"
    course: Course


class CourseRejected(BaseModel):
    status: Literal["rejected"] = "rejected"
    errors: List[FieldError]


CourseResult = Union[CourseAccepted, CourseRejected]


def field_errors(exc: ValidationError) -> List[FieldError]:
    out = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "course"
        msg = err.get("msg", "invalid value")
        # pydantic prefixes errors raised from validators
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append(FieldError(field=loc, message=msg))
    return out


def parse_course(course_id: str, payload: Union[Dict[str, Any], CourseIn]) -> CourseResult:
    """
    Validate a creation request into a Course.
    Never returns a half-built course: either every field is valid or nothing is.
    """
    try:
        body = payload if isinstance(payload, CourseIn) else CourseIn.model_validate(payload)
        course = body.to_course(course_id)
    except ValidationError as e:
        return CourseRejected(errors=field_errors(e))
    return CourseAccepted(course=course)


def apply_course_update(course: Course, payload: Union[Dict[str, Any], CourseUpdate]) -> CourseResult:
    """
    Replace the fields present in `payload`, then validate the merged course.
    """
    try:
        body = payload if isinstance(payload, CourseUpdate) else CourseUpdate.model_validate(payload)
    except ValidationError as e:
        return CourseRejected(errors=field_errors(e))

    merged = CourseRecord.from_course(course).model_dump(by_alias=True, exclude={"id"})
    merged.update(body.model_dump(exclude_unset=True, by_alias=True))
    return parse_course(course.id, merged)


def find_duplicate_name(
    courses: Iterable[Course],
    name: str,
    exclude_id: Optional[str] = None,
) -> Optional[Course]:
    """Case-insensitive match on the trimmed name."""
    key = (name or "").strip().lower()
    for c in courses:
        if c.id == exclude_id:
            continue
        if c.name.strip().lower() == key:
            return c
    return None
