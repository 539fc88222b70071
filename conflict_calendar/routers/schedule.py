from datetime import date, timedelta
from io import BytesIO
from typing import List
import uuid

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from conflict_calendar.config import settings
from conflict_calendar.models.course import Course
from conflict_calendar.schemas.course import CourseRecord
from conflict_calendar.schemas.schedule import (
    ScheduleIn, CalendarIn, ConflictsOut, ConflictPairOut,
    CalendarOut, CalendarEventOut, CourseCheckIn, CourseCheckOut,
)
from conflict_calendar.utils.calendar import project, shift_week, week_start, visible_hours
from conflict_calendar.utils.conflict import compute_conflicts, find_conflicting_pairs, conflicts_with
from conflict_calendar.utils.course_parser import CourseRejected, parse_course, find_duplicate_name, field_errors
from conflict_calendar.utils.excel_export import events_to_xlsx_bytes, make_filename

import logging
logger = logging.getLogger("conflict_calendar.schedule")


router = APIRouter(prefix="/schedule", tags=["Schedule"])


def _load_courses(records: List[CourseRecord]) -> List[Course]:
    if len(records) > settings.MAX_COURSES:
        raise HTTPException(status_code=400, detail=f"Too many courses (max {settings.MAX_COURSES})")

    courses = []
    seen = set()
    for r in records:
        if r.id in seen:
            raise HTTPException(status_code=400, detail={"message": "Duplicate course id", "course_id": r.id})
        seen.add(r.id)
        try:
            courses.append(r.to_course())
        except ValidationError as e:
            raise HTTPException(
                status_code=422,
                detail={"message": "Invalid course", "course_id": r.id, "errors": [fe.model_dump() for fe in field_errors(e)]},
            )
    return courses


def _build_calendar(body: CalendarIn):
    courses = _load_courses(body.courses)
    conflict_ids = compute_conflicts(courses)
    anchor = shift_week(body.week or date.today(), body.offset)
    events = project(courses, conflict_ids, anchor)
    return anchor, conflict_ids, events


# 衝堂檢查
@router.post("/conflicts", response_model=ConflictsOut)
def check_conflicts(body: ScheduleIn):
    courses = _load_courses(body.courses)
    pairs = find_conflicting_pairs(courses)
    conflict_ids = compute_conflicts(courses)

    logger.info("conflict check: %d courses, %d conflicting pairs", len(courses), len(pairs))

    return ConflictsOut(
        conflict_ids=sorted(conflict_ids),
        pairs=[ConflictPairOut(first=a.id, second=b.id) for a, b in pairs],
        total=len(conflict_ids),
    )


# 週課表
@router.post("/calendar", response_model=CalendarOut)
def get_calendar(body: CalendarIn):
    anchor, conflict_ids, events = _build_calendar(body)
    first_day = week_start(anchor)
    lo, hi = visible_hours(events, settings.CALENDAR_DAY_START_HOUR, settings.CALENDAR_DAY_END_HOUR)

    return CalendarOut(
        week_start=first_day,
        week_end=first_day + timedelta(days=6),
        day_start_hour=lo,
        day_end_hour=hi,
        conflict_ids=sorted(conflict_ids),
        events=[
            CalendarEventOut(
                id=e.id,
                title=e.title,
                weekday=e.weekday,
                start=e.start,
                end=e.end,
                course_id=e.course.id,
                has_conflict=e.has_conflict,
            )
            for e in events
        ],
    )


@router.post("/calendar/export")
def export_calendar(body: CalendarIn):
    anchor, _conflict_ids, events = _build_calendar(body)
    content = events_to_xlsx_bytes(events, sheet_name=settings.EXPORT_SHEET_NAME)
    filename = make_filename(f"calendar_{week_start(anchor).isoformat()}")

    logger.info("calendar export: %d events -> %s", len(events), filename)

    return StreamingResponse(
        BytesIO(content),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# 新增 / 修改前檢查
@router.post("/courses/check", response_model=CourseCheckOut)
def check_course(body: CourseCheckIn):
    existing = _load_courses(body.existing)

    candidate_id = body.exclude_id or uuid.uuid4().hex
    result = parse_course(candidate_id, body.course)
    if isinstance(result, CourseRejected):
        raise HTTPException(
            status_code=422,
            detail={"message": "Invalid course", "errors": [e.model_dump() for e in result.errors]},
        )
    candidate = result.course

    dup = find_duplicate_name(existing, candidate.name, exclude_id=body.exclude_id)
    if dup:
        raise HTTPException(
            status_code=400,
            detail={"message": "A course with this name already exists", "course_id": dup.id},
        )

    clashes = conflicts_with(candidate, existing)
    if clashes:
        logger.info("course '%s' clashes with %s", candidate.name, [c.id for c in clashes])

    return CourseCheckOut(
        course=CourseRecord.from_course(candidate),
        has_conflict=bool(clashes),
        conflicts_with=[c.id for c in clashes],
    )
