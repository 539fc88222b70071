from __future__ import annotations
from typing import List, Sequence
from io import BytesIO
from datetime import datetime

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import Alignment, Font, PatternFill

from conflict_calendar.models.calendar_event import CalendarEvent
from conflict_calendar.utils.timeslots import format_clock

HEADERS = ["Day", "Date", "Start", "End", "Course", "Conflict"]
CONFLICT_FILL = PatternFill(start_color="F4CCCC", end_color="F4CCCC", fill_type="solid")


def _event_row(e: CalendarEvent) -> List:
    return [
        e.weekday.value,
        e.start.date().isoformat(),
        format_clock(e.course.interval.start),
        format_clock(e.course.interval.end),
        e.title,
        "yes" if e.has_conflict else "",
    ]


def events_to_xlsx_bytes(events: Sequence[CalendarEvent], sheet_name: str = "Calendar") -> bytes:
    """
    One row per calendar event, conflicting rows filled red.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:31]

    ws.append(HEADERS)

    header_font = Font(bold=True)
    for col_idx in range(1, len(HEADERS) + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    if not events:
        ws.append(["No courses this week"])

    for e in events:
        ws.append(_event_row(e))
        if e.has_conflict:
            for cell in ws[ws.max_row]:
                cell.fill = CONFLICT_FILL

    # autosize columns
    for col_idx, h in enumerate(HEADERS, start=1):
        max_len = len(h)
        for row_idx in range(2, ws.max_row + 1):
            v = ws.cell(row=row_idx, column=col_idx).value
            if v is None:
                continue
            max_len = max(max_len, len(str(v)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 2, 60)

    ws.freeze_panes = "A2"

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def make_filename(prefix: str = "calendar") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.xlsx"
