# src/omni/tasks/dates.py

"""
Date/time helpers shared by the task models and the command interpreter.

Accepted input is "DD-MM-YYYY" or "DD-MM-YYYY HHMM" (one space, 24h clock).
"""

from __future__ import annotations

import re
from datetime import date, datetime, time

from ..core.errors import InvalidArgumentError

DATE_FORMAT_ERROR = (
    "Invalid date format! Check your date and time is in the form DD-MM-YYYY HHMM"
)

_DATE_RE = re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII)
_TIME_RE = re.compile(r"\d{4}", re.ASCII)

ENTRY_DATE_FMT = "%d-%m-%Y"
ENTRY_TIME_FMT = "%H%M"
DISPLAY_TIME_FMT = "%H:%M"


def parse_date_time(text: str) -> tuple[date, time | None]:
    """Parse "DD-MM-YYYY[ HHMM]" into a date and an optional time."""
    parts = text.strip().split(" ")
    if len(parts) > 2:
        raise InvalidArgumentError(DATE_FORMAT_ERROR)

    date_str = parts[0].strip()
    if not _DATE_RE.fullmatch(date_str):
        raise InvalidArgumentError(DATE_FORMAT_ERROR)
    try:
        d = datetime.strptime(date_str, ENTRY_DATE_FMT).date()
    except ValueError:
        raise InvalidArgumentError(DATE_FORMAT_ERROR) from None

    if len(parts) == 1:
        return d, None

    time_str = parts[1].strip()
    if not _TIME_RE.fullmatch(time_str):
        raise InvalidArgumentError(DATE_FORMAT_ERROR)
    try:
        t = datetime.strptime(time_str, ENTRY_TIME_FMT).time()
    except ValueError:
        raise InvalidArgumentError(DATE_FORMAT_ERROR) from None
    return d, t


def format_entry(d: date, t: time | None = None) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    out = f"{d.day:02d}-{d.month:02d}-{d.year:04d}"
    if t is not None:
        out += f" {t.hour:02d}{t.minute:02d}"
    return out


def format_display(d: date, t: time | None = None) -> str:
    # "Jan 5 2025 18:00": no zero padding on the day.
    out = f"{d.strftime('%b')} {d.day} {d.year}"
    if t is not None:
        out += " " + t.strftime(DISPLAY_TIME_FMT)
    return out
