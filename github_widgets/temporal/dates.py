"""
UTC Calendar Helpers
====================

Calendar-agnostic UTC date handling. No local-timezone effects anywhere.

Accepted partial-date shapes: YYYY, YYYY-MM, YYYY-MM-DD.
A missing month is January, a missing day is the 1st.
"""

from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple
import re

from ..contracts.base import InvalidDateFormat, InvalidParameter
from ..contracts.activity import ContributionWindow


PARTIAL_DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")
FULL_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MAX_RANGE_DAYS = 365


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values; aware values are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_partial_date(text: str, field: Optional[str] = None) -> datetime:
    """
    Resolve a partial-precision date to the first instant of its unit (UTC).

    Raises:
        InvalidDateFormat: shape mismatch or not a real calendar day
    """
    match = PARTIAL_DATE_PATTERN.match(text)
    if match is None:
        raise InvalidDateFormat(
            f'"{text}" must be in format YYYY, YYYY-MM, or YYYY-MM-DD', field=field
        )

    year = int(match.group(1))
    month = int(match.group(2)) if match.group(2) else 1
    day = int(match.group(3)) if match.group(3) else 1

    try:
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError as e:
        raise InvalidDateFormat(f'"{text}" is not a valid calendar date ({e})', field=field) from e


def start_of_day_utc(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min, tzinfo=timezone.utc)


def end_of_day_utc(value: datetime) -> datetime:
    return datetime.combine(value.date(), time(23, 59, 59, 999000), tzinfo=timezone.utc)


def days_between(a: datetime, b: datetime) -> int:
    """Whole days from `a` to `b`, floored."""
    return (b - a) // timedelta(days=1)


def format_month_year(value: date) -> str:
    """'Jan 2025' style label, independent of the process locale."""
    months = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    return f"{months[value.month - 1]} {value.year}"


def parse_date_range(range_text: str) -> ContributionWindow:
    """
    Parse 'YYYY-MM-DD:YYYY-MM-DD' into an inclusive UTC window.

    Raises:
        InvalidParameter: bad shape, unreal dates, reversed, or over a year
    """
    parts = range_text.split(":")
    if len(parts) != 2:
        raise InvalidParameter("Date range must be in format YYYY-MM-DD:YYYY-MM-DD", field="range")

    start_text, end_text = parts
    if not FULL_DATE_PATTERN.match(start_text) or not FULL_DATE_PATTERN.match(end_text):
        raise InvalidParameter("Dates must be in format YYYY-MM-DD", field="range")

    try:
        start = parse_partial_date(start_text)
        end = parse_partial_date(end_text)
    except InvalidDateFormat as e:
        raise InvalidParameter("Invalid date in range", field="range") from e

    if start > end:
        raise InvalidParameter("Start date must be before end date", field="range")
    if days_between(start, end) > MAX_RANGE_DAYS:
        raise InvalidParameter(f"Date range cannot exceed {MAX_RANGE_DAYS} days", field="range")

    return ContributionWindow(
        start=start_of_day_utc(start),
        end=end_of_day_utc(end),
        start_text=start_text,
        end_text=end_text,
    )


def default_window(now: datetime) -> ContributionWindow:
    """The trailing year ending today."""
    return ContributionWindow(
        start=start_of_day_utc(now - timedelta(days=MAX_RANGE_DAYS)),
        end=end_of_day_utc(now),
    )


def window_bounds_iso(window: ContributionWindow) -> Tuple[str, str]:
    """GraphQL DateTime strings for the window."""
    return (
        window.start.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        window.end.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
