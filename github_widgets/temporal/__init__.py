"""
Temporal Layer
==============

Time handling for every widget.

INVARIANTS:
- All instants are timezone-aware UTC
- "now" is injected through LogicalClock, never read implicitly by layout code

Modules:
- clock: Injectable now provider
- dates: Partial-date parsing, day bounds, range parsing
"""

from .clock import LogicalClock
from .dates import (
    as_utc, parse_partial_date, parse_date_range, default_window,
    start_of_day_utc, end_of_day_utc, days_between, format_month_year,
)

__all__ = [
    'LogicalClock',
    'as_utc',
    'parse_partial_date',
    'parse_date_range',
    'default_window',
    'start_of_day_utc',
    'end_of_day_utc',
    'days_between',
    'format_month_year',
]
