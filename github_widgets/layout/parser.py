"""
Interval Parser

Raw rows -> Interval entities, in input order.

Rows are mappings with the experience CSV field names
(company, start, end, title, logo, color). Values are trimmed.
A row without a start date, or with any unparseable date, aborts the
whole parse: there is no partial result.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from ..contracts.base import MissingRequiredField
from ..contracts.layout import Interval
from ..temporal.dates import parse_partial_date


def _field(row: Mapping[str, Optional[str]], name: str) -> str:
    return (row.get(name) or "").strip()


def iter_intervals(rows: Iterable[Mapping[str, Optional[str]]]) -> Iterator[Interval]:
    """
    Lazily parse rows. One pass only: materialize once with `parse_intervals`.

    Raises:
        MissingRequiredField: a row has an empty or absent start
        InvalidDateFormat: a non-empty start/end is not an accepted shape
    """
    for index, row in enumerate(rows):
        row_number = index + 1
        start_text = _field(row, "start")
        end_text = _field(row, "end")

        if not start_text:
            raise MissingRequiredField(f"Row {row_number}: start date is required", field="start")

        start = parse_partial_date(start_text, field=f"row {row_number} start")
        end = parse_partial_date(end_text, field=f"row {row_number} end") if end_text else None

        yield Interval(
            id=index,
            label=_field(row, "company"),
            subtitle=_field(row, "title"),
            decoration_ref=_field(row, "logo"),
            color_hint=_field(row, "color"),
            start=start,
            end=end,
            start_label=start_text,
            end_label=end_text,
        )


def parse_intervals(rows: Iterable[Mapping[str, Optional[str]]]) -> Tuple[Interval, ...]:
    """Parse every row up front so a failure leaves nothing half-built."""
    return tuple(iter_intervals(rows))
