"""
Experience CSV Source
=====================

Decodes the experience CSV and enforces its contract before anything
reaches the layout engine.

CONTRACT:
=========
- Header is exactly: company,start,end,title,logo,color
- At least one non-blank data row
- Six fields per row, company and start required
- start/end match YYYY, YYYY-MM or YYYY-MM-DD (end may be empty)
"""

from __future__ import annotations
import csv
import io
from typing import Dict, List, Optional

from ..contracts.base import InvalidDateFormat, InvalidParameter, MissingRequiredField
from ..temporal.dates import PARTIAL_DATE_PATTERN


EXPERIENCE_FIELDS = ("company", "start", "end", "title", "logo", "color")
CSV_PARAM = "experienceCSV"
MISSING_CSV_MESSAGE = f"{CSV_PARAM} query parameter is required"


def require_csv_text(text: Optional[str]) -> str:
    """Reject an absent or empty CSV parameter the same way on every route."""
    if not text or not isinstance(text, str):
        raise MissingRequiredField(MISSING_CSV_MESSAGE)
    return text


def read_experience_csv(text: Optional[str]) -> List[Dict[str, str]]:
    """
    Validate and decode CSV text into row mappings (values trimmed).

    Raises:
        InvalidParameter: structural problems (header, field count, company)
        MissingRequiredField: no CSV at all, or an empty start
        InvalidDateFormat: start/end outside the accepted shapes
    """
    body = require_csv_text(text).strip()
    if len(body.splitlines()) < 2:
        raise InvalidParameter("CSV must contain at least a header and one data row", field=CSV_PARAM)

    reader = csv.reader(io.StringIO(body))
    header = tuple(name.strip().lower() for name in next(reader))
    if header != EXPERIENCE_FIELDS:
        raise InvalidParameter(f"CSV header must be: {','.join(EXPERIENCE_FIELDS)}", field=CSV_PARAM)

    rows: List[Dict[str, str]] = []
    for line_number, fields in enumerate(reader, start=2):
        if not any(value.strip() for value in fields):
            continue
        if len(fields) != len(EXPERIENCE_FIELDS):
            raise InvalidParameter(
                f"Row {line_number} has incorrect number of fields "
                f"(expected {len(EXPERIENCE_FIELDS)}, got {len(fields)})",
                field=CSV_PARAM,
            )

        record = dict(zip(EXPERIENCE_FIELDS, (value.strip() for value in fields)))

        if not record["company"]:
            raise InvalidParameter(f"Row {line_number}: company is required", field=CSV_PARAM)
        if not record["start"]:
            raise MissingRequiredField(f"Row {line_number}: start date is required", field=CSV_PARAM)
        if not PARTIAL_DATE_PATTERN.match(record["start"]):
            raise InvalidDateFormat(
                f"Row {line_number}: start date must be in format YYYY, YYYY-MM, or YYYY-MM-DD",
                field=CSV_PARAM,
            )
        if record["end"] and not PARTIAL_DATE_PATTERN.match(record["end"]):
            raise InvalidDateFormat(
                f"Row {line_number}: end date must be in format YYYY, YYYY-MM, or YYYY-MM-DD "
                f"(or empty for present)",
                field=CSV_PARAM,
            )

        rows.append(record)

    if not rows:
        raise InvalidParameter("CSV must contain at least one experience entry", field=CSV_PARAM)

    return rows
