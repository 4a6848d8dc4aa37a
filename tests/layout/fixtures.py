"""
Layout Fixtures

Explicit records and a pinned `now` for deterministic layout tests.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Dict, List, Optional

from github_widgets.contracts.layout import Interval
from github_widgets.temporal.dates import parse_partial_date


NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_row(
    company: str,
    start: str,
    end: str = "",
    title: str = "",
    logo: str = "",
    color: str = "",
) -> Dict[str, str]:
    return {
        "company": company,
        "start": start,
        "end": end,
        "title": title,
        "logo": logo,
        "color": color,
    }


def make_interval(
    interval_id: int,
    start: str,
    end: Optional[str] = None,
    label: str = "",
    subtitle: str = "",
    logo: str = "",
) -> Interval:
    return Interval(
        id=interval_id,
        label=label or f"Company {interval_id}",
        subtitle=subtitle,
        decoration_ref=logo,
        color_hint="",
        start=parse_partial_date(start),
        end=parse_partial_date(end) if end else None,
        start_label=start,
        end_label=end or "",
    )


def overlap_scenario() -> List[Interval]:
    """
    A: 2020-01 to 2021-06
    B: 2020-06 to 2021-01 (inside A)
    C: 2021-07 onwards (after A ends)
    """
    return [
        make_interval(0, "2020-01", "2021-06", label="A"),
        make_interval(1, "2020-06", "2021-01", label="B"),
        make_interval(2, "2021-07", None, label="C"),
    ]
