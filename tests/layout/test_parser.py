"""
Interval Parser Tests

Accepted date shapes, defaults for missing units, and fail-fast errors.
"""

import pytest
from datetime import datetime, timezone

from github_widgets.contracts.base import InvalidDateFormat, MissingRequiredField
from github_widgets.layout.parser import iter_intervals, parse_intervals
from github_widgets.temporal.dates import parse_partial_date

from .fixtures import make_row


class TestPartialDates:
    """YYYY, YYYY-MM and YYYY-MM-DD resolve to the first instant of their unit."""

    def test_year_only_defaults_to_january_first(self):
        assert parse_partial_date("2024") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_year_month_defaults_to_first_day(self):
        assert parse_partial_date("2024-03") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_full_date(self):
        assert parse_partial_date("2024-03-15") == datetime(2024, 3, 15, tzinfo=timezone.utc)

    def test_result_is_utc(self):
        assert parse_partial_date("2024-03-15").tzinfo is timezone.utc

    @pytest.mark.parametrize("text", ["2024/03", "24-03", "2024-3", "March 2024", "2024-03-15T00:00"])
    def test_unknown_shapes_rejected(self, text):
        with pytest.raises(InvalidDateFormat):
            parse_partial_date(text)

    @pytest.mark.parametrize("text", ["2023-02-30", "2024-13", "2024-00-10"])
    def test_impossible_calendar_dates_rejected(self, text):
        with pytest.raises(InvalidDateFormat):
            parse_partial_date(text)


class TestParseIntervals:
    """Rows become Intervals in input order."""

    def test_ids_follow_input_order(self):
        intervals = parse_intervals([
            make_row("Later", "2022"),
            make_row("Earlier", "2019", "2020"),
        ])
        assert [it.id for it in intervals] == [0, 1]
        assert [it.label for it in intervals] == ["Later", "Earlier"]

    def test_empty_end_means_ongoing(self):
        (it,) = parse_intervals([make_row("Acme", "2021-05")])
        assert it.is_ongoing
        assert it.end is None
        assert it.end_label == ""

    def test_labels_keep_original_precision(self):
        (it,) = parse_intervals([make_row("Acme", "2021", "2022-06")])
        assert it.start_label == "2021"
        assert it.end_label == "2022-06"

    def test_values_are_trimmed(self):
        (it,) = parse_intervals([make_row("  Acme ", " 2021 ", "", title=" Engineer ")])
        assert it.label == "Acme"
        assert it.subtitle == "Engineer"
        assert it.start_label == "2021"

    def test_metadata_fields_carried(self):
        (it,) = parse_intervals([make_row("Acme", "2021", logo="https://x/logo.png", color="#ff0000")])
        assert it.decoration_ref == "https://x/logo.png"
        assert it.color_hint == "#ff0000"

    def test_missing_start_fails(self):
        with pytest.raises(MissingRequiredField):
            parse_intervals([make_row("Acme", "")])

    def test_absent_start_key_fails(self):
        with pytest.raises(MissingRequiredField):
            parse_intervals([{"company": "Acme"}])

    def test_bad_end_fails(self):
        with pytest.raises(InvalidDateFormat):
            parse_intervals([make_row("Acme", "2020", "soon")])

    def test_one_bad_row_fails_everything(self):
        rows = [make_row("Good", "2020"), make_row("Bad", "20-20")]
        with pytest.raises(InvalidDateFormat):
            parse_intervals(rows)

    def test_error_names_the_row(self):
        with pytest.raises(MissingRequiredField) as exc:
            parse_intervals([make_row("Good", "2020"), make_row("Bad", "")])
        assert "Row 2" in exc.value.message

    def test_iterator_is_lazy(self):
        rows = iter([make_row("Good", "2020"), make_row("Bad", "")])
        it = iter_intervals(rows)
        assert next(it).label == "Good"
        with pytest.raises(MissingRequiredField):
            next(it)
