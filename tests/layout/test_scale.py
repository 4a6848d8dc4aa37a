"""
Time Scale Tests
"""

from datetime import datetime, timedelta, timezone

from github_widgets.contracts.layout import TimeScale
from github_widgets.layout.scale import build_time_scale

from .fixtures import NOW, make_interval, overlap_scenario


class TestDomain:
    """Domain spans min(start) to max(end-or-now)."""

    def test_domain_bounds(self):
        scale = build_time_scale(overlap_scenario(), NOW, 30, 1080)
        assert scale.domain_start == datetime(2020, 1, 1, tzinfo=timezone.utc)
        # C is ongoing, so now closes the domain
        assert scale.domain_end == NOW

    def test_closed_intervals_use_latest_end(self):
        intervals = [make_interval(0, "2020", "2021"), make_interval(1, "2019", "2020-06")]
        scale = build_time_scale(intervals, NOW, 0, 100)
        assert scale.domain_start == datetime(2019, 1, 1, tzinfo=timezone.utc)
        assert scale.domain_end == datetime(2021, 1, 1, tzinfo=timezone.utc)

    def test_future_start_stays_in_range(self):
        future = make_interval(0, "2030", None)
        past = make_interval(1, "2020", "2021")
        scale = build_time_scale([future, past], NOW, 0, 100)
        assert scale.project(future.start) == 100
        assert scale.project(future.effective_end(NOW)) <= 100

    def test_empty_collapses_on_now(self):
        scale = build_time_scale([], NOW, 0, 100)
        assert scale.domain_start == scale.domain_end == NOW


class TestProjection:

    def test_endpoints_map_to_range(self):
        scale = build_time_scale(overlap_scenario(), NOW, 30, 1080)
        assert scale.project(scale.domain_start) == 30
        assert scale.project(scale.domain_end) == 1080

    def test_linear_midpoint(self):
        start = datetime(2020, 1, 1, tzinfo=timezone.utc)
        scale = TimeScale(start, start + timedelta(days=10), 0, 100)
        assert scale.project(start + timedelta(days=5)) == 50

    def test_zero_width_domain_projects_midpoint(self):
        it = make_interval(0, "2025-01-01", None)
        scale = build_time_scale([it], NOW, 30, 1080)
        assert scale.domain_seconds == 0
        assert scale.project(it.start) == 555
        assert scale.project(NOW + timedelta(days=3)) == 555

    def test_single_ongoing_item_is_well_formed(self):
        it = make_interval(0, "2024-06", None)
        scale = build_time_scale([it], NOW, 0, 100)
        assert scale.project(it.start) == 0
        assert scale.project(NOW) == 100
