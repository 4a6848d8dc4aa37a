"""
Activity Chart Geometry Tests
"""

import math
from datetime import date, timedelta

from github_widgets.contracts.activity import ContributionDay
from github_widgets.layout.activity import ActivityConfig, compute_activity_geometry


def days(*counts, first=date(2024, 1, 1)):
    return [ContributionDay(day=first + timedelta(days=i), count=c) for i, c in enumerate(counts)]


class TestPoints:
    """Default canvas: 900x360, plot from x=64..852 and y=96..300."""

    def test_evenly_spaced_and_scaled(self):
        geometry = compute_activity_geometry(days(0, 5, 10))
        assert [p.x for p in geometry.points] == [64, 458, 852]
        assert [p.y for p in geometry.points] == [300, 198, 96]

    def test_single_day_centred(self):
        geometry = compute_activity_geometry(days(4))
        assert geometry.points[0].x == 458
        assert geometry.points[0].y == 96

    def test_all_zero_counts_sit_on_axis(self):
        geometry = compute_activity_geometry(days(0, 0, 0))
        assert all(p.y == geometry.plot_bottom for p in geometry.points)

    def test_path_length_is_ceiled_exact_length(self):
        geometry = compute_activity_geometry(days(0, 5, 10))
        expected = math.hypot(394, 102) * 2
        assert geometry.path_length == math.ceil(expected)

    def test_custom_config(self):
        config = ActivityConfig(width=500, height=200)
        geometry = compute_activity_geometry(days(1, 1), config)
        assert geometry.plot_right == 500 - 48
        assert geometry.width == 500


class TestAxes:

    def test_four_x_labels(self):
        geometry = compute_activity_geometry(days(*range(100), first=date(2024, 1, 1)))
        assert len(geometry.x_labels) == 4
        assert geometry.x_labels[0].text == "Jan 2024"
        assert geometry.x_labels[-1].text == "Apr 2024"
        assert geometry.x_labels[0].x == 64
        assert geometry.x_labels[-1].x == 852

    def test_y_ticks_follow_max(self):
        geometry = compute_activity_geometry(days(0, 10))
        assert [t.value for t in geometry.y_ticks] == [0, 3, 6, 9, 10]
        assert geometry.y_ticks[0].y == 300
        assert geometry.y_ticks[-1].y == 96

    def test_markers_thinned_to_about_forty(self):
        assert compute_activity_geometry(days(*[1] * 40)).marker_stride == 1
        assert compute_activity_geometry(days(*[1] * 100)).marker_stride == 3
        assert compute_activity_geometry(days(*[1] * 366)).marker_stride == 10
