"""
Label Placement Tests

Greedy suppression in processing order with a shared accumulator.
"""

from datetime import datetime, timedelta, timezone

from github_widgets.contracts.layout import Interval, LaneAssignment, TimeScale, VerticalAnchor
from github_widgets.layout.labels import (
    DATE_LABEL_GAP, LOGO_GAP, LOGO_SIZE, NODE_RADIUS, anchor_for_lane, date_label_y, label_block,
    place_labels,
)


ORIGIN = datetime(2020, 1, 1, tzinfo=timezone.utc)
NOW = ORIGIN + timedelta(seconds=1024)
# One second per pixel; a power-of-two span keeps projections exact
SCALE = TimeScale(ORIGIN, NOW, 0, 1024)


def at(seconds: float) -> datetime:
    return ORIGIN + timedelta(seconds=seconds)


def interval(interval_id, start_s, end_s=None):
    return Interval(
        id=interval_id,
        label=f"item {interval_id}",
        subtitle="",
        decoration_ref="",
        color_hint="",
        start=at(start_s),
        end=at(end_s) if end_s is not None else None,
        start_label=str(start_s),
        end_label=str(end_s) if end_s is not None else "",
    )


def lanes(*intervals):
    return [LaneAssignment(it.id, i) for i, it in enumerate(intervals)]


class TestSuppression:

    def test_fifteen_pixels_apart_second_suppressed(self):
        a, b = interval(0, 100, 900), interval(1, 115, 800)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW, proximity=20, include_end=False)
        assert [p.show_start_label for p in placements] == [True, False]

    def test_twenty_five_pixels_apart_both_render(self):
        a, b = interval(0, 100, 900), interval(1, 125, 800)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW, proximity=20, include_end=False)
        assert [p.show_start_label for p in placements] == [True, True]

    def test_exactly_at_threshold_renders(self):
        a, b = interval(0, 100, 900), interval(1, 120, 800)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW, proximity=20, include_end=False)
        assert placements[1].show_start_label

    def test_suppressed_label_is_not_moved(self):
        a, b = interval(0, 100, 900), interval(1, 110, 800)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW, proximity=20, include_end=False)
        assert placements[1].start_x == 110

    def test_suppressed_label_does_not_block_later_ones(self):
        # b is suppressed by a; c is 15px from b but 30px from a
        a, b, c = interval(0, 100, 900), interval(1, 115, 800), interval(2, 130, 700)
        placements = place_labels([a, b, c], lanes(a, b, c), SCALE, NOW, proximity=20, include_end=False)
        assert [p.show_start_label for p in placements] == [True, False, True]

    def test_end_labels_share_the_accumulator(self):
        # a ends where b starts; the start pass runs first, so b's start wins
        a, b = interval(0, 100, 500), interval(1, 505, 900)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW, proximity=20)
        assert placements[1].show_start_label
        assert not placements[0].show_end_label
        assert placements[1].show_end_label

    def test_ongoing_has_no_end_label(self):
        a = interval(0, 100)
        (placement,) = place_labels([a], lanes(a), SCALE, NOW, proximity=20)
        assert placement.show_start_label
        assert not placement.show_end_label
        assert placement.end_x == 1024

    def test_disabled_starts_leave_room_for_ends(self):
        a, b = interval(0, 100, 500), interval(1, 505, 900)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW, proximity=20, include_start=False)
        assert not any(p.show_start_label for p in placements)
        assert all(p.show_end_label for p in placements)

    def test_repeatable(self):
        items = [interval(i, 100 + 7 * i, 900 - 11 * i) for i in range(10)]
        first = place_labels(items, lanes(*items), SCALE, NOW, proximity=20)
        second = place_labels(items, lanes(*items), SCALE, NOW, proximity=20)
        assert first == second


class TestAnchors:

    def test_baseline_and_lower_lanes_below(self):
        assert anchor_for_lane(0) is VerticalAnchor.BELOW
        assert anchor_for_lane(2) is VerticalAnchor.BELOW

    def test_upper_lanes_above(self):
        assert anchor_for_lane(1) is VerticalAnchor.ABOVE
        assert anchor_for_lane(3) is VerticalAnchor.ABOVE

    def test_placement_carries_anchor(self):
        a, b = interval(0, 100, 900), interval(1, 300, 800)
        placements = place_labels([a, b], lanes(a, b), SCALE, NOW)
        assert [p.anchor for p in placements] == [VerticalAnchor.BELOW, VerticalAnchor.ABOVE]


class TestLabelBlock:

    def test_below_starts_under_node(self):
        block = label_block(100, 200, VerticalAnchor.BELOW, has_subtitle=True, has_logo=False, line_height=16)
        assert block.top_y == 200 + NODE_RADIUS + 8

    def test_above_sized_by_line_count(self):
        one = label_block(100, 200, VerticalAnchor.ABOVE, has_subtitle=False, has_logo=False, line_height=16)
        two = label_block(100, 200, VerticalAnchor.ABOVE, has_subtitle=True, has_logo=False, line_height=16)
        assert one.top_y == 200 - NODE_RADIUS - 8 - 16
        assert two.top_y == one.top_y - 16

    def test_logo_slot_reserved_only_with_logo(self):
        with_logo = label_block(100, 200, VerticalAnchor.BELOW, False, has_logo=True, line_height=16)
        without = label_block(100, 200, VerticalAnchor.BELOW, False, has_logo=False, line_height=16)
        assert with_logo.logo_x is not None
        assert without.logo_x is None
        assert with_logo.text_x - without.text_x == LOGO_SIZE + LOGO_GAP
        assert without.text_x == with_logo.logo_x

    def test_date_row_pushes_block_outward(self):
        below = label_block(100, 200, VerticalAnchor.BELOW, False, False, line_height=16, date_row=19)
        above = label_block(100, 200, VerticalAnchor.ABOVE, False, False, line_height=16, date_row=19)
        assert below.top_y == 200 + NODE_RADIUS + 8 + 19
        assert above.top_y == 200 - NODE_RADIUS - 8 - 19 - 16


class TestDateLabelY:

    def test_above_sits_over_node(self):
        assert date_label_y(100, VerticalAnchor.ABOVE, 13) == 100 - NODE_RADIUS - DATE_LABEL_GAP

    def test_below_sits_under_node(self):
        assert date_label_y(100, VerticalAnchor.BELOW, 13) == 100 + NODE_RADIUS + DATE_LABEL_GAP + 13
