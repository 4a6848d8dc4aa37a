"""
Tick Generator Tests
"""

import pytest

from github_widgets.layout.ticks import nice_ticks


class TestNiceTicks:

    def test_steps_land_on_max(self):
        assert nice_ticks(8) == (0, 2, 4, 6, 8)

    def test_max_appended_when_missed(self):
        assert nice_ticks(10) == (0, 3, 6, 9, 10)

    def test_zero_max(self):
        assert nice_ticks(0) == (0,)

    def test_minimum_step_is_one(self):
        assert nice_ticks(2) == (0, 1, 2)

    def test_custom_target_count(self):
        assert nice_ticks(100, target_count=3) == (0, 50, 100)

    @pytest.mark.parametrize("max_value", [1, 7, 13, 99, 1000])
    def test_ascending_and_bounded(self, max_value):
        ticks = nice_ticks(max_value)
        assert ticks[0] == 0
        assert ticks[-1] == max_value
        assert list(ticks) == sorted(set(ticks))

    def test_idempotent(self):
        assert nice_ticks(37) == nice_ticks(37)
