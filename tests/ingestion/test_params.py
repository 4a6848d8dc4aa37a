"""
Query Parameter Tests
"""

import pytest

from github_widgets.contracts.base import ErrorCode, InvalidParameter
from github_widgets.ingestion.params import parse_animation_duration, parse_top


class TestTop:

    def test_absent_is_three(self):
        assert parse_top(None) == 3

    @pytest.mark.parametrize("text,expected", [("1", 1), ("5", 5), ("10", 10), (" 7 ", 7)])
    def test_valid(self, text, expected):
        assert parse_top(text) == expected

    @pytest.mark.parametrize("text", ["0", "11", "-2", "abc", "2.5", ""])
    def test_invalid(self, text):
        with pytest.raises(InvalidParameter, match="top must be a number between 1 and 10") as info:
            parse_top(text)
        assert info.value.field == "top"
        assert info.value.code is ErrorCode.INVALID_PARAMETER


class TestAnimationDuration:

    def test_absent_keeps_default(self):
        assert parse_animation_duration(None) is None

    @pytest.mark.parametrize("text,expected", [("0.5", 0.5), ("2", 2.0), ("10", 10.0)])
    def test_valid(self, text, expected):
        assert parse_animation_duration(text) == expected

    @pytest.mark.parametrize("text", ["0.4", "10.5", "fast", "nan", ""])
    def test_invalid(self, text):
        with pytest.raises(InvalidParameter, match="animationDuration must be a number between 0.5 and 10"):
            parse_animation_duration(text)
