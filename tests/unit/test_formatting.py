"""
Tests for editor display formatting.
"""
import pytest

from trackcreator.features.editor.application import format_duration, format_time, note_count_label


class TestFormatting:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00.000"),
        (5.5, "0:05.500"),
        (61.25, "1:01.250"),
        (125.125, "2:05.125"),
    ])
    def test_format_time(self, seconds, expected):
        assert format_time(seconds) == expected

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (59.9, "0:59"),
        (300, "5:00"),
        (3725, "62:05"),
    ])
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    @pytest.mark.parametrize("count,expected", [(0, "0 notes"), (1, "1 note"), (7, "7 notes")])
    def test_note_count_label(self, count, expected):
        assert note_count_label(count) == expected
