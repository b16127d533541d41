"""
Tests for kickoff timestamp conversion.
"""

import pytest

from matchbook.utils.match_calendar import to_timestamp, parse_kickoff, format_timestamp


def test_to_timestamp_is_utc_epoch_seconds():
    assert to_timestamp(1970, 1, 1) == 0
    assert to_timestamp(1970, 1, 2) == 86400
    assert to_timestamp(2026, 6, 11, 19, 0, 0) == 1781204400


def test_to_timestamp_rejects_impossible_dates():
    with pytest.raises(ValueError):
        to_timestamp(2026, 2, 30)


@pytest.mark.parametrize("text, expected", [
    ("2026-06-11 19:00:00", 1781204400),
    ("2026-06-11 19:00", 1781204400),
    (" 2026-06-11 19:00 ", 1781204400),
    ("2026-06-11", 1781136000),
])
def test_parse_kickoff_formats(text, expected):
    assert parse_kickoff(text) == expected


@pytest.mark.parametrize("text", ["", "tomorrow", "11/06/2026", "2026-13-01 10:00"])
def test_parse_kickoff_rejects_unknown_formats(text):
    with pytest.raises(ValueError):
        parse_kickoff(text)


def test_format_timestamp():
    assert format_timestamp(1781204400) == "2026-06-11 19:00 UTC"
    # Out-of-range values are shown raw instead of failing
    assert format_timestamp(10 ** 20) == str(10 ** 20)
