"""Canonical rendering tests."""

import pytest

from strdur import format_duration, parse_duration
from strdur._constants import HOUR, MAX_INT64, MICROSECOND, MILLISECOND, MINUTE, MIN_INT64, SECOND


class TestFormatDuration:
    @pytest.mark.parametrize(
        "ns, expected",
        [
            (0, "0s"),
            (1, "1ns"),
            (1100, "1.1µs"),
            (2200 * MICROSECOND, "2.2ms"),
            (3300 * MILLISECOND, "3.3s"),
            (4 * MINUTE + 5 * SECOND, "4m5s"),
            (4 * MINUTE + 5001 * MILLISECOND, "4m5.001s"),
            (5 * HOUR + 6 * MINUTE + 7001 * MILLISECOND, "5h6m7.001s"),
            (8 * MINUTE + 1, "8m0.000000001s"),
            (24 * HOUR, "24h0m0s"),
            (HOUR + 30 * SECOND, "1h0m30s"),
            (MAX_INT64, "2562047h47m16.854775807s"),
            (MIN_INT64, "-2562047h47m16.854775808s"),
        ],
    )
    def test_format(self, ns, expected):
        assert format_duration(ns) == expected

    def test_negative(self):
        assert format_duration(-1500 * MILLISECOND) == "-1.5s"

    def test_negative_sub_second(self):
        assert format_duration(-999) == "-999ns"


class TestCanonicalization:
    @pytest.mark.parametrize(
        "text",
        ["24h", "1h30m", "500ms", "90m", "0.5us", "-1.5h", "3600s", "1h0m0s", "2562047h47m16s854775807ns"],
    )
    def test_idempotent(self, text):
        once = format_duration(parse_duration(text))
        assert format_duration(parse_duration(once)) == once

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("24h", "24h0m0s"),
            ("90m", "1h30m0s"),
            ("500ms", "500ms"),
            ("1000ms", "1s"),
            ("100us", "100µs"),
            ("0.5us", "500ns"),
            ("+5s", "5s"),
            ("-0", "0s"),
        ],
    )
    def test_rendering(self, text, expected):
        assert format_duration(parse_duration(text)) == expected
