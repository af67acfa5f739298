"""
Unit tests for temperature formatting helpers.
"""

import math
from decimal import Decimal

import pytest

from tempoverlay.utils.helpers import format_screen_temperature, format_widget_temperature, round_celsius


@pytest.mark.parametrize("value, expected", [
    (23.449, "23.4 °C"),
    (23.45, "23.5 °C"),
    (23.0, "23.0 °C"),
    (0.05, "0.1 °C"),
    (-1.25, "-1.3 °C"),
    (-0.04, "0.0 °C"),
    (41, "41.0 °C"),
])
def test_widget_format_rounds_half_away_from_zero(value, expected):
    assert format_widget_temperature(value) == expected


@pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf])
def test_widget_format_unavailable(value):
    assert format_widget_temperature(value) == "--.- °C"


def test_screen_format_value():
    assert format_screen_temperature(36.66) == "Temperature: 36.7 °C"


def test_screen_format_unavailable():
    assert format_screen_temperature(None) == "Temperature: unavailable"
    assert format_screen_temperature(math.nan) == "Temperature: unavailable"


def test_round_celsius_returns_decimal():
    assert round_celsius(2.675) == Decimal("2.7")
    assert round_celsius(math.nan) is None


def test_decimal_point_is_locale_invariant():
    assert "," not in format_widget_temperature(1234.56)


@pytest.mark.parametrize("value, expected", [
    (1e30, "1000000000000000000000000000000.0 °C"),
    (-1e30, "-1000000000000000000000000000000.0 °C"),
])
def test_huge_readings_are_formatted_not_raised(value, expected):
    assert format_widget_temperature(value) == expected
    assert format_screen_temperature(value) == f"Temperature: {expected}"


def test_largest_float_is_formatted():
    text = format_widget_temperature(1.7976931348623157e308)
    assert text.endswith(".0 °C")
    assert len(text.split(".")[0]) == 309
