from datetime import timedelta

import pytest

from configpolicy.duration import parse_duration


def test_zero_without_unit():
    assert parse_duration("0") == timedelta(0)
    assert parse_duration("-0") == timedelta(0)


def test_hours_value():
    assert parse_duration("12h").total_seconds() == 12 * 3600


def test_components_add_up():
    assert parse_duration("1h30m") == parse_duration("90m")
    assert parse_duration("1m1s") == parse_duration("61s")


def test_fraction_matches_smaller_unit():
    assert parse_duration("1.5s") == parse_duration("1500ms")
    assert parse_duration(".5h") == parse_duration("30m")
    assert parse_duration("1.s") == parse_duration("1s")


def test_sign():
    assert parse_duration("-2m") == -parse_duration("2m")
    assert parse_duration("+2m") == parse_duration("2m")


def test_micro_spellings_agree():
    assert parse_duration("1\u00b5s") == parse_duration("1us")
    assert parse_duration("1\u03bcs") == parse_duration("1us")
    assert parse_duration("1000us") == parse_duration("1ms")


def test_sub_microsecond_truncated():
    assert parse_duration("999ns") == timedelta(0)
    assert parse_duration("1000ns") == parse_duration("1us")


@pytest.mark.parametrize("text", ["", "-", ".", "Do or do not. There is no try.", "h"])
def test_invalid(text):
    with pytest.raises(ValueError, match="invalid duration"):
        parse_duration(text)


def test_missing_unit():
    with pytest.raises(ValueError, match="missing unit"):
        parse_duration("12")
    with pytest.raises(ValueError, match="missing unit"):
        parse_duration("1h2")


def test_unknown_unit():
    with pytest.raises(ValueError, match="unknown unit"):
        parse_duration("3d")


def test_overflow_limits():
    with pytest.raises(ValueError):
        parse_duration("9223372036854775808ns")
    assert parse_duration("-9223372036854775808ns") < timedelta(0)
    assert parse_duration("9223372036854775807ns") > timedelta(0)