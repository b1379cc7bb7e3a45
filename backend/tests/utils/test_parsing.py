"""
Tests for upstream value parsing helpers.
"""

import math

import pytest

from pinstats.utils.parsing import parse_count, parse_int, parse_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        (" 12 ", 12),
        ("12.5", 12.5),
        ("-3", -3),
        (7, 7),
        (2.25, 2.25),
        ("", None),
        ("   ", None),
        (None, None),
        ("n/a", None),
        (True, None),
        ("nan", None),
        (math.inf, None),
        ([1], None),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_parse_number_keeps_int_type():
    assert isinstance(parse_number("12"), int)
    assert isinstance(parse_number("12.0"), float)


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), ("42.0", 42), ("42.5", None), ("", None), (None, None)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_parse_count_defaults_to_zero():
    assert parse_count(None) == 0
    assert parse_count("") == 0
    assert parse_count("5") == 5
