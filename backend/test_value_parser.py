#!/usr/bin/env python3
"""Tests for number and date parsing of hand-typed sheet cells"""

from datetime import datetime

import pytest

from services import value_parser
from services.value_parser import parse_date, parse_number


@pytest.mark.parametrize("raw, expected", [
    ("1,23,456.78", 123456.78),
    ("₹ 50,000", 50000),
    ("Rs. 1,000/-", 0),
    ("-2,500", -2500),
    (1200, 1200),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == pytest.approx(expected)

@pytest.mark.parametrize("raw", ["", None, "abc", "-", "50,000-", "1.2.3"])
def test_parse_number_defaults_to_zero(raw):
    assert parse_number(raw) == 0

def test_parse_date_iso():
    assert parse_date("2024-03-05") == datetime(2024, 3, 5)

def test_parse_date_with_time():
    assert parse_date(" 2024-03-05 14:30:00 ") == datetime(2024, 3, 5, 14, 30)

def test_parse_date_low_first_part_is_month():
    assert parse_date("05/03/2024") == datetime(2024, 5, 3)

def test_parse_date_high_first_part_is_day():
    assert parse_date("25/03/2024") == datetime(2024, 3, 25)

@pytest.mark.parametrize("raw", ["not a date", "", "   ", None, "Pending"])
def test_parse_date_without_date(raw):
    assert parse_date(raw) is None

class TestFallbackParsing:
    """Exercise the split-and-guess path with the generic parser disabled"""

    @pytest.fixture(autouse=True)
    def no_direct_parse(self, monkeypatch):
        monkeypatch.setattr(value_parser, "_direct_parse", lambda text: None)

    def test_year_first(self):
        assert parse_date("2024-03-05") == datetime(2024, 3, 5)

    def test_month_first_when_ambiguous(self):
        assert parse_date("05/03/2024") == datetime(2024, 5, 3)

    def test_day_first_when_over_twelve(self):
        assert parse_date("25-03-2024") == datetime(2024, 3, 25)

    def test_time_suffix_ignored(self):
        assert parse_date("25/03/2024 10:15") == datetime(2024, 3, 25)

    def test_too_few_parts(self):
        assert parse_date("25/03") is None

    def test_two_digit_year_rejected(self):
        assert parse_date("03-25-24") is None

    def test_invalid_calendar_date(self):
        assert parse_date("31/02/2024") is None

    def test_zero_component(self):
        assert parse_date("00/03/2024") is None

    def test_words(self):
        assert parse_date("not a date") is None

@pytest.mark.parametrize("raw", ["10:30", "15", "9", "1/2", "12-2024", "2024", "March 2024", "15/03"])
def test_parse_date_partial_cells(raw):
    # nothing may be filled in from the current date
    assert parse_date(raw) is None
