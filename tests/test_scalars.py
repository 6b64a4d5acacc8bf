"""Tests for criteria.scalars module."""

import pytest

from criteria import CriteriaError, Operator
from criteria.scalars import (
    GameDate,
    compare,
    is_numeric,
    parse_date,
    parse_time_control,
    scan_float,
    scan_unsigned,
)


class TestCompare:
    """Tests for the relational comparator."""

    @pytest.mark.parametrize('operator, lhs, rhs, expected', [
        (Operator.LESS_THAN, 1, 2, True),
        (Operator.LESS_THAN, 2, 2, False),
        (Operator.LESS_THAN_OR_EQUAL, 2, 2, True),
        (Operator.GREATER_THAN, 3, 2, True),
        (Operator.GREATER_THAN_OR_EQUAL, 1, 2, False),
        (Operator.EQUAL, 2.0, 2, True),
        (Operator.NOT_EQUAL, 2, 2, False),
    ])
    def test_relational_operators(self, operator, lhs, rhs, expected):
        assert compare(operator, lhs, rhs) is expected

    @pytest.mark.parametrize('operator', [Operator.NONE, Operator.REGEX])
    def test_non_relational_operator_raises(self, operator):
        with pytest.raises(CriteriaError):
            compare(operator, 1, 2)


class TestScanners:
    """Tests for the lenient number scanners."""

    def test_unsigned_with_trailing_text(self):
        assert scan_unsigned(' 42abc') == 42

    def test_unsigned_rejects_text(self):
        assert scan_unsigned('abc') is None

    def test_unsigned_rejects_negative(self):
        assert scan_unsigned('-5') is None

    def test_float_prefix(self):
        assert scan_float('2.5x') == 2.5

    def test_float_multiple_dots(self):
        assert scan_float('1.2.3') == 1.2

    def test_float_signed(self):
        assert scan_float('-0.5') == -0.5


class TestIsNumeric:
    """The numeric classifier is deliberately lenient."""

    @pytest.mark.parametrize('text', ['2700', '-12.5', '+3', '1.2.3', ''])
    def test_numeric(self, text):
        assert is_numeric(text)

    @pytest.mark.parametrize('text', ['12a', 'abc', '1 2', '--1'])
    def test_not_numeric(self, text):
        assert not is_numeric(text)


class TestParseDate:
    """Tests for PGN date parsing."""

    def test_full_date(self):
        assert parse_date('1995.06.01') == GameDate(1995, 6, 1)

    def test_encoded(self):
        assert parse_date('1995.06.01').encoded == 19950601

    def test_year_only(self):
        assert parse_date('1990') == GameDate(1990, 1, 1)

    def test_unknown_month_and_day(self):
        assert parse_date('1990.??.??') == GameDate(1990, 1, 1)

    def test_unknown_day(self):
        assert parse_date('1990.07.??') == GameDate(1990, 7, 1)

    def test_unknown_year(self):
        assert parse_date('????.??.??') is None

    def test_empty(self):
        assert parse_date('') is None

    @pytest.mark.parametrize('year, expected', [
        (100, False), (101, True), (2999, True), (3000, False), (85, False),
    ])
    def test_in_range(self, year, expected):
        assert GameDate(year).in_range is expected


class TestParseTimeControl:
    """Tests for TimeControl parsing."""

    def test_multiple_controls_truncated(self):
        tc = parse_time_control('40/7200:20/3600')
        assert tc.text == '40/7200'
        assert tc.period == 7200

    def test_increment(self):
        tc = parse_time_control('300+5')
        assert tc.text == '300+5'
        assert tc.period == 300

    def test_sandclock(self):
        assert parse_time_control('*180').period == 180

    def test_sudden_death(self):
        assert parse_time_control('600').period == 600

    @pytest.mark.parametrize('text', ['', '?', '-', 'abc', '60a', '*x'])
    def test_unusable(self, text):
        assert parse_time_control(text) is None
