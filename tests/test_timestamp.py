"""Tests for timestamp extraction from filenames and paths."""
from datetime import datetime, timezone

import pytest

from photomoments.lib.convert import YEAR_MAX
from photomoments.lib.timestamp import time_from_string


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestCanonicalNames:
    """Tests for YYYYMMDD_HHMMSS_suffix. names."""

    def test_canonical_name(self):
        assert time_from_string('IMG_20210315_143022_12345.jpg') == utc(2021, 3, 15, 14, 30, 22)

    def test_canonical_without_prefix(self):
        assert time_from_string('20120727_093920_97425909.jpg') == utc(2012, 7, 27, 9, 39, 20)

    def test_invalid_canonical_date(self):
        # Matches the canonical pattern, so no other pattern is tried
        assert time_from_string('20121327_093920_97425909.jpg') is None

    def test_result_is_utc(self):
        result = time_from_string('IMG_20210315_143022_12345.jpg')
        assert result.tzinfo == timezone.utc
        assert result.microsecond == 0


class TestDateTime:
    """Tests for date with time."""

    def test_date_time(self):
        assert time_from_string('2020-01-30_09-57-18.jpg') == utc(2020, 1, 30, 9, 57, 18)

    def test_date_time_in_path(self):
        assert time_from_string('Camera/2018_06_02 12.01.45.jpg') == utc(2018, 6, 2, 12, 1, 45)

    def test_invalid_hour(self):
        assert time_from_string('2020-01-30_25-00-00.jpg') is None

    def test_invalid_minute(self):
        assert time_from_string('2020-01-30_10-60-00.jpg') is None

    def test_hour_24_rolls_over(self):
        assert time_from_string('2020-01-30_24-00-00.jpg') == utc(2020, 1, 31, 0, 0, 0)

    def test_wrong_group_count(self):
        # Seven numeric groups in the match
        assert time_from_string('2020-01-30_09-57-18123456.jpg') is None


class TestDateOnly:
    """Tests for dates without time."""

    def test_date(self):
        assert time_from_string('Scan 2019-11-05.png') == utc(2019, 11, 5)

    def test_underscore_date(self):
        assert time_from_string('party_2015_12_31.jpg') == utc(2015, 12, 31)

    def test_invalid_month(self):
        assert time_from_string('report-2019-13-05.png') is None

    def test_day_overflow_is_normalized(self):
        assert time_from_string('x-2021-02-31.jpg') == utc(2021, 3, 3)

    def test_year_before_min(self):
        assert time_from_string('old-1989-05-05.jpg') is None

    def test_year_bounds_inclusive(self):
        assert time_from_string('old-1990-05-05.jpg') == utc(1990, 5, 5)
        assert time_from_string(f'plan-{YEAR_MAX}-01-01.txt') == utc(YEAR_MAX, 1, 1)
        assert time_from_string(f'plan-{YEAR_MAX + 1}-01-01.txt') is None


class TestDatePath:
    """Tests for year/month[/day] paths."""

    def test_year_month(self):
        assert time_from_string('Photos/2019/07/x.jpg') == utc(2019, 7, 1)

    def test_year_month_day(self):
        assert time_from_string('Photos/2019/7/14/x.jpg') == utc(2019, 7, 14)

    def test_invalid_day(self):
        assert time_from_string('Photos/2019/07/45/x.jpg') is None

    def test_invalid_month(self):
        assert time_from_string('Photos/2019/13/x.jpg') is None

    def test_leading_slash_optional(self):
        assert time_from_string('2019/07/x.jpg') == utc(2019, 7, 1)


class TestNoMatch:
    """Inputs without a date."""

    @pytest.mark.parametrize('value', ['random_name.jpg', 'abc', '', 'IMG_1234.JPG'])
    def test_no_date(self, value):
        assert time_from_string(value) is None

    def test_non_string(self):
        assert time_from_string(None) is None
        assert time_from_string(20200101) is None
