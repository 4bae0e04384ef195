"""Tests for integer, country and year extraction from names."""
import pytest

from photomoments.lib.convert import to_int, is_uint, country_code, year_from, YEAR_MAX


class TestToInt:
    """Tests for to_int()."""

    def test_plain_number(self):
        assert to_int('2019') == 2019

    def test_leading_zeros(self):
        assert to_int('007') == 7

    def test_signed(self):
        assert to_int('-12') == -12
        assert to_int('+12') == 12

    @pytest.mark.parametrize('value', ['', 'abc', '12a', ' 12', '1_000', '1.5'])
    def test_invalid_returns_zero(self, value):
        assert to_int(value) == 0

    def test_out_of_int64_range(self):
        assert to_int('9223372036854775808') == 0
        assert to_int('9223372036854775807') == 9223372036854775807


class TestIsUInt:
    """Tests for is_uint()."""

    def test_digits(self):
        assert is_uint('0123') is True

    def test_empty(self):
        assert is_uint('') is False

    def test_sign_not_allowed(self):
        assert is_uint('-1') is False
        assert is_uint('+1') is False

    def test_non_ascii_digits(self):
        assert is_uint('١٢') is False

    def test_mixed(self):
        assert is_uint('12a') is False


class TestCountryCode:
    """Tests for country_code()."""

    def test_unknown_sentinel_passes_through(self):
        assert country_code('zz') == 'zz'

    def test_keyword(self):
        assert country_code('Holiday France') == 'fr'

    def test_separators_normalized(self):
        assert country_code('2019_Trip-To-Germany') == 'de'

    def test_multi_word_keyword_with_separators(self):
        assert country_code('new-zealand_2018') == 'nz'
        assert country_code('south_africa') == 'za'

    def test_double_dash(self):
        assert country_code('Europe--Spain') == 'es'

    def test_case_insensitive(self):
        assert country_code('ITALY') == 'it'

    def test_city_keyword(self):
        assert country_code('Weekend in Paris') == 'fr'

    def test_no_match(self):
        assert country_code('Birthday Party') == 'zz'

    @pytest.mark.parametrize('name,expected', [
        ('2019 New South Wales', 'au'),
        ('Busan trip', 'kr'),
        ('Lausanne', 'ch'),
        ('Perugia', 'it'),
        ('Thousand Oaks', 'zz'),
    ])
    def test_place_names_containing_other_keywords(self, name, expected):
        assert country_code(name) == expected

    def test_empty(self):
        assert country_code('') == 'zz'


class TestYear:
    """Tests for year_from()."""

    def test_year_in_name(self):
        assert year_from('vacation-2023-pics') == 2023

    def test_year_too_old(self):
        assert year_from('archive-1987') == 0

    def test_lower_bound_is_exclusive(self):
        assert year_from('scans-1990') == 0
        assert year_from('scans-1991') == 1991

    def test_upper_bound_is_exclusive(self):
        assert year_from(f'plan-{YEAR_MAX}') == 0
        assert year_from(f'plan-{YEAR_MAX - 1}') == YEAR_MAX - 1

    def test_first_valid_run_wins(self):
        assert year_from('1850_copy_of_2015_and_2016') == 2015

    def test_five_digit_run(self):
        # 20151 is a single run and out of range
        assert year_from('IMG20151') == 0

    def test_no_digits(self):
        assert year_from('holiday') == 0
