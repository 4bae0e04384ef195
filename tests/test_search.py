"""Tests for album filter serialization and label word helpers."""
import pytest

from photomoments.lib.search import PhotoSearch, FilterError
from photomoments.lib.text import slugify, words, unique_words, title_case, quote


class TestSerialize:
    """Tests for PhotoSearch.serialize()."""

    def test_empty(self):
        assert PhotoSearch().serialize() == ''

    def test_field_order(self):
        f = PhotoSearch(country='fr', year=2019)
        assert f.serialize() == 'year:2019 country:fr'

    def test_month(self):
        assert PhotoSearch(year=2019, month=7).serialize() == 'year:2019 month:7'

    def test_quotes_values_with_spaces(self):
        f = PhotoSearch(country='us', state='New York')
        assert f.serialize() == 'country:us state:"New York"'

    def test_label_list(self):
        assert PhotoSearch(label='beach,sunset').serialize() == 'label:beach,sunset'


class TestDeserialize:
    """Tests for PhotoSearch.deserialize()."""

    def test_empty(self):
        assert PhotoSearch.deserialize('') == PhotoSearch()

    def test_fields(self):
        f = PhotoSearch.deserialize('year:2019 country:fr')
        assert f.year == 2019
        assert f.country == 'fr'

    def test_quoted_value(self):
        f = PhotoSearch.deserialize('country:us state:"New York"')
        assert f.state == 'New York'

    def test_escaped_quote(self):
        f = PhotoSearch(path='Bob "B" Smith')
        assert PhotoSearch.deserialize(f.serialize()).path == 'Bob "B" Smith'

    def test_label_stable(self):
        stored = 'label:beach,seashore'
        assert PhotoSearch.deserialize(stored).serialize() == stored

    def test_unknown_field(self):
        with pytest.raises(FilterError):
            PhotoSearch.deserialize('color:red')

    def test_bad_number(self):
        with pytest.raises(FilterError):
            PhotoSearch.deserialize('year:last')

    def test_garbage(self):
        with pytest.raises(FilterError):
            PhotoSearch.deserialize('just words')

    def test_unterminated_quote(self):
        with pytest.raises(FilterError):
            PhotoSearch.deserialize('state:"New York')

    def test_filter_error_is_value_error(self):
        assert issubclass(FilterError, ValueError)


class TestTextHelpers:
    """Tests for slug and word helpers."""

    def test_slugify_title(self):
        assert slugify('Bavaria / Germany') == 'bavaria-germany'

    def test_slugify_accents(self):
        assert slugify('Holiday/2019_Côte d’Azur') == 'holiday-2019-cote-d-azur'

    def test_slugify_empty(self):
        assert slugify('///') == ''

    def test_words(self):
        assert words('beach, sunset,,sand | snow') == ['beach', 'sunset', 'sand', 'snow']

    def test_words_empty(self):
        assert words('') == []

    def test_unique_words_case_and_whitespace(self):
        assert unique_words(['beach', 'Beach', ' beach ', 'sunset']) == ['beach', 'sunset']

    def test_unique_words_keeps_first_seen_order(self):
        assert unique_words(['sunset', 'beach', 'sunset']) == ['sunset', 'beach']

    def test_title_case(self):
        assert title_case('summer_in-the_city') == 'Summer In The City'

    def test_quote(self):
        assert quote('Beach') == '"Beach"'
        assert quote('') == '""'
