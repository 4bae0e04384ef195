"""
Numeric and place extraction from file and folder names.

Helpers used by the moment queries to turn unstructured path text into
structured values:
- to_int / is_uint: lenient integer parsing
- country_code: ISO country code from keywords in a name
- year_from: first plausible year in a name

The shared date bounds also live here. Note that year_from() treats the
year bounds as exclusive while the timestamp validator treats them as
inclusive; both behaviors are relied upon and kept separate on purpose.
"""
from datetime import datetime
import re

from photomoments.lib.countries import COUNTRIES, UNKNOWN_CODE

YEAR_REGEX = re.compile(r'\d{4,5}', re.ASCII)
SIGNED_INT_REGEX = re.compile(r'[+-]?[0-9]+')

YEAR_MIN = 1990
YEAR_MAX = datetime.now().year + 3
MONTH_MIN, MONTH_MAX = 1, 12
DAY_MIN, DAY_MAX = 1, 31
HOUR_MIN, HOUR_MAX = 0, 24
MIN_MIN, MIN_MAX = 0, 59
SEC_MIN, SEC_MAX = 0, 59

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Longest keywords first so "south africa" is tried before "africa"-like overlaps
_COUNTRY_KEYWORDS = sorted(COUNTRIES.items(), key=lambda item: len(item[0]), reverse=True)


def to_int(s: str) -> int:
    """
    Parse a base-10 integer, returning 0 if it can not be converted.

    Accepts an optional sign. Whitespace, underscores and values outside
    the signed 64-bit range are rejected.

    Examples:
        >>> to_int('0042')
        42
        >>> to_int('-7')
        -7
        >>> to_int('12a')
        0
    """
    if not s or not SIGNED_INT_REGEX.fullmatch(s):
        return 0

    result = int(s)
    if result < INT64_MIN or result > INT64_MAX:
        return 0

    return result


def is_uint(s: str) -> bool:
    """Return True if the string is non-empty and only contains ASCII digits."""
    if not s:
        return False

    return all('0' <= c <= '9' for c in s)


def country_code(s: str) -> str:
    """
    Find a matching country code for a file or folder name.

    Args:
        s: Name or path, e.g. "2019-Holiday--France"

    Returns:
        Two-letter lowercase country code, 'zz' if nothing matches

    Examples:
        >>> country_code('Urlaub_Frankreich--Paris')
        'fr'
        >>> country_code('Birthday')
        'zz'
    """
    if s == UNKNOWN_CODE:
        return UNKNOWN_CODE

    s = s.replace('--', ' / ').replace('_', ' ').replace('-', ' ')
    s = s.lower()
    s = s.replace('  ', ' ')

    for keyword, code in _COUNTRY_KEYWORDS:
        if keyword in s:
            return code

    return UNKNOWN_CODE


def year_from(s: str) -> int:
    """
    Find the first plausible year in a file or folder name.

    Only runs of 4-5 digits strictly between YEAR_MIN and YEAR_MAX count.

    Returns:
        The year, or 0 if none qualifies

    Examples:
        >>> year_from('vacation-2023-pics')
        2023
        >>> year_from('archive-1987')
        0
    """
    for match in YEAR_REGEX.findall(s or ''):
        year = to_int(match)

        if YEAR_MIN < year < YEAR_MAX:
            return year

    return 0
