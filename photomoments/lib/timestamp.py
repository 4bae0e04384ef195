"""
Timestamp extraction from filenames and paths.

time_from_string() tries four recognizers in priority order and stops at the
first one whose pattern is found:
1. Canonical names like "20120727_093920_97425909.jpg"
2. Date with time like "2020-01-30_09-57-18"
3. Date only like "2020-01-30"
4. Date paths like "2020/01/03" or "2020/01"

A match whose numbers are out of range yields None; lower priority patterns
are not tried after that. Results are timezone-aware UTC datetimes with
whole-second precision.
"""
from datetime import datetime, timezone, timedelta
from typing import Optional
import logging
import re

from photomoments.lib.convert import (
    to_int,
    YEAR_MIN, YEAR_MAX, MONTH_MIN, MONTH_MAX, DAY_MIN, DAY_MAX,
    HOUR_MIN, HOUR_MAX, MIN_MIN, MIN_MAX, SEC_MIN, SEC_MAX,
)

logger = logging.getLogger(__name__)

DATE_CANONICAL_REGEX = re.compile(r'\D\d{8}_\d{6}_\w+\.', re.ASCII)
DATE_TIME_REGEX = re.compile(r'\D\d{4}[\-_]\d{2}[\-_]\d{2}.{1,4}\d{2}\D\d{2}\D\d{2,}', re.ASCII)
DATE_REGEX = re.compile(r'\D\d{4}[\-_]\d{2}[\-_]\d{2,}', re.ASCII)
DATE_PATH_REGEX = re.compile(r'\D\d{4}/\d{1,2}/?\d*', re.ASCII)
DATE_INT_REGEX = re.compile(r'\d{1,4}', re.ASCII)

CANONICAL_FORMAT = '%Y%m%d_%H%M%S'
MIN_LENGTH = 6


def _valid_date(year: int, month: int, day: int) -> bool:
    return (
        YEAR_MIN <= year <= YEAR_MAX
        and MONTH_MIN <= month <= MONTH_MAX
        and DAY_MIN <= day <= DAY_MAX
    )


def _valid_time(hour: int, minute: int, second: int) -> bool:
    return (
        HOUR_MIN <= hour <= HOUR_MAX
        and MIN_MIN <= minute <= MIN_MAX
        and SEC_MIN <= second <= SEC_MAX
    )


def _utc_date(year: int, month: int, day: int,
              hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    """Build a UTC datetime, carrying overflowing days and hours forward (Feb 31 -> Mar 3, 24:00 -> next day)."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    return start + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)


def _parse_canonical(found: str) -> Optional[datetime]:
    try:
        date = datetime.strptime(found[1:16], CANONICAL_FORMAT)
    except ValueError:
        return None
    return date.replace(microsecond=0, tzinfo=timezone.utc)


def _parse_date_time(found: str) -> Optional[datetime]:
    n = [to_int(x) for x in DATE_INT_REGEX.findall(found)]
    if len(n) != 6:
        return None

    year, month, day, hour, minute, second = n
    if not _valid_date(year, month, day) or not _valid_time(hour, minute, second):
        return None

    return _utc_date(year, month, day, hour, minute, second)


def _parse_date(found: str) -> Optional[datetime]:
    n = [to_int(x) for x in DATE_INT_REGEX.findall(found)]
    if len(n) != 3:
        return None

    year, month, day = n
    if not _valid_date(year, month, day):
        return None

    return _utc_date(year, month, day)


def _parse_date_path(found: str) -> Optional[datetime]:
    n = [to_int(x) for x in DATE_INT_REGEX.findall(found)]
    if len(n) < 2 or len(n) > 3:
        return None

    year, month = n[0], n[1]
    day = n[2] if len(n) == 3 else DAY_MIN

    if not _valid_date(year, month, day):
        return None

    return _utc_date(year, month, day)


# Priority order matters: the first pattern found decides the result
_RECOGNIZERS = (
    (DATE_CANONICAL_REGEX, _parse_canonical),
    (DATE_TIME_REGEX, _parse_date_time),
    (DATE_REGEX, _parse_date),
    (DATE_PATH_REGEX, _parse_date_path),
)


def time_from_string(s: str) -> Optional[datetime]:
    """
    Extract a timestamp from a filename or path.

    Args:
        s: Arbitrary string, typically a filename or relative path

    Returns:
        Timezone-aware datetime in UTC, or None if no valid date was found

    Examples:
        >>> time_from_string('IMG_20210315_143022_12345.jpg').isoformat()
        '2021-03-15T14:30:22+00:00'
        >>> time_from_string('Photos/2019/07/x.jpg').isoformat()
        '2019-07-01T00:00:00+00:00'
        >>> time_from_string('2020-01-30_25-00-00.jpg') is None
        True
    """
    if not isinstance(s, str) or len(s) < MIN_LENGTH:
        return None

    if not s.startswith('/'):
        s = '/' + s

    try:
        for pattern, parse in _RECOGNIZERS:
            found = pattern.search(s)
            if found:
                return parse(found.group(0))
    except (ValueError, OverflowError) as e:
        logger.debug(f"timestamp: could not parse {s!r}: {e}")

    return None
