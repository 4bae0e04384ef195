"""
Photo search filter attached to albums.

An album stores its contents as a serialized PhotoSearch, e.g.
    year:2019 country:fr
    country:de state:"Baden-Württemberg"
    label:beach,seashore

Fields are written in declaration order and zero values are left out, so
equal filters always serialize to the same string.
"""
from dataclasses import dataclass, fields, replace
import re

TOKEN_REGEX = re.compile(r'\s*([A-Za-z_]+):("(?:[^"\\]|\\.)*"|[^\s"]*)')
NEEDS_QUOTES = re.compile(r'[\s"\\]')


class FilterError(ValueError):
    """Raised when a serialized filter can not be parsed."""


def _quote_value(value: str) -> str:
    if not NEEDS_QUOTES.search(value):
        return value
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def _unquote_value(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return re.sub(r'\\(.)', r'\1', raw[1:-1])
    return raw


@dataclass
class PhotoSearch:
    """Search filter with the fields moment albums use."""
    path: str = ''
    year: int = 0
    month: int = 0
    country: str = ''
    state: str = ''
    label: str = ''

    def serialize(self) -> str:
        """Return the canonical string form."""
        parts = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not value:
                continue
            if isinstance(value, int):
                parts.append(f"{f.name}:{value}")
            else:
                parts.append(f"{f.name}:{_quote_value(str(value))}")
        return ' '.join(parts)

    @classmethod
    def deserialize(cls, s: str) -> "PhotoSearch":
        """
        Parse a string produced by serialize().

        Args:
            s: Serialized filter

        Returns:
            PhotoSearch instance

        Raises:
            FilterError: On unknown fields, malformed tokens or non-numeric years/months
        """
        result = cls()
        known = {f.name: f for f in fields(cls)}
        s = (s or '').strip()
        pos = 0

        while pos < len(s):
            match = TOKEN_REGEX.match(s, pos)
            if match is None or match.end() == pos:
                raise FilterError(f"invalid filter near {s[pos:]!r}")

            key, raw = match.group(1).lower(), match.group(2)
            if key not in known:
                raise FilterError(f"unknown filter field {key!r}")

            value = _unquote_value(raw)
            if known[key].type in (int, 'int'):
                try:
                    value = int(value)
                except ValueError:
                    raise FilterError(f"{key} must be a number, got {value!r}") from None

            result = replace(result, **{key: value})
            pos = match.end()
            while pos < len(s) and s[pos].isspace():
                pos += 1

        return result
