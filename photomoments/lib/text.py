"""Text helpers for album titles, slugs and label lists."""
import re
import unicodedata

SLUG_MAX_LENGTH = 160
WORD_SEPARATORS = re.compile(r'[,|]')


def slugify(raw: str) -> str:
    """
    Build a URL-safe slug from a title or path.

    Examples:
        >>> slugify('Bavaria / Germany')
        'bavaria-germany'
        >>> slugify('Holiday/2019_Côte d’Azur')
        'holiday-2019-cote-d-azur'
    """
    token = unicodedata.normalize('NFKD', str(raw or ''))
    token = ''.join(c for c in token if not unicodedata.combining(c)).lower()
    token = re.sub(r'[^a-z0-9]+', '-', token)
    return token.strip('-')[:SLUG_MAX_LENGTH].rstrip('-')


def quote(s: str) -> str:
    """Quote a string for log messages."""
    return f'"{s}"' if s else '""'


def title_case(s: str) -> str:
    """Turn a folder or file name into a title: separators become spaces, words capitalized."""
    words = re.sub(r'[_\-]+', ' ', s or '').split()
    return ' '.join(w[:1].upper() + w[1:] for w in words)


def words(s: str) -> list[str]:
    """Split a comma or pipe separated list, dropping empty entries."""
    return [w.strip() for w in WORD_SEPARATORS.split(s or '') if w.strip()]


def unique_words(items: list[str]) -> list[str]:
    """
    Deduplicate words ignoring case and surrounding whitespace.

    The first spelling seen is kept and order is preserved.
    """
    result = []
    seen = set()

    for item in items:
        key = ' '.join(item.split()).lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(item.strip())

    return result
