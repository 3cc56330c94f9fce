import re

# Everything that is neither a word character nor whitespace
_PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")


def normalize(query: str) -> str:
    """
    Strip punctuation and surrounding whitespace from a search query.
    The result is both the provider search string and the cache key.
    """
    return _PUNCTUATION_PATTERN.sub("", query).strip()


def build_query(artist: str, title: str) -> str:
    """Combine artist and title into a single free-text query."""
    return f"{artist} {title}" if artist else title
