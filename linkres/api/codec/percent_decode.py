"""URL component decoding."""

from urllib.parse import unquote


def percent_decode(value: str) -> str:
    """Reverse ``percent_encode``. A ``+`` is kept literally."""
    return unquote(value)
