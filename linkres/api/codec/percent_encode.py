"""URL component encoding."""

from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides alphanumerics
_UNRESERVED = "-_.!~*'()"


def percent_encode(value: str, except_slash: bool = False) -> str:
    """Percent-encode a URL component.

    Args:
        value: Text to encode.
        except_slash: Leave ``/`` unescaped (path segments).
    """
    safe = _UNRESERVED + "/" if except_slash else _UNRESERVED
    return quote(value, safe=safe)
