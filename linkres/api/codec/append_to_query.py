"""Append one name/value pair to a URL query string."""

from .percent_encode import percent_encode


def append_to_query(url: str, name: str, value: str) -> str:
    """Return ``url`` with ``name=value`` appended to its query string.

    A ``?`` is added when the URL has none. A ``&`` separates the new pair
    unless the URL already ends in ``?``.
    """
    if "?" not in url:
        url += "?"

    if not url.endswith("?"):
        url += "&"

    return url + percent_encode(name) + "=" + percent_encode(value)
