"""Resolve a possibly relative URL against the application origin."""

from urllib.parse import urljoin


def make_absolute(url: str, base_origin: str | None) -> str:
    if not base_origin or url.lower().startswith("mailto:"):
        return url
    return urljoin(base_origin, url)
