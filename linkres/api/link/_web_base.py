"""Base URL for web, archive and drill links."""

import re

# http(s)://host, //host, mailto:, or a root-relative /path
_ADDRESSABLE_PATTERN = re.compile(r"^((https?:)?//|mailto:|/(?!/))", re.IGNORECASE)
_RELATIVE_PREFIXES = ("./", "../")


def _web_base(target: str, has_parameters: bool) -> str:
    url = target.replace("\r", "").replace("\n", "")

    if not url.startswith(_RELATIVE_PREFIXES) and not _ADDRESSABLE_PATTERN.match(url):
        url = "//" + url

    if has_parameters and "?" not in url:
        url += "?"

    return url
