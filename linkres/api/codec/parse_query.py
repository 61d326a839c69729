"""Decode the query string of a URL into a parameter map."""

from .ParameterValue import ParameterValue
from .merge_into import merge_into
from .percent_decode import percent_decode


def parse_query(url: str) -> dict[str, ParameterValue]:
    """Decode ``url``'s query string using the same merge rule as ``merge_into``.

    Pairs without ``=`` decode to an empty value. Empty pairs (``a=1&&b=2``)
    and anything after ``#`` are ignored.
    """
    parameters: dict[str, ParameterValue] = {}
    query = url.partition("?")[2].partition("#")[0]

    for pair in query.split("&"):
        if not pair:
            continue

        name, _, value = pair.partition("=")
        merge_into(parameters, percent_decode(name), percent_decode(value))

    return parameters
