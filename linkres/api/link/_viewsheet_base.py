"""Base URL and initial parameters for viewsheet links."""

from collections.abc import Callable

from ..codec.append_to_query import append_to_query
from ..codec.merge_into import merge_into
from ..codec.ParameterValue import ParameterValue
from ..codec.percent_encode import percent_encode
from .LinkDescriptor import LinkDescriptor
from .LinkSession import LinkSession
from .VIEWSHEET_COORDINATE_PATTERN import VIEWSHEET_COORDINATE_PATTERN

EMBEDDED_ROUTE = "app/portal/tab/report/vs/view/"
VIEWER_ROUTE = "app/viewer/view/"
GLOBAL_SCOPE = "1"


def _viewsheet_base(
    target: str,
    descriptor: LinkDescriptor,
    session: LinkSession,
    has_parameters: bool,
    identity_resolver: Callable[[str], str],
) -> tuple[str, dict[str, ParameterValue]] | None:
    """Build the viewer URL for a ``scope^id^owner^path`` coordinate.

    Returns:
        ``(url, parameters)``, or None when the target is not a coordinate.

    Raises:
        RuntimeError: If the identity resolver fails.
    """
    match = VIEWSHEET_COORDINATE_PATTERN.match(target)
    if match is None:
        return None

    scope, _, owner_key, path = match.groups()
    parameters: dict[str, ParameterValue] = {}

    url = session.link_uri + (EMBEDDED_ROUTE if session.embedded else VIEWER_ROUTE)

    if scope == GLOBAL_SCOPE:
        url += "global/"
    else:
        try:
            identity = identity_resolver(owner_key)
        except Exception as e:
            raise RuntimeError(f"Failed to resolve owner {owner_key!r} of viewsheet link: {e}") from e
        url += f"user/{percent_encode(identity, except_slash=True)}/"

    url += percent_encode(path)

    extras: list[tuple[str, str]] = []
    if descriptor.send_selection_parameters and session.run_id is not None:
        extras.append(("hyperlinkSourceId", session.run_id))
    if descriptor.bookmark_name:
        extras.append(("bookmarkName", descriptor.bookmark_name))
        if descriptor.bookmark_user:
            extras.append(("bookmarkUser", descriptor.bookmark_user))

    for name, value in extras:
        url = append_to_query(url, name, value)
        merge_into(parameters, name, value)

    if not extras and has_parameters and "?" not in url:
        url += "?"

    return url, parameters
