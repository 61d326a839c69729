"""Turn a link descriptor into a concrete, navigable link."""

import logging
from collections.abc import Callable, Iterable

from ..codec.append_to_query import append_to_query
from ..codec.merge_into import merge_into
from ..codec.ParameterValue import ParameterValue
from ._expand_field_references import MESSAGE_SCHEME, _expand_field_references
from ._message_envelope import _message_envelope
from ._normalize_target_frame import _normalize_target_frame
from ._substitute_placeholders import _substitute_placeholders
from ._viewsheet_base import _viewsheet_base
from ._web_base import _web_base
from ._WorkingLink import _WorkingLink
from .classify import classify
from .LinkDescriptor import LinkDescriptor
from .LinkKind import LinkKind
from .LinkSession import LinkSession
from .make_absolute import make_absolute
from .RESERVED_PARAMETER_NAMES import RESERVED_PARAMETER_NAMES
from .resolve_identity import resolve_identity
from .ResolvedLink import ResolvedLink
from .RuntimeParameterBinding import RuntimeParameterBinding
from .StaticParameter import StaticParameter

logger = logging.getLogger(__name__)

DISABLE_PROMPTING_PARAMETER = "disableParameterSheet"


def resolve(
    descriptor: LinkDescriptor,
    runtime_bindings: Iterable[RuntimeParameterBinding] = (),
    session: LinkSession | None = None,
    identity_resolver: Callable[[str], str] = resolve_identity,
) -> ResolvedLink | None:
    """Resolve ``descriptor`` at click time.

    Runtime bindings are merged before the descriptor's static parameters.
    Parameters written more than once become sequences.

    Args:
        descriptor: Stored link configuration. Never modified.
        runtime_bindings: Values from the clicked cell or data point.
        session: Runtime session; a default empty session when omitted.
        identity_resolver: Maps viewsheet owner keys to user names.

    Returns:
        The resolved link, or None when there is nothing to navigate to.

    Raises:
        RuntimeError: If the identity resolver fails.
    """
    session = session or LinkSession()
    bindings = list(runtime_bindings)
    working = _WorkingLink.from_descriptor(descriptor)

    if descriptor.disable_prompting:
        working.parameters.append(StaticParameter(name=DISABLE_PROMPTING_PARAMETER, type="boolean", value="true"))

    row: dict[str, str] = {}
    for binding in bindings:
        row.setdefault(binding.name, binding.value)

    expanded = _expand_field_references(working.target, row)
    if expanded is None:
        logger.debug("Link %r reads its target from an unbound column: %s", descriptor.name, working.target)
        return None
    working.target = expanded

    _substitute_placeholders(working)

    if not working.target.strip():
        logger.debug("Link %r has no target after substitution", descriptor.name)
        return None

    kind = classify(descriptor.model_copy(update={"raw_target": working.target}))

    binding_names = {binding.name for binding in bindings}
    statics = [
        parameter
        for parameter in working.parameters
        if parameter.name not in binding_names and parameter.name not in RESERVED_PARAMETER_NAMES
    ]
    has_parameters = bool(bindings or statics)

    parameters: dict[str, ParameterValue] = {}
    if kind is LinkKind.VIEWSHEET:
        base = _viewsheet_base(working.target, descriptor, session, has_parameters, identity_resolver)
        if base is None:
            logger.debug("Link %r is not a viewsheet coordinate: %s", descriptor.name, working.target)
            return None
        url, parameters = base
    elif kind is LinkKind.MESSAGE:
        url = working.target
        if url.startswith(MESSAGE_SCHEME):
            url = url[len(MESSAGE_SCHEME) :]
    else:
        url = _web_base(working.target, has_parameters)

    logger.debug("Resolving link %r as %s", descriptor.name, kind.value)

    writes = [(binding.name, binding.value) for binding in bindings]
    writes += [(parameter.name, parameter.value) for parameter in statics]

    for name, value in writes:
        if kind is not LinkKind.MESSAGE:
            url = append_to_query(url, name, value)
        merge_into(parameters, name, value)

    if descriptor.send_report_parameters:
        for binding in session.report_parameters:
            if binding.name in RESERVED_PARAMETER_NAMES or binding.name in parameters:
                continue
            if kind is not LinkKind.MESSAGE:
                url = append_to_query(url, binding.name, binding.value)
            merge_into(parameters, binding.name, binding.value)

    if kind is LinkKind.MESSAGE:
        url = _message_envelope(url, parameters)
    else:
        url = make_absolute(url, session.base_origin)

    return ResolvedLink(
        kind=kind,
        label=descriptor.label,
        url=url,
        target_frame=_normalize_target_frame(descriptor.target_frame_name, kind, session.preview),
        parameters=parameters,
        tooltip=descriptor.tooltip,
    )
