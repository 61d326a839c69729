"""Detect query or worksheet backed links."""

from .LinkDescriptor import LinkDescriptor


def needs_drill_model(descriptor: LinkDescriptor) -> bool:
    """True when the caller must fetch a drill model before resolving.

    The fetch is asynchronous and happens outside the resolver; the chosen
    row is then passed to ``resolve`` as runtime bindings.
    """
    return bool(descriptor.query or descriptor.ws_identifier)
