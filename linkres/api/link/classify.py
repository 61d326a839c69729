"""Decide how a descriptor is dispatched."""

from .LinkDescriptor import LinkDescriptor
from .LinkKind import LinkKind
from .VIEWSHEET_COORDINATE_PATTERN import VIEWSHEET_COORDINATE_PATTERN


def classify(descriptor: LinkDescriptor) -> LinkKind:
    """Return the kind the resolver dispatches on.

    A target shaped like a viewsheet coordinate is a viewsheet link whatever
    kind was declared. Archive and drill links resolve as web links.
    """
    target = descriptor.raw_target or ""

    if VIEWSHEET_COORDINATE_PATTERN.match(target):
        return LinkKind.VIEWSHEET

    if descriptor.kind in (LinkKind.VIEWSHEET, LinkKind.MESSAGE):
        return descriptor.kind

    return LinkKind.WEB
