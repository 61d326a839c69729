"""Link API domain: descriptors, sessions and the resolver."""

from .classify import classify
from .LinkDescriptor import LinkDescriptor
from .LinkKind import LinkKind
from .LinkSession import LinkSession
from .make_absolute import make_absolute
from .needs_drill_model import needs_drill_model
from .RESERVED_PARAMETER_NAMES import RESERVED_PARAMETER_NAMES
from .resolve import resolve
from .resolve_identity import resolve_identity
from .ResolvedLink import ResolvedLink
from .RuntimeParameterBinding import RuntimeParameterBinding
from .StaticParameter import StaticParameter

__all__ = [
    "RESERVED_PARAMETER_NAMES",
    "LinkDescriptor",
    "LinkKind",
    "LinkSession",
    "ResolvedLink",
    "RuntimeParameterBinding",
    "StaticParameter",
    "classify",
    "make_absolute",
    "needs_drill_model",
    "resolve",
    "resolve_identity",
]
