"""Private mutable scratch copy of a descriptor."""

from dataclasses import dataclass, field

from .LinkDescriptor import LinkDescriptor
from .StaticParameter import StaticParameter


@dataclass
class _WorkingLink:
    target: str
    parameters: list[StaticParameter] = field(default_factory=list)

    @classmethod
    def from_descriptor(cls, descriptor: LinkDescriptor) -> "_WorkingLink":
        return cls(target=descriptor.raw_target or "", parameters=list(descriptor.static_parameters))
