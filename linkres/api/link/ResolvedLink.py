"""Resolution output."""

from dataclasses import dataclass, field
from typing import Any

from ..codec.ParameterValue import ParameterValue, to_plain
from .LinkKind import LinkKind


@dataclass(frozen=True)
class ResolvedLink:
    """A concrete, navigable link.

    For message links ``url`` holds a JSON envelope ``{"message", "params"}``
    to dispatch as an event instead of a URL to navigate to.
    """

    kind: LinkKind
    label: str
    url: str
    target_frame: str
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
    tooltip: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "url": self.url,
            "target_frame": self.target_frame,
            "parameters": to_plain(self.parameters),
            "tooltip": self.tooltip,
        }
