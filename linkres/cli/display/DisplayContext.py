"""Display factory."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from .Display import Display

DisplayMode = Literal["cli"]


@dataclass(frozen=True)
class DisplayContext:
    """Centralized display factory with explicit mode resolution."""

    factories: Mapping[str, Callable[[], Display]] = field(
        default_factory=lambda: MappingProxyType(DisplayContext._build_factories())
    )

    @staticmethod
    def _build_factories() -> dict[str, Callable[[], Display]]:
        from .CLIDisplay import CLIDisplay

        return {"cli": CLIDisplay}

    def get_display(self, mode: DisplayMode = "cli") -> Display:
        factory = self.factories.get(mode)
        if factory is None:
            raise ValueError(f"Unsupported display mode: {mode}")
        return factory()
