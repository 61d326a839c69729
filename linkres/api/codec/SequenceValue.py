"""Multi-valued parameter cell."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SequenceValue:
    """A parameter written two or more times, values in write order."""

    values: tuple[str, ...]

    @property
    def plain(self) -> list[str]:
        return list(self.values)
