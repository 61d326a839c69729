"""Single-valued parameter cell."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScalarValue:
    """A parameter written exactly once."""

    value: str

    @property
    def plain(self) -> str:
        return self.value
