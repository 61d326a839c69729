"""Tagged parameter value type."""

from typing import TypeAlias

from .ScalarValue import ScalarValue
from .SequenceValue import SequenceValue

ParameterValue: TypeAlias = ScalarValue | SequenceValue


def to_plain(parameters: dict[str, ParameterValue]) -> dict[str, str | list[str]]:
    """Flatten a parameter map into JSON-ready scalars and lists."""
    return {name: value.plain for name, value in parameters.items()}
