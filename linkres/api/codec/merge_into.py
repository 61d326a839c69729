"""Fold one parameter write into a parameter map."""

from .ParameterValue import ParameterValue
from .ScalarValue import ScalarValue
from .SequenceValue import SequenceValue


def merge_into(parameters: dict[str, ParameterValue], name: str, value: str) -> None:
    """Merge ``value`` under ``name`` in place.

    The first write stores a scalar. The second write promotes it to a
    two-element sequence; later writes extend the sequence.
    """
    existing = parameters.get(name)

    if existing is None:
        parameters[name] = ScalarValue(value)
    elif isinstance(existing, SequenceValue):
        parameters[name] = SequenceValue((*existing.values, value))
    else:
        parameters[name] = SequenceValue((existing.value, value))
