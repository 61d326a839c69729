"""Parameter codec: query-string encoding and parameter-map merging."""

from .append_to_query import append_to_query
from .merge_into import merge_into
from .ParameterValue import ParameterValue, to_plain
from .parse_query import parse_query
from .percent_decode import percent_decode
from .percent_encode import percent_encode
from .ScalarValue import ScalarValue
from .SequenceValue import SequenceValue

__all__ = [
    "ParameterValue",
    "ScalarValue",
    "SequenceValue",
    "append_to_query",
    "merge_into",
    "parse_query",
    "percent_decode",
    "percent_encode",
    "to_plain",
]
