import json

from ..codec.ParameterValue import ParameterValue, to_plain


def _message_envelope(message: str, parameters: dict[str, ParameterValue]) -> str:
    """Serialize a message link as compact ``{"message", "params"}`` JSON."""
    return json.dumps(
        {"message": message, "params": to_plain(parameters)},
        separators=(",", ":"),
        ensure_ascii=False,
    )
