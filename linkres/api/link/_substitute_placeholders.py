"""Replace $(name) placeholders with encoded static parameter values."""

from ..codec.percent_encode import percent_encode
from ._WorkingLink import _WorkingLink

PLACEHOLDER_OPEN = "$("


def _substitute_placeholders(working: _WorkingLink) -> None:
    """Inline matching static parameters, then drop any placeholder left over.

    Inlined parameters are removed from ``working.parameters``. Unmatched
    placeholders are deleted together with one preceding ``/``; a missing
    ``)`` extends the placeholder to the end of the string.
    """
    target = working.target
    remaining = []

    for parameter in working.parameters:
        placeholder = f"{PLACEHOLDER_OPEN}{percent_encode(parameter.name)})"
        if placeholder in target:
            target = target.replace(placeholder, percent_encode(parameter.value))
        else:
            remaining.append(parameter)

    while True:
        start = target.find(PLACEHOLDER_OPEN)
        if start < 0:
            break

        end = target.find(")", start + len(PLACEHOLDER_OPEN))
        end = len(target) if end < 0 else end + 1

        if start > 0 and target[start - 1] == "/":
            start -= 1

        target = target[:start] + target[end:]

    working.target = target
    working.parameters = remaining
