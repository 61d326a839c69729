"""Inline runtime field values into a raw target."""

from collections.abc import Mapping

MESSAGE_SCHEME = "message:"
COLUMN_SCHEME = "hyperlink:"
_FIELD_OPEN = "field['"
_FIELD_CLOSE = "']"


def _lookup_field(row: Mapping[str, str], field: str) -> str | None:
    if field not in row and field.startswith("None(") and field.endswith(")"):
        field = field[len("None(") : -1]
    return row.get(field)


def _expand_field_references(target: str, row: Mapping[str, str]) -> str | None:
    """Expand ``hyperlink:<field>`` and ``field['<field>']`` references.

    Args:
        target: Raw link target.
        row: First value of each runtime binding, by name.

    Returns:
        The expanded target, or None when a ``hyperlink:`` column is not bound.
    """
    prefix = ""
    body = target
    if body.startswith(MESSAGE_SCHEME):
        prefix, body = MESSAGE_SCHEME, body[len(MESSAGE_SCHEME) :]

    if body.startswith(COLUMN_SCHEME):
        value = row.get(body[len(COLUMN_SCHEME) :])
        return None if value is None else prefix + value

    if _FIELD_OPEN not in body:
        return target

    fragments = body.split(_FIELD_OPEN)
    expanded = fragments[0]
    for fragment in fragments[1:]:
        end = fragment.find(_FIELD_CLOSE)
        if end > 0:
            value = _lookup_field(row, fragment[:end])
            expanded += (value or "") + fragment[end + len(_FIELD_CLOSE) :]
        else:
            # an unterminated or empty reference loses its opening token
            expanded += fragment

    return prefix + expanded
