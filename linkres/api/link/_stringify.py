from typing import Any


def _stringify(value: Any) -> str:
    """Render a parameter value the way the browser side would."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
