"""Read a descriptor from a JSON file path or inline JSON text."""

import json
from pathlib import Path

from pydantic import ValidationError

from .LinkDescriptor import LinkDescriptor


def _load_descriptor(source: str) -> LinkDescriptor:
    """Parse ``source`` as inline JSON when it starts with ``{``, else as a file path.

    Raises:
        ValueError: If the file is missing, the JSON is invalid, or validation fails.
    """
    text = source.strip()
    if not text.startswith("{"):
        path = Path(text).expanduser()
        if not path.is_file():
            raise ValueError(f"Descriptor file does not exist: {path}")
        text = path.read_text(encoding="utf-8")

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid descriptor JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("Descriptor JSON must be an object")

    try:
        return LinkDescriptor(**raw)
    except ValidationError as e:
        first = (e.errors() or [{"msg": str(e), "loc": ()}])[0]
        field = ".".join(str(x) for x in first.get("loc", ()))
        detail = f"{field}: {first.get('msg')}" if field else first.get("msg", str(e))
        raise ValueError(f"Invalid descriptor: {detail}") from e
