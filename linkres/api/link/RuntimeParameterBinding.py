"""Click-time parameter value."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._stringify import _stringify


class RuntimeParameterBinding(BaseModel):
    """A ``(name, value)`` pair known only when the user clicks, e.g. the clicked row."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> str:
        return _stringify(value)

    @classmethod
    def parse(cls, text: str) -> "RuntimeParameterBinding":
        """Build a binding from ``name=value`` text.

        Raises:
            ValueError: If the text has no ``=`` or an empty name.
        """
        name, sep, value = text.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid binding {text!r}, expected name=value")
        return cls(name=name.strip(), value=value)
