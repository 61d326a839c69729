"""Design-time parameter bound to a link descriptor."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._stringify import _stringify


class StaticParameter(BaseModel):
    """A ``(name, type, value)`` triple stored with the link."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Parameter name")
    type: str = Field("string", description="Declared data type (string, integer, boolean, date, ...)")
    value: str = Field("", description="Parameter value in its string form")

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> str:
        return _stringify(value)
