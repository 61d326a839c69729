"""Persisted link configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .LinkKind import LinkKind
from .StaticParameter import StaticParameter


class LinkDescriptor(BaseModel):
    """Declarative link attached to a table cell, chart point, image or text component.

    Descriptors are frozen. The resolver works on a private copy and never
    writes back.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: LinkKind = Field(LinkKind.WEB, description="Declared link kind; legacy numeric codes are accepted")
    raw_target: str | None = Field(None, description="Unresolved link body, may contain $(name) placeholders")
    static_parameters: tuple[StaticParameter, ...] = Field(default_factory=tuple)
    target_frame_name: str | None = None
    disable_prompting: bool = False
    send_selection_parameters: bool = False
    send_report_parameters: bool = False
    name: str = ""
    label: str = ""
    tooltip: str = ""
    bookmark_name: str | None = None
    bookmark_user: str | None = None
    query: str | None = Field(None, description="Backing query for drill links")
    ws_identifier: str | None = Field(None, description="Backing worksheet for drill links")

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> LinkKind:
        return LinkKind.coerce(value)
