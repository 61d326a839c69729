"""Immutable description of the runtime session a link is resolved in."""

from pydantic import BaseModel, ConfigDict, Field

from .RuntimeParameterBinding import RuntimeParameterBinding


class LinkSession(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    link_uri: str = Field("", description="Base link URI prefixed to viewsheet routes")
    run_id: str | None = Field(None, description="Identifier of the current run, sent as hyperlinkSourceId")
    embedded: bool = Field(False, description="Resolving inside an embedded portal tab")
    base_origin: str | None = Field(None, description="Origin used to make web links absolute")
    preview: bool = Field(False, description="Preview session, links open in the preview tab")
    report_parameters: tuple[RuntimeParameterBinding, ...] = Field(
        default_factory=tuple, description="Current dashboard parameters, sent when a link asks for them"
    )
