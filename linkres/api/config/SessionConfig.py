"""Session defaults used when resolving links from the command line."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ..link.LinkSession import LinkSession
from ..link.RuntimeParameterBinding import RuntimeParameterBinding


class SessionConfig(BaseModel):
    """Static description of the application a link is resolved for."""

    model_config = ConfigDict(extra="forbid")

    link_uri: str = Field(..., description="Base link URI, e.g. https://bi.example.com/")
    base_origin: str | None = Field(None, description="Origin that web links are made absolute against")
    embedded: bool = Field(False, description="Resolve viewsheet links for the embedded portal tab")
    preview: bool = Field(False, description="Open links without a frame hint in the preview tab")

    def to_session(
        self, run_id: str | None = None, report_parameters: Iterable[RuntimeParameterBinding] = ()
    ) -> LinkSession:
        return LinkSession(
            link_uri=self.link_uri,
            run_id=run_id,
            embedded=self.embedded,
            base_origin=self.base_origin,
            preview=self.preview,
            report_parameters=tuple(report_parameters),
        )
