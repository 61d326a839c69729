"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command.

    When the descriptor does not resolve, ``resolved`` is False and the link
    fields are empty strings and an empty dict.
    """

    resolved: bool = Field(..., description="Whether the descriptor produced a navigable link")
    kind: str = Field(..., description="Kind the link was dispatched as, empty if unresolved")
    label: str = Field(..., description="Display label carried from the descriptor")
    url: str = Field(..., description="Final URL, or JSON envelope for message links")
    target_frame: str = Field(..., description="Normalized target frame")
    parameters: dict[str, Any] = Field(..., description="Merged parameters; repeated names map to lists")
    tooltip: str = Field(..., description="Tooltip carried from the descriptor")


class LinkClassifyOutput(BaseOutputSchema):
    """Output schema for link classify command."""

    declared_kind: str = Field(..., description="Kind stored on the descriptor")
    kind: str = Field(..., description="Kind the resolver dispatches on")
    target: str = Field(..., description="Raw target that was classified")


class LinkDecodeOutput(BaseOutputSchema):
    """Output schema for link decode command."""

    url: str = Field(..., description="URL that was decoded")
    base: str = Field(..., description="URL without its query string")
    parameters: dict[str, Any] = Field(..., description="Decoded query parameters; repeated names map to lists")


schema_registry.register_output_schema("link", "resolve", LinkResolveOutput)
schema_registry.register_output_schema("link", "classify", LinkClassifyOutput)
schema_registry.register_output_schema("link", "decode", LinkDecodeOutput)
