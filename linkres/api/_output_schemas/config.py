"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - section: str - the section name, empty string when listing all sections
    - content: dict[str, Any] - {"sections": [...]} when listing, else the section dict
    - config_path: str - path to the configuration file
    """

    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="Section names when listing, otherwise the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""

    config_path: str = Field(..., description="Path to the configuration file")
    content: dict[str, Any] = Field(..., description="Written configuration, empty when nothing was written")


schema_registry.register_output_schema("config", "init", ConfigInitOutput)
