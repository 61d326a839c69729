"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .display_context import display_context
from .DisplayContext import DisplayContext

__all__ = ["CLIDisplay", "Display", "DisplayContext", "display_context"]
