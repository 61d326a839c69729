"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DEFAULT_DISPLAY_FORMAT = "yaml"


def _extract_display_format(ctx: Any) -> str:
    """Get the display format from a Typer context or one of its parents.

    Sub-apps invoked on their own have no root ``--display`` option and get
    the default format.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    return DEFAULT_DISPLAY_FORMAT


def _handle_stage_result(func: F, ctx: Any = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML)

    Args:
        func: Function that returns StageResult
        ctx: The invoking ``typer.Context``; carries ``--display``
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from linkres.cli.display.display_context import display_context

        display = display_context.get_display("cli")
        display_format = _extract_display_format(ctx)

        _run_single_execution(func, args, kwargs, display, display_format)

    return wrapper  # type: ignore[return-value]
