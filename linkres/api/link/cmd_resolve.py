"""Link resolve API command.

CLI: linkresc link resolve <descriptor> [--bind name=value ...] [--run-id ID]
"""

from collections.abc import Iterator
from typing import Any

from ..config.LinkresConfig import LinkresConfig
from ..StageResult import StageResult
from ._load_descriptor import _load_descriptor
from .resolve import resolve
from .RuntimeParameterBinding import RuntimeParameterBinding


def _unresolved_output(errors: list[str], warnings: list[str]) -> dict[str, Any]:
    return {
        "errors": errors,
        "warnings": warnings,
        "resolved": False,
        "kind": "",
        "label": "",
        "url": "",
        "target_frame": "",
        "parameters": {},
        "tooltip": "",
    }


def cmd_resolve(
    descriptor: str,
    bindings: list[str] | None = None,
    run_id: str | None = None,
    report_parameters: list[str] | None = None,
) -> StageResult:
    """Resolve a link descriptor against the configured session.

    Args:
        descriptor: Path to a descriptor JSON file, or inline JSON.
        bindings: Runtime bindings as ``name=value`` strings, in merge order.
        run_id: Current run identifier, sent as ``hyperlinkSourceId``.
        report_parameters: Current dashboard parameters as ``name=value`` strings.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = LinkresConfig.load()
            link = _load_descriptor(descriptor)
            runtime = [RuntimeParameterBinding.parse(text) for text in bindings or []]
            report = [RuntimeParameterBinding.parse(text) for text in report_parameters or []]
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _unresolved_output([str(e)], [])
            result_obj.success = False
            return

        session = config.session.to_session(run_id=run_id, report_parameters=report)

        yield (0.6, "Resolving link...")
        try:
            resolved = resolve(link, runtime, session)
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = _unresolved_output([str(e)], [])
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if resolved is None:
            result_obj.result = "No navigable link"
            result_obj.output = _unresolved_output([], ["Descriptor did not resolve to a link"])
            result_obj.success = True
            return

        result_obj.result = f"Resolved {resolved.kind.value} link"
        result_obj.output = {"errors": [], "warnings": [], "resolved": True, **resolved.to_dict()}
        result_obj.success = True

    return StageResult(
        announce="Resolving link descriptor...",
        progress_callback=do_work,
    )
