"""Link classify API command.

CLI: linkresc link classify <descriptor>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._load_descriptor import _load_descriptor
from .classify import classify
from .LinkKind import LinkKind


def cmd_classify(descriptor: str) -> StageResult:
    """Show which kind a descriptor is dispatched as."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading descriptor...")
        try:
            link = _load_descriptor(descriptor)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = {"errors": [str(e)], "warnings": [], "declared_kind": "", "kind": "", "target": ""}
            result_obj.success = False
            return

        kind = classify(link)
        warnings = []
        if kind is LinkKind.VIEWSHEET and link.kind is not LinkKind.VIEWSHEET:
            warnings.append(f"Declared kind {link.kind.value} is overridden by the viewsheet coordinate target")

        yield (1.0, "Complete")
        result_obj.result = f"Dispatched as {kind.value}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "declared_kind": link.kind.value,
            "kind": kind.value,
            "target": link.raw_target or "",
        }
        result_obj.success = True

    return StageResult(announce="Classifying link descriptor...", progress_callback=do_work)
