"""Link decode API command.

CLI: linkresc link decode <url>
"""

from collections.abc import Iterator

from ..codec.ParameterValue import to_plain
from ..codec.parse_query import parse_query
from ..StageResult import StageResult


def cmd_decode(url: str) -> StageResult:
    """Decode the query parameters of a resolved URL."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Decoding query string...")
        parameters = parse_query(url)

        yield (1.0, "Complete")
        result_obj.result = f"Decoded {len(parameters)} parameter(s)"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "url": url,
            "base": url.partition("?")[0],
            "parameters": to_plain(parameters),
        }
        result_obj.success = True

    return StageResult(announce=f"Decoding {url}...", progress_callback=do_work)
