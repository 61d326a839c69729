"""Write a starter configuration file.

CLI: linkresc config init [--link-uri URI] [--base-origin ORIGIN] [--embedded] [--preview] [--force]
"""

from collections.abc import Iterator

from pydantic import ValidationError

from ..StageResult import StageResult
from .LinkresConfig import LinkresConfig
from .LogConfig import LogConfig
from .SessionConfig import SessionConfig


def cmd_init(
    link_uri: str = "",
    base_origin: str | None = None,
    embedded: bool = False,
    preview: bool = False,
    level: str = "INFO",
    force: bool = False,
) -> StageResult:
    """Create ``$LINKRES_HOME/config.json`` from the given session settings.

    An existing file is left alone unless ``force`` is set.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = LinkresConfig.get_config_path()

        def fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "config_path": str(config_path),
                "content": {},
            }
            result_obj.success = False

        yield (0.2, "Checking for an existing configuration...")
        if config_path.exists() and not force:
            yield (1.0, "Complete")
            fail(f"Configuration already exists at {config_path}; use --force to overwrite")
            return

        yield (0.5, "Building configuration...")
        try:
            config = LinkresConfig(
                session=SessionConfig(
                    link_uri=link_uri, base_origin=base_origin, embedded=embedded, preview=preview
                ),
                log=LogConfig(level=level),  # type: ignore[arg-type]
            )
        except ValidationError as e:
            yield (1.0, "Complete")
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            fail(f"Configuration validation error: {field}: {first.get('msg')}")
            return

        yield (0.8, "Writing configuration...")
        try:
            config.save()
        except RuntimeError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Wrote configuration to {config_path}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "config_path": str(config_path),
            "content": config.to_dict(),
        }
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
