"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from linkres.api.config.LinkresConfig import LinkresConfig
    from linkres.utils.logger import configure_logging

    try:
        level = LinkresConfig.load().log.level
    except ValueError:
        # commands report configuration problems themselves
        level = "INFO"
    configure_logging(LinkresConfig.get_home_dir(), level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer reports usage errors itself (exit code 2); every other outcome
    ends in ``sys.exit`` with the command's exit code.
    """
    import typer

    from linkres.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    _configure_logging()

    app = _create_app()
    try:
        app(argv, prog_name="linkresc")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
