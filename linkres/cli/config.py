"""Config Typer app factory."""

import typer

from linkres.api.config.cmd_init import cmd_init
from linkres.api.config.cmd_show import cmd_show
from linkres.api.config.cmd_version import cmd_version
from linkres.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="init")
    def init_cmd(
        ctx: typer.Context,
        link_uri: str = typer.Option("", "--link-uri", help="Base link URI, e.g. https://bi.example.com/"),
        base_origin: str | None = typer.Option(None, "--base-origin", help="Origin web links are made absolute against"),
        embedded: bool = typer.Option(False, "--embedded", help="Resolve viewsheet links for the embedded portal tab"),
        preview: bool = typer.Option(False, "--preview", help="Open links without a frame hint in the preview tab"),
        level: str = typer.Option("INFO", "--log-level", help="DEBUG, INFO, WARN or ERROR"),
        force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration"),
    ) -> None:
        """Write a starter configuration file."""
        _handle_stage_result(cmd_init, ctx)(
            link_uri=link_uri,
            base_origin=base_origin,
            embedded=embedded,
            preview=preview,
            level=level,
            force=force,
        )

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        section: str = typer.Argument("", help="Configuration section name; omit to list sections"),
    ) -> None:
        """Show configuration sections or one section."""
        _handle_stage_result(cmd_show, ctx)(section)

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show linkres version information."""
        _handle_stage_result(cmd_version, ctx)()

    return app
