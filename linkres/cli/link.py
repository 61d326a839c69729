"""Link Typer app factory."""

import typer

from linkres.api.link.cmd_classify import cmd_classify
from linkres.api.link.cmd_decode import cmd_decode
from linkres.api.link.cmd_resolve import cmd_resolve
from linkres.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Resolve hyperlink descriptors",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        ctx: typer.Context,
        descriptor: str = typer.Argument(..., help="Descriptor JSON file or inline JSON object"),
        bind: list[str] = typer.Option([], "--bind", "-b", help="Runtime binding name=value (repeatable)"),
        run_id: str | None = typer.Option(None, "--run-id", help="Current run identifier"),
        report_param: list[str] = typer.Option(
            [], "--report-param", help="Current dashboard parameter name=value (repeatable)"
        ),
    ) -> None:
        """Resolve a descriptor into a URL, target frame and parameters."""
        _handle_stage_result(cmd_resolve, ctx)(
            descriptor=descriptor, bindings=bind, run_id=run_id, report_parameters=report_param
        )

    @app.command(name="classify")
    def classify_cmd(
        ctx: typer.Context,
        descriptor: str = typer.Argument(..., help="Descriptor JSON file or inline JSON object"),
    ) -> None:
        """Show which link kind a descriptor is dispatched as."""
        _handle_stage_result(cmd_classify, ctx)(descriptor=descriptor)

    @app.command(name="decode")
    def decode_cmd(
        ctx: typer.Context,
        url: str = typer.Argument(..., help="URL whose query string to decode"),
    ) -> None:
        """Decode the query parameters of a URL."""
        _handle_stage_result(cmd_decode, ctx)(url=url)

    return app
