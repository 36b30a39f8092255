from __future__ import annotations

import typer

from freightctl import __version__
from freightctl.cli.commands.config_cmd import config_app
from freightctl.cli.commands.promote import EXAMPLES, promote

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command(epilog=EXAMPLES)(promote)

# Sub-apps
app.add_typer(config_app, name="config", help="View or change the persisted CLI configuration.")


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


def main() -> None:
    app()
