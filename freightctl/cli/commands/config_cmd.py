from __future__ import annotations

import typer

from freightctl.cli.commands._helpers import exit_on_error
from freightctl.cli.context import build_context
from freightctl.core.config import CLIConfig, config_path, save_config
from freightctl.core.errors import ErrorCode
from freightctl.output.console import Style

config_app = typer.Typer(add_completion=False, no_args_is_help=True)


def _masked(config: CLIConfig) -> CLIConfig:
    if not config.bearer_token:
        return config
    return CLIConfig(
        api_address=config.api_address,
        project=config.project,
        bearer_token="********",
        insecure_skip_tls_verify=config.insecure_skip_tls_verify,
    )


@config_app.command("view")
def view_cmd() -> None:
    """Print the current CLI configuration (token masked)."""
    ctx = build_context()
    typer.echo(f"# {config_path()}")
    typer.echo(_masked(ctx.config).to_toml(), nl=False)


@config_app.command("set-project")
def set_project_cmd(
    project: str = typer.Argument(..., help="Project to use when --project is not given."),
) -> None:
    """Set the default project."""
    ctx = build_context()
    if not project.strip():
        ctx.console.error("project must not be empty")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    path = exit_on_error(
        save_config(ctx.config.with_project(project)), ctx.console, ErrorCode.ENV_ERROR
    )
    ctx.console.success(f"default project set to {project.strip()} ({path})")


@config_app.command("set-server")
def set_server_cmd(
    address: str = typer.Argument(..., help="API server address, e.g. https://kargo.example.com"),
    insecure_skip_tls_verify: bool = typer.Option(
        False, "--insecure-skip-tls-verify", help="Skip TLS certificate verification."
    ),
) -> None:
    """Set the API server address."""
    ctx = build_context()
    if not address.strip().startswith(("http://", "https://")):
        ctx.console.error(f"invalid API server address: {address}")
        ctx.console.print("hint: the address must start with http:// or https://", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config = ctx.config.with_server(address, insecure_skip_tls_verify=insecure_skip_tls_verify)
    path = exit_on_error(save_config(config), ctx.console, ErrorCode.ENV_ERROR)
    ctx.console.success(f"server set to {config.api_address} ({path})")
