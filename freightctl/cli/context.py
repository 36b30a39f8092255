from __future__ import annotations

from dataclasses import dataclass

import typer

from freightctl.api.client import HttpPromotionClient, PromotionClient
from freightctl.core.config import CLIConfig, config_path, load_config
from freightctl.core.errors import ErrorCode
from freightctl.core.result import Err
from freightctl.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: CLIConfig
    console: ConsoleProtocol


def build_context(*, verbose: bool = False) -> CLIContext:
    console = RichConsole(verbose=verbose)
    config_result = load_config()
    if isinstance(config_result, Err):
        error = config_result.error
        console.error(error.message)
        if error.hint:
            console.print(f"hint: {error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(config=config_result.value, console=console)


def build_client(
    ctx: CLIContext,
    *,
    server: str | None = None,
    insecure_skip_tls_verify: bool = False,
) -> PromotionClient:
    """Create the promotion client from flags, falling back to the config."""
    address = (server or ctx.config.api_address or "").strip()
    if not address:
        ctx.console.error("no API server configured")
        ctx.console.print(
            f"hint: pass --server or run: freightctl config set-server <url> ({config_path()})",
            Style.DIM,
        )
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    if not address.startswith(("http://", "https://")):
        ctx.console.error(f"invalid API server address: {address}")
        ctx.console.print("hint: the address must start with http:// or https://", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.console.info(f"server: {address}")
    return HttpPromotionClient(
        address,
        bearer_token=ctx.config.bearer_token,
        insecure_skip_tls_verify=insecure_skip_tls_verify or ctx.config.insecure_skip_tls_verify,
    )
