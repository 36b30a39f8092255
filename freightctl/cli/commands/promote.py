from __future__ import annotations

import sys

import typer

from freightctl.cli.commands._helpers import exit_on_error, exit_with_code, report_error
from freightctl.cli.context import build_client, build_context
from freightctl.core.config import config_path
from freightctl.core.errors import ErrorCode
from freightctl.output.printers import ObjectPrinter, get_printer
from freightctl.services.promotion import (
    PromoteOptions,
    RemoteCallError,
    SubscribersOf,
    dispatch,
    render,
    validate,
)

EXAMPLES = """
# Promote a piece of freight specified by name to the QA stage
freightctl promote --project=my-project --freight=abc123 --stage=qa

# Promote a piece of freight specified by alias to subscribers of the QA stage
freightctl promote --project=my-project --freight-alias=wonky-wombat --subscribers-of=qa

# Use the default project
freightctl config set-project my-project
freightctl promote --freight=abc123 --stage=qa
"""


def promote(
    project: str | None = typer.Option(
        None,
        "--project",
        help="The project the freight belongs to. If not set, the default project is used.",
    ),
    freight: str = typer.Option("", "--freight", help="The name of the freight to promote."),
    freight_alias: str = typer.Option(
        "", "--freight-alias", help="The alias of the freight to promote."
    ),
    stage: str = typer.Option(
        "",
        "--stage",
        help="The stage to promote the freight to. If set, --subscribers-of must not be set.",
    ),
    subscribers_of: str = typer.Option(
        "",
        "--subscribers-of",
        help=(
            "The stage whose subscribers the freight should be promoted to. "
            "If set, --stage must not be set."
        ),
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format: json|yaml|name. Default: plain text."
    ),
    server: str | None = typer.Option(
        None, "--server", help="API server address (overrides the configured one)."
    ),
    insecure_skip_tls_verify: bool = typer.Option(
        False, "--insecure-skip-tls-verify", help="Skip TLS certificate verification."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.0, help="Seconds to wait for the server before giving up."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print request details."),
) -> None:
    """Promote a piece of freight."""
    ctx = build_context(verbose=verbose)
    if timeout is not None and timeout <= 0:
        # urllib treats a zero timeout as non-blocking mode.
        ctx.console.error("--timeout must be greater than 0")
        exit_with_code(int(ErrorCode.USER_ERROR))

    options = PromoteOptions(
        project=project if project is not None else (ctx.config.project or ""),
        freight_name=freight,
        freight_alias=freight_alias,
        stage=stage,
        subscribers_of=subscribers_of,
        output_format=output,
        config=ctx.config,
    )
    request = exit_on_error(validate(options), ctx.console, ErrorCode.USER_ERROR)

    printer: ObjectPrinter | None = None
    if options.output_format:
        printer = exit_on_error(get_printer(options.output_format), ctx.console)

    client = build_client(
        ctx,
        server=server,
        insecure_skip_tls_verify=insecure_skip_tls_verify,
    )

    mode = "subscribers of" if isinstance(request.target, SubscribersOf) else "stage"
    ctx.console.info(f"promoting in project {request.project} to {mode} {request.target.stage}")

    outcome = dispatch(request, client, timeout=timeout)
    error = render(outcome, printer, sys.stdout)
    if error is not None:
        if outcome.partially_failed:
            ctx.console.warning(
                f"{len(outcome.promotions)} promotion(s) were created before the failure"
            )
        report_error(error, ctx.console, hint=_remote_hint(error))
        exit_with_code(int(ErrorCode.NETWORK_ERROR))


def _remote_hint(error: RemoteCallError) -> str | None:
    match error.cause.code:
        case "unauthenticated":
            return f"set bearer_token in {config_path()}"
        case "unavailable":
            return "check the server address (--server or `freightctl config set-server`)"
        case "deadline_exceeded":
            return "the server did not answer in time; retry or raise --timeout"
        case _:
            return None
