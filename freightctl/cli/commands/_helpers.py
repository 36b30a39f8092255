"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from freightctl.core.errors import ErrorCode
from freightctl.core.result import Err, Result
from freightctl.output.console import Style

if TYPE_CHECKING:
    from freightctl.output.console import ConsoleProtocol


def report_error(error: object, console: ConsoleProtocol, *, hint: str | None = None) -> None:
    """Print an error value, one `error:` line per message line.

    Expects error objects to have a 'message' and optional 'hint' attribute;
    anything else is rendered with str().
    """
    message: str = getattr(error, "message", str(error))
    for line in message.splitlines() or [message]:
        console.error(line)
    hint = hint or getattr(error, "hint", None)
    if hint:
        console.print(f"hint: {hint}", Style.DIM)


def exit_on_error[T, E](
    result: Result[T, E],
    console: ConsoleProtocol,
    error_code: ErrorCode = ErrorCode.USER_ERROR,
) -> T:
    """Return the Ok value, or report the error and exit with error_code."""
    if isinstance(result, Err):
        report_error(result.error, console)
        raise typer.Exit(code=int(error_code))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
