"""Render a promotion outcome to the command's output stream.

Plain mode prints one line per created promotion; structured mode hands each
promotion to the injected printer. In both modes everything that was created
is written before the call's error is returned, so a partially failed
subscribers promotion still shows what it did.
"""

from __future__ import annotations

import json
from typing import TextIO

from freightctl.output.printers import ObjectPrinter

from .outcome import PromotionOutcome, RemoteCallError

__all__ = ["created_line", "render"]


def created_line(name: str) -> str:
    return f"Promotion Created: {json.dumps(name, ensure_ascii=False)}"


def render(
    outcome: PromotionOutcome,
    printer: ObjectPrinter | None,
    out: TextIO,
) -> RemoteCallError | None:
    """Write the outcome to out and return the call error, if any.

    Args:
        outcome: Result of `dispatch`
        printer: Structured printer, or None for plain lines
        out: Stream for command output (never diagnostics)
    """
    if printer is None:
        for name in outcome.created_names:
            out.write(created_line(name) + "\n")
        return outcome.error

    for promotion in outcome.promotions:
        printer.print_obj(promotion.to_manifest(), out)
    return outcome.error
