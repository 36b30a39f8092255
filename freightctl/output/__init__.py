"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .printers import (
    SUPPORTED_OUTPUT_FORMATS,
    ObjectPrinter,
    PrinterError,
    get_printer,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "ObjectPrinter",
    "PrinterError",
    "RichConsole",
    "SUPPORTED_OUTPUT_FORMATS",
    "Style",
    "get_printer",
]
