"""Structured-output printers selected with `-o/--output`.

A printer renders one object at a time to a text stream. Commands never pick
a printer from global state; they resolve one with `get_printer` and inject
it where objects are rendered.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol, TextIO

import yaml

from freightctl.core.result import Err, Ok, Result

__all__ = [
    "ObjectPrinter",
    "JsonPrinter",
    "YamlPrinter",
    "NamePrinter",
    "PrinterError",
    "SUPPORTED_OUTPUT_FORMATS",
    "get_printer",
]


class ObjectPrinter(Protocol):
    def print_obj(self, obj: Mapping[str, object], out: TextIO) -> None:
        """Render a single object to out."""
        ...


class JsonPrinter:
    def print_obj(self, obj: Mapping[str, object], out: TextIO) -> None:
        out.write(json.dumps(obj, indent=2, ensure_ascii=False))
        out.write("\n")


class YamlPrinter:
    """Block-style YAML, one explicit `---` document per object."""

    def print_obj(self, obj: Mapping[str, object], out: TextIO) -> None:
        out.write("---\n")
        out.write(yaml.safe_dump(dict(obj), default_flow_style=False, sort_keys=False))


class NamePrinter:
    """Prints `<resource>.<group>/<name>` for each object."""

    def print_obj(self, obj: Mapping[str, object], out: TextIO) -> None:
        kind = obj.get("kind")
        api_version = obj.get("apiVersion")
        metadata = obj.get("metadata")
        name = metadata.get("name") if isinstance(metadata, Mapping) else None

        resource = f"{kind}".lower() if isinstance(kind, str) and kind else ""
        if isinstance(api_version, str) and "/" in api_version:
            group = api_version.split("/", 1)[0]
            resource = f"{resource}.{group}" if resource else group
        out.write(f"{resource}/{name}\n" if resource else f"{name}\n")


@dataclass(frozen=True, slots=True)
class PrinterError:
    message: str
    hint: str | None = None


_PRINTERS: dict[str, Callable[[], ObjectPrinter]] = {
    "json": JsonPrinter,
    "name": NamePrinter,
    "yaml": YamlPrinter,
}

SUPPORTED_OUTPUT_FORMATS: tuple[str, ...] = tuple(sorted(_PRINTERS))


def get_printer(output_format: str) -> Result[ObjectPrinter, PrinterError]:
    """Resolve a printer by format name (case-insensitive)."""
    factory = _PRINTERS.get(output_format.strip().lower())
    if factory is None:
        return Err(
            PrinterError(
                message=(
                    f'unsupported output format "{output_format}" '
                    f"(allowed: {', '.join(SUPPORTED_OUTPUT_FORMATS)})"
                ),
            )
        )
    return Ok(factory())
