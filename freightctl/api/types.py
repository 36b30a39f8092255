"""Control-plane objects as the API server returns them.

The CLI treats server-owned objects as opaque: it reads a couple of
identifying fields and otherwise passes the raw mapping through to printers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from freightctl.core.structured import StrDict, get_str, get_table

__all__ = [
    "API_GROUP",
    "API_VERSION",
    "PROMOTION_KIND",
    "Promotion",
]

API_GROUP = "kargo.akuity.io"
API_VERSION = f"{API_GROUP}/v1alpha1"
PROMOTION_KIND = "Promotion"


def _empty_raw() -> StrDict:
    return {}


@dataclass(frozen=True, slots=True)
class Promotion:
    """One promotion created by the server.

    Attributes:
        name: metadata.name ("" when the server omitted it)
        namespace: metadata.namespace, i.e. the project
        raw: The full object as received (metadata, spec, status)
    """

    name: str
    namespace: str | None = None
    raw: Mapping[str, object] = field(default_factory=_empty_raw, compare=False)

    @classmethod
    def from_wire(cls, obj: Mapping[str, object]) -> Promotion:
        metadata = get_table(obj, "metadata") or {}
        return cls(
            name=get_str(metadata, "name") or "",
            namespace=get_str(metadata, "namespace"),
            raw=dict(obj),
        )

    def to_manifest(self) -> dict[str, object]:
        """Return the object in the shape users see with `-o json|yaml`."""
        manifest: dict[str, object] = {"apiVersion": API_VERSION, "kind": PROMOTION_KIND}
        for key, value in self.raw.items():
            if key in ("apiVersion", "kind"):
                continue
            manifest[key] = value
        if "metadata" not in manifest:
            metadata: dict[str, object] = {"name": self.name}
            if self.namespace:
                metadata["namespace"] = self.namespace
            manifest["metadata"] = metadata
        return manifest
