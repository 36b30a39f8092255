from __future__ import annotations

from dataclasses import dataclass

from freightctl.api.client import RemoteError
from freightctl.api.types import Promotion

__all__ = [
    "PROMOTE_STAGE",
    "PROMOTE_SUBSCRIBERS",
    "PromotionOutcome",
    "RemoteCallError",
]

PROMOTE_STAGE = "promote stage"
PROMOTE_SUBSCRIBERS = "promote subscribers"


@dataclass(frozen=True, slots=True)
class RemoteCallError:
    """A remote failure labelled with the operation that hit it."""

    operation: str
    cause: RemoteError

    @property
    def message(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.operation}: {self.cause}"


@dataclass(frozen=True, slots=True)
class PromotionOutcome:
    """What one promotion call produced.

    `error` being set does not mean `promotions` is empty: a subscribers
    call can create some promotions before failing.
    """

    promotions: tuple[Promotion, ...] = ()
    error: RemoteCallError | None = None

    @property
    def created_names(self) -> list[str]:
        return [p.name for p in self.promotions]

    @property
    def partially_failed(self) -> bool:
        return self.error is not None and bool(self.promotions)
