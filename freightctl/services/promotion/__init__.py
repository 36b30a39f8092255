"""Promotion of freight to a stage or to a stage's subscribers.

validate -> dispatch -> render: options are checked and typed, exactly one
remote call is made, and the (possibly partial) outcome is written out.
"""

from .dispatch import build_call, dispatch
from .options import (
    FreightByAlias,
    FreightByName,
    FreightRef,
    PromoteOptions,
    PromoteRequest,
    Selector,
    SubscribersOf,
    ToStage,
    ValidationError,
    validate,
)
from .outcome import PROMOTE_STAGE, PROMOTE_SUBSCRIBERS, PromotionOutcome, RemoteCallError
from .render import created_line, render

__all__ = [
    "PROMOTE_STAGE",
    "PROMOTE_SUBSCRIBERS",
    "FreightByAlias",
    "FreightByName",
    "FreightRef",
    "PromoteOptions",
    "PromoteRequest",
    "PromotionOutcome",
    "RemoteCallError",
    "Selector",
    "SubscribersOf",
    "ToStage",
    "ValidationError",
    "build_call",
    "created_line",
    "dispatch",
    "render",
    "validate",
]
