"""Issue the single remote call a promotion request maps to."""

from __future__ import annotations

from freightctl.api.client import PromoteCall, PromotionClient
from freightctl.core.result import Err

from .options import FreightByAlias, FreightByName, PromoteRequest, SubscribersOf, ToStage
from .outcome import PROMOTE_STAGE, PROMOTE_SUBSCRIBERS, PromotionOutcome, RemoteCallError

__all__ = ["build_call", "dispatch"]


def build_call(request: PromoteRequest) -> PromoteCall:
    """Map a request to the wire call; the unused freight field is sent empty."""
    match request.freight:
        case FreightByName(name=name):
            freight, alias = name, ""
        case FreightByAlias(alias=alias):
            freight = ""

    return PromoteCall(
        project=request.project,
        freight=freight,
        freight_alias=alias,
        stage=request.target.stage,
    )


def dispatch(
    request: PromoteRequest,
    client: PromotionClient,
    *,
    timeout: float | None = None,
) -> PromotionOutcome:
    """Perform exactly one promotion RPC and normalize its result.

    No retries happen here. A timeout is reported by the client as a
    remote error and is labelled like any other failure.
    """
    call = build_call(request)

    match request.target:
        case ToStage():
            result = client.promote_to_stage(call, timeout=timeout)
            if isinstance(result, Err):
                return PromotionOutcome(error=RemoteCallError(PROMOTE_STAGE, result.error))
            return PromotionOutcome(promotions=(result.value,))

        case SubscribersOf():
            partial = client.promote_subscribers(call, timeout=timeout)
            error = None
            if partial.error is not None:
                error = RemoteCallError(PROMOTE_SUBSCRIBERS, partial.error)
            return PromotionOutcome(promotions=tuple(partial.value or ()), error=error)
