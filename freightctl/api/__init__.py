"""Remote control-plane API: object types and the promotion client."""

from .client import (
    HttpPromotionClient,
    MockPromotionClient,
    PromoteCall,
    PromotionClient,
    RemoteError,
)
from .types import API_VERSION, Promotion

__all__ = [
    "API_VERSION",
    "HttpPromotionClient",
    "MockPromotionClient",
    "PromoteCall",
    "Promotion",
    "PromotionClient",
    "RemoteError",
]
