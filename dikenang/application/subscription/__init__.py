"""Live vote subscriptions."""

from .gateway import (
    SubscriptionError,
    SubscriptionGateway,
    SubscriptionState,
    VoteSubscription,
)
from .protocol import ClientMessage, SubscriptionTopic, build_payload

__all__ = [
    "ClientMessage",
    "SubscriptionError",
    "SubscriptionGateway",
    "SubscriptionState",
    "SubscriptionTopic",
    "VoteSubscription",
    "build_payload",
]
