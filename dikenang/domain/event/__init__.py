"""Domain events and the event bus contract."""

from dikenang.domain.event.bus import EventBus, EventSubscription
from dikenang.domain.event.model import VoteEvent, VoteTopic

__all__ = [
    "EventBus",
    "EventSubscription",
    "VoteEvent",
    "VoteTopic",
]
