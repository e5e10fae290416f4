"""Wire messages of the vote subscription protocol.

Client messages:
    {"type": "subscribe", "id": "...", "topic": "upvoteSubscription", "postId": "..."}
    {"type": "unsubscribe", "id": "..."}

Server messages:
    {"type": "subscribed", "id": "..."}
    {"type": "next", "id": "...", "payload": {...}}
    {"type": "complete", "id": "..."}
    {"type": "error", "id": "...", "message": "..."}
"""

from enum import Enum
from typing import Any, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dikenang.domain.model.vote import VoteTally
from dikenang.domain.value import VoteKind


class SubscriptionTopic(str, Enum):
    """Subscription topics exposed to clients."""

    UPVOTE = "upvoteSubscription"
    DOWNVOTE = "downvoteSubscription"

    @property
    def kind(self) -> VoteKind:
        if self is SubscriptionTopic.UPVOTE:
            return VoteKind.UPVOTE
        return VoteKind.DOWNVOTE


class ClientMessage(BaseModel):
    """Message received from a subscription client."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["subscribe", "unsubscribe"]
    id: str = Field(min_length=1, max_length=100)
    topic: Optional[SubscriptionTopic] = None
    post_id: Optional[UUID] = Field(default=None, alias="postId")


class Voter(BaseModel):
    """Voter reference inside a payload."""

    id: str


class UpvotePayload(BaseModel):
    """Upvote counter pushed to subscribers."""

    post_id: str = Field(serialization_alias="postId")
    upvotes: int
    upvoters: list[Voter]


class DownvotePayload(BaseModel):
    """Downvote counter pushed to subscribers."""

    post_id: str = Field(serialization_alias="postId")
    downvotes: int
    downvoters: list[Voter]


def build_payload(tally: VoteTally) -> dict[str, Any]:
    """Render a tally as the payload of a ``next`` message."""
    voters = [Voter(id=str(voter)) for voter in tally.voters]

    payload: BaseModel
    if tally.kind is VoteKind.UPVOTE:
        payload = UpvotePayload(
            post_id=str(tally.post_id), upvotes=tally.count, upvoters=voters
        )
    else:
        payload = DownvotePayload(
            post_id=str(tally.post_id), downvotes=tally.count, downvoters=voters
        )
    return payload.model_dump(by_alias=True)


def subscribed_message(subscription_id: str) -> dict[str, Any]:
    return {"type": "subscribed", "id": subscription_id}


def next_message(subscription_id: str, tally: VoteTally) -> dict[str, Any]:
    return {"type": "next", "id": subscription_id, "payload": build_payload(tally)}


def complete_message(subscription_id: str) -> dict[str, Any]:
    return {"type": "complete", "id": subscription_id}


def error_message(subscription_id: Optional[str], message: str) -> dict[str, Any]:
    return {"type": "error", "id": subscription_id, "message": message}
