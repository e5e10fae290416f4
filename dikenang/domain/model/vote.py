"""Vote membership and vote tallies.

A Vote is the persisted fact that a user cast a given kind of vote on a
post. Counts are never stored; a VoteTally is projected from the current
membership set.
"""

from datetime import datetime

from pydantic import Field, computed_field

from dikenang.domain.model.common import DomainModel
from dikenang.domain.value import PostId, UserId, VoteId, VoteKind


class Vote(DomainModel):
    """Vote membership entity.

    Business rules:
    - One vote per user per post (enforced by database unique constraint),
      so a user is never both an upvoter and a downvoter of the same post
    - Created on add, deleted on remove; never updated in place
    """

    id: VoteId
    post_id: PostId
    user_id: UserId
    kind: VoteKind
    created_at: datetime = Field(default_factory=datetime.now)


class VoteTally(DomainModel):
    """Current count and voters of one kind on one post."""

    post_id: PostId
    kind: VoteKind
    voters: list[UserId] = Field(default_factory=list)  # Ordered by vote time

    @computed_field
    @property
    def count(self) -> int:
        """Number of voters; always equal to the membership set size."""
        return len(self.voters)
