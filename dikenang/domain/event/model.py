"""Vote events."""

from dikenang.domain.model.common import DomainModel
from dikenang.domain.model.vote import VoteTally
from dikenang.domain.value import PostId, VoteKind


class VoteTopic(DomainModel):
    """Routing key for vote events.

    Upvotes and downvotes of a post are published on separate topics.
    """

    kind: VoteKind
    post_id: PostId

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.post_id}"


class VoteEvent(DomainModel):
    """Published after a vote change on a post has been committed."""

    tally: VoteTally

    @property
    def topic(self) -> VoteTopic:
        """Topic this event is routed on."""
        return VoteTopic(kind=self.tally.kind, post_id=self.tally.post_id)
