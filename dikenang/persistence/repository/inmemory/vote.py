"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from dikenang.domain.model.vote import Vote
from dikenang.domain.repository.vote import VoteRepository
from dikenang.domain.value import PostId, UserId, VoteKind


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        for vote in self._votes:
            if vote.post_id == post_id and vote.user_id == user_id:
                return vote
        return None

    async def find_by_post(self, post_id: PostId, kind: VoteKind) -> list[Vote]:
        """Find all votes of one kind on a post, oldest first."""
        # Insertion order breaks ties between equal timestamps
        return sorted(
            (v for v in self._votes if v.post_id == post_id and v.kind == kind),
            key=lambda v: v.created_at,
        )

    async def find_by_user(self, user_id: UserId, kind: VoteKind) -> list[Vote]:
        """Find all votes of one kind by a user."""
        return sorted(
            (v for v in self._votes if v.user_id == user_id and v.kind == kind),
            key=lambda v: v.created_at,
        )

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already holds a vote on the post
        """
        existing = await self.find_by_post_and_user(vote.post_id, vote.user_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_by_post_and_user(
        self, post_id: PostId, user_id: UserId, kind: VoteKind
    ) -> bool:
        """Delete a user's vote of one kind on a post."""
        for i, vote in enumerate(self._votes):
            if vote.post_id == post_id and vote.user_id == user_id and vote.kind == kind:
                self._votes.pop(i)
                return True
        return False

    async def count_by_post(self, post_id: PostId, kind: VoteKind) -> int:
        """Count votes of one kind on a post."""
        return sum(1 for v in self._votes if v.post_id == post_id and v.kind == kind)
