"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from dikenang.domain.model.vote import Vote
from dikenang.domain.value import PostId, UserId, VoteKind


class VoteRepository(ABC):
    """Repository for vote membership.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post, whatever its kind.

        Args:
            post_id: ID of the post
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId, kind: VoteKind) -> List[Vote]:
        """Find all votes of one kind on a post.

        Args:
            post_id: ID of the post
            kind: Upvote or downvote

        Returns:
            Votes ordered by creation time (oldest first)
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, kind: VoteKind) -> List[Vote]:
        """Find all votes of one kind cast by a user."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises an error if the user already holds a vote on this post
        (unique constraint violation).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user and post
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(
        self, post_id: PostId, user_id: UserId, kind: VoteKind
    ) -> bool:
        """Delete a user's vote of the given kind on a post.

        Args:
            post_id: ID of the post
            user_id: The user's ID
            kind: Kind of vote to delete

        Returns:
            True if a vote was deleted, False if no such vote existed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId, kind: VoteKind) -> int:
        """Count votes of one kind on a post."""
        pass
