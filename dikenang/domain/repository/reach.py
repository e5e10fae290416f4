"""Reach repository interface."""

from abc import ABC, abstractmethod

from dikenang.domain.model.reach import Reach
from dikenang.domain.value import PostId, UserId


class ReachRepository(ABC):
    """Repository for post reach records."""

    @abstractmethod
    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has already been counted for a post."""
        pass

    @abstractmethod
    async def save(self, reach: Reach) -> Reach:
        """Save a reach record.

        Raises:
            IntegrityError: If the user was already counted for this post
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count distinct users who have seen a post."""
        pass
