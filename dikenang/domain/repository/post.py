"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dikenang.domain.model.post import Post
from dikenang.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if the post exists
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
