"""Post domain service."""

import logfire

from dikenang.domain.error import NotFoundError
from dikenang.domain.repository import PostRepository
from dikenang.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def ensure_exists(self, post_id: PostId) -> None:
        """Raise NotFoundError unless the post exists."""
        if not await self.post_repository.exists(post_id):
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
