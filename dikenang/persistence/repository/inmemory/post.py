"""In-memory post repository for testing."""

from typing import Optional

from dikenang.domain.model.post import Post
from dikenang.domain.repository.post import PostRepository
from dikenang.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def exists(self, post_id: PostId) -> bool:
        return post_id in self._posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._posts[post.id] = post
        return post
