"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import exists, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dikenang.domain.model import Post
from dikenang.domain.repository import PostRepository
from dikenang.domain.value import PostId
from dikenang.persistence.mappers import post_to_dict, row_to_post
from dikenang.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        stmt = select(exists().where(posts_table.c.id == post_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)

        if await self.exists(post.id):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = insert(posts_table).values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post
