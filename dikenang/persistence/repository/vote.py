"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from dikenang.domain.model import Vote
from dikenang.domain.repository import VoteRepository
from dikenang.domain.value import PostId, UserId, VoteKind
from dikenang.persistence.mappers import row_to_vote, vote_to_dict
from dikenang.persistence.tables import post_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(post_votes_table).where(
            and_(
                post_votes_table.c.post_id == post_id,
                post_votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId, kind: VoteKind) -> List[Vote]:
        """Find all votes of one kind on a post, oldest first."""
        stmt = (
            select(post_votes_table)
            .where(
                and_(
                    post_votes_table.c.post_id == post_id,
                    post_votes_table.c.kind == kind.value,
                )
            )
            .order_by(post_votes_table.c.created_at, post_votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId, kind: VoteKind) -> List[Vote]:
        """Find all votes of one kind by a user."""
        stmt = (
            select(post_votes_table)
            .where(
                and_(
                    post_votes_table.c.user_id == user_id,
                    post_votes_table.c.kind == kind.value,
                )
            )
            .order_by(post_votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The insert runs in a savepoint so a unique violation leaves the
        surrounding transaction usable.
        """
        vote_dict = vote_to_dict(vote)
        stmt = insert(post_votes_table).values(**vote_dict)
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        logfire.debug(
            "Vote row inserted", post_id=str(vote.post_id), kind=vote.kind.value
        )
        return vote

    async def delete_by_post_and_user(
        self, post_id: PostId, user_id: UserId, kind: VoteKind
    ) -> bool:
        """Delete a user's vote of one kind on a post."""
        stmt = delete(post_votes_table).where(
            and_(
                post_votes_table.c.post_id == post_id,
                post_votes_table.c.user_id == user_id,
                post_votes_table.c.kind == kind.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_post(self, post_id: PostId, kind: VoteKind) -> int:
        """Count votes of one kind on a post."""
        stmt = (
            select(func.count())
            .select_from(post_votes_table)
            .where(
                and_(
                    post_votes_table.c.post_id == post_id,
                    post_votes_table.c.kind == kind.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
