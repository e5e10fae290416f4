"""PostgreSQL implementation of Reach repository."""

from sqlalchemy import and_, exists, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from dikenang.domain.model import Reach
from dikenang.domain.repository import ReachRepository
from dikenang.domain.value import PostId, UserId
from dikenang.persistence.mappers import reach_to_dict
from dikenang.persistence.tables import post_reaches_table


class PostgresReachRepository(ReachRepository):
    """PostgreSQL implementation of ReachRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        stmt = select(
            exists().where(
                and_(
                    post_reaches_table.c.post_id == post_id,
                    post_reaches_table.c.user_id == user_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, reach: Reach) -> Reach:
        stmt = insert(post_reaches_table).values(**reach_to_dict(reach))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return reach

    async def count_by_post(self, post_id: PostId) -> int:
        stmt = (
            select(func.count())
            .select_from(post_reaches_table)
            .where(post_reaches_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
