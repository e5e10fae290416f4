"""SQLAlchemy unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from dikenang.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request-scoped session shared by the repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.debug("Transaction committed")

    async def rollback(self) -> None:
        await self.session.rollback()
        logfire.debug("Transaction rolled back")
