"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from dikenang.domain.model import User
from dikenang.domain.repository import UserRepository
from dikenang.domain.value import UserId
from dikenang.persistence.mappers import row_to_user, user_to_dict
from dikenang.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        stmt = select(exists().where(users_table.c.id == user_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        if await self.exists(user.id):
            # Update
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            # Insert
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user
