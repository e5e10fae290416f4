"""PostgreSQL repository implementations."""

from dikenang.persistence.repository.post import PostgresPostRepository
from dikenang.persistence.repository.reach import PostgresReachRepository
from dikenang.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from dikenang.persistence.repository.user import PostgresUserRepository
from dikenang.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresReachRepository",
    "SqlAlchemyUnitOfWork",
]
