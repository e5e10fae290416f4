"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .reach import InMemoryReachRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryReachRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
