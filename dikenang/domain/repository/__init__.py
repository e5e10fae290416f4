"""Repository interfaces for dikenang domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from dikenang.domain.repository.post import PostRepository
from dikenang.domain.repository.reach import ReachRepository
from dikenang.domain.repository.unit_of_work import UnitOfWork
from dikenang.domain.repository.user import UserRepository
from dikenang.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "VoteRepository",
    "ReachRepository",
    "UnitOfWork",
]
