"""Domain model entities for dikenang."""

from dikenang.domain.model.post import Post
from dikenang.domain.model.reach import Reach
from dikenang.domain.model.user import User
from dikenang.domain.model.vote import Vote, VoteTally

__all__ = [
    "User",
    "Post",
    "Vote",
    "VoteTally",
    "Reach",
]
