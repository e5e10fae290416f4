"""Domain services."""

from .base import Service, persistence_guard
from .jwt_service import JWTService
from .post_service import PostService
from .reach_service import ReachService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "PostService",
    "ReachService",
    "Service",
    "UserService",
    "VoteService",
    "persistence_guard",
]
