"""User domain service."""

import logfire

from dikenang.domain.error import NotFoundError
from dikenang.domain.repository import UserRepository
from dikenang.domain.value import UserId


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def ensure_exists(self, user_id: UserId) -> None:
        """Raise NotFoundError unless the user exists."""
        if not await self.user_repository.exists(user_id):
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
