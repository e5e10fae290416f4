"""Add reach use case."""

from uuid import UUID

from pydantic import BaseModel

from dikenang.domain.service import ReachService
from dikenang.domain.value import PostId, UserId


class AddReachRequest(BaseModel):
    """Add reach request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ReachResponse(BaseModel):
    """Reach count of a post."""

    post_id: str
    count: int


class AddReachUseCase:
    """Use case for recording that a user has seen a post."""

    def __init__(self, reach_service: ReachService) -> None:
        """Initialize add reach use case.

        Args:
            reach_service: Reach domain service
        """
        self.reach_service = reach_service

    async def execute(self, request: AddReachRequest) -> ReachResponse:
        """Execute add reach flow.

        Args:
            request: Add reach request

        Returns:
            Reach count after the call

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        count = await self.reach_service.add_reach(post_id, user_id)

        return ReachResponse(post_id=str(post_id), count=count)
