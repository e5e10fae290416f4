"""Get reach use case."""

from uuid import UUID

from pydantic import BaseModel

from dikenang.domain.service import ReachService
from dikenang.domain.value import PostId

from .add_reach import ReachResponse


class GetReachRequest(BaseModel):
    """Get reach request."""

    post_id: str  # UUID string


class GetReachUseCase:
    """Use case for reading the reach count of a post."""

    def __init__(self, reach_service: ReachService) -> None:
        self.reach_service = reach_service

    async def execute(self, request: GetReachRequest) -> ReachResponse:
        post_id = PostId(UUID(request.post_id))
        count = await self.reach_service.get_reach_count(post_id)
        return ReachResponse(post_id=str(post_id), count=count)
