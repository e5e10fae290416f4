"""Get user votes use case."""

from uuid import UUID

from pydantic import BaseModel

from dikenang.domain.service import VoteService
from dikenang.domain.value import UserId, VoteKind


class GetUserVotesRequest(BaseModel):
    """Get user votes request."""

    user_id: str  # UUID string


class GetUserVotesResponse(BaseModel):
    """Posts a user has upvoted and downvoted, oldest vote first."""

    user_id: str
    upvoted: list[str]
    downvoted: list[str]


class GetUserVotesUseCase:
    """Use case for listing the posts a user has voted on."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetUserVotesRequest) -> GetUserVotesResponse:
        """Execute get user votes flow.

        Raises:
            ValueError: If the user ID is not a valid UUID
            NotFoundError: If the user does not exist
        """
        user_id = UserId(UUID(request.user_id))

        upvoted = await self.vote_service.get_user_votes(user_id, VoteKind.UPVOTE)
        downvoted = await self.vote_service.get_user_votes(user_id, VoteKind.DOWNVOTE)

        return GetUserVotesResponse(
            user_id=str(user_id),
            upvoted=[str(post_id) for post_id in upvoted],
            downvoted=[str(post_id) for post_id in downvoted],
        )
