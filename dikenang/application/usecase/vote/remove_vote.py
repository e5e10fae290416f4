"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from dikenang.domain.service import VoteService
from dikenang.domain.value import PostId, UserId, VoteKind

from .add_vote import VoteCountResponse


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    kind: VoteKind


class RemoveVoteUseCase:
    """Use case for withdrawing an upvote or a downvote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> VoteCountResponse:
        """Execute remove vote flow.

        Removing a vote the user does not hold is not an error; the current
        count is returned unchanged.

        Args:
            request: Remove vote request

        Returns:
            Count of the requested kind after the call

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the post or user does not exist
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        tally = await self.vote_service.remove_vote(post_id, user_id, request.kind)

        return VoteCountResponse.from_tally(tally)
