"""Add vote use case."""

from uuid import UUID

from pydantic import BaseModel

from dikenang.domain.model.vote import VoteTally
from dikenang.domain.service import VoteService
from dikenang.domain.value import PostId, UserId, VoteKind


class AddVoteRequest(BaseModel):
    """Add vote request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    kind: VoteKind


class VoteCountResponse(BaseModel):
    """Tally of one vote kind on a post after a mutation."""

    post_id: str
    kind: VoteKind
    count: int
    voters: list[str]

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VoteCountResponse":
        return cls(
            post_id=str(tally.post_id),
            kind=tally.kind,
            count=tally.count,
            voters=[str(voter) for voter in tally.voters],
        )


class AddVoteUseCase:
    """Use case for upvoting or downvoting a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize add vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: AddVoteRequest) -> VoteCountResponse:
        """Execute add vote flow.

        Args:
            request: Add vote request

        Returns:
            Count of the requested kind after the call

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the post or user does not exist
            OppositeVoteError: If the user holds the opposite vote
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        tally = await self.vote_service.add_vote(post_id, user_id, request.kind)

        return VoteCountResponse.from_tally(tally)
