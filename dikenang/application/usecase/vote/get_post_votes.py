"""Get post votes use case."""

from uuid import UUID

from pydantic import BaseModel

from dikenang.domain.service import VoteService
from dikenang.domain.value import PostId


class GetPostVotesRequest(BaseModel):
    """Get post votes request."""

    post_id: str  # UUID string


class GetPostVotesResponse(BaseModel):
    """Both tallies of a post."""

    post_id: str
    upvotes: int
    upvoters: list[str]
    downvotes: int
    downvoters: list[str]


class GetPostVotesUseCase:
    """Use case for reading the current upvotes and downvotes of a post."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetPostVotesRequest) -> GetPostVotesResponse:
        post_id = PostId(UUID(request.post_id))
        upvotes, downvotes = await self.vote_service.get_tallies(post_id)

        return GetPostVotesResponse(
            post_id=str(post_id),
            upvotes=upvotes.count,
            upvoters=[str(voter) for voter in upvotes.voters],
            downvotes=downvotes.count,
            downvoters=[str(voter) for voter in downvotes.voters],
        )
