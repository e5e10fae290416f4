"""Vote use cases."""

from .add_vote import AddVoteRequest, AddVoteUseCase, VoteCountResponse
from .get_post_votes import (
    GetPostVotesRequest,
    GetPostVotesResponse,
    GetPostVotesUseCase,
)
from .get_user_votes import (
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
)
from .remove_vote import RemoveVoteRequest, RemoveVoteUseCase

__all__ = [
    "AddVoteRequest",
    "AddVoteUseCase",
    "VoteCountResponse",
    "GetPostVotesRequest",
    "GetPostVotesResponse",
    "GetPostVotesUseCase",
    "GetUserVotesRequest",
    "GetUserVotesResponse",
    "GetUserVotesUseCase",
    "RemoveVoteRequest",
    "RemoveVoteUseCase",
]
