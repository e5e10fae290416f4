"""Application layer DI providers."""

from dishka import Scope, provide

from dikenang.application.usecase.reach import AddReachUseCase, GetReachUseCase
from dikenang.application.usecase.vote import (
    AddVoteUseCase,
    GetPostVotesUseCase,
    GetUserVotesUseCase,
    RemoveVoteUseCase,
)
from dikenang.domain.service import ReachService, VoteService
from dikenang.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_add_vote_use_case(self, vote_service: VoteService) -> AddVoteUseCase:
        """Provide add vote use case."""
        return AddVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_votes_use_case(
        self, vote_service: VoteService
    ) -> GetPostVotesUseCase:
        """Provide get post votes use case."""
        return GetPostVotesUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_votes_use_case(
        self, vote_service: VoteService
    ) -> GetUserVotesUseCase:
        """Provide get user votes use case."""
        return GetUserVotesUseCase(vote_service=vote_service)

    # Reach use cases
    @provide(scope=Scope.REQUEST)
    def get_add_reach_use_case(self, reach_service: ReachService) -> AddReachUseCase:
        """Provide add reach use case."""
        return AddReachUseCase(reach_service=reach_service)

    @provide(scope=Scope.REQUEST)
    def get_get_reach_use_case(self, reach_service: ReachService) -> GetReachUseCase:
        """Provide get reach use case."""
        return GetReachUseCase(reach_service=reach_service)
