"""Domain layer DI providers."""

from dishka import Scope, provide

from dikenang.config import AuthSettings
from dikenang.domain.event import EventBus
from dikenang.domain.repository import (
    PostRepository,
    ReachRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from dikenang.domain.service import (
    JWTService,
    PostService,
    ReachService,
    UserService,
    VoteService,
)
from dikenang.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_bus: EventBus,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_bus=event_bus,
        )

    @provide
    def get_reach_service(
        self, reach_repository: ReachRepository, post_service: PostService
    ) -> ReachService:
        """Provide reach domain service."""
        return ReachService(
            reach_repository=reach_repository, post_service=post_service
        )
