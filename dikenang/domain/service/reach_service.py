"""Reach domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from dikenang.domain.model.reach import Reach
from dikenang.domain.repository import ReachRepository
from dikenang.domain.value import PostId, ReachId, UserId

from .base import Service, persistence_guard
from .post_service import PostService


class ReachService(Service):
    """Domain service for counting the distinct viewers of a post."""

    def __init__(
        self, reach_repository: ReachRepository, post_service: PostService
    ) -> None:
        """Initialize reach service.

        Args:
            reach_repository: Reach repository
            post_service: Post domain service
        """
        self.reach_repository = reach_repository
        self.post_service = post_service

    async def add_reach(self, post_id: PostId, user_id: UserId) -> int:
        """Record that a user has seen a post.

        Repeated views by the same user are counted once.

        Args:
            post_id: Post ID
            user_id: Viewing user ID

        Returns:
            Reach count after the call

        Raises:
            NotFoundError: If the post does not exist
            ServiceUnavailableError: If the store cannot serve the request
        """
        with logfire.span(
            "reach_service.add_reach", post_id=str(post_id), user_id=str(user_id)
        ):
            with persistence_guard("add_reach"):
                await self.post_service.ensure_exists(post_id)

                if not await self.reach_repository.exists(post_id, user_id):
                    reach = Reach(
                        id=ReachId(uuid4()),
                        post_id=post_id,
                        user_id=user_id,
                        created_at=datetime.now(),
                    )
                    try:
                        await self.reach_repository.save(reach)
                        logfire.info(
                            "Reach recorded", post_id=str(post_id), user_id=str(user_id)
                        )
                    except IntegrityError:
                        logfire.debug(
                            "Reach already recorded",
                            post_id=str(post_id),
                            user_id=str(user_id),
                        )

                return await self.reach_repository.count_by_post(post_id)

    async def get_reach_count(self, post_id: PostId) -> int:
        """Count the distinct users who have seen a post.

        Raises:
            NotFoundError: If the post does not exist
            ServiceUnavailableError: If the store cannot serve the request
        """
        with logfire.span("reach_service.get_reach_count", post_id=str(post_id)):
            with persistence_guard("get_reach"):
                await self.post_service.ensure_exists(post_id)
                return await self.reach_repository.count_by_post(post_id)
