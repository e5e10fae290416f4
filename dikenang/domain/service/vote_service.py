"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from dikenang.domain.error import OppositeVoteError
from dikenang.domain.event import EventBus, VoteEvent
from dikenang.domain.model.vote import Vote, VoteTally
from dikenang.domain.repository import UnitOfWork, VoteRepository
from dikenang.domain.value import PostId, UserId, VoteId, VoteKind

from .base import Service, persistence_guard
from .post_service import PostService
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations.

    Every state-changing add or remove is committed before the new tally
    is published on the (kind, post) topic. Repeating an add or a remove
    leaves membership untouched and publishes nothing.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_bus: EventBus,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            user_service: User domain service
            unit_of_work: Transaction boundary of the current request
            event_bus: Bus the committed tallies are published on
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.event_bus = event_bus

    async def add_vote(
        self, post_id: PostId, user_id: UserId, kind: VoteKind
    ) -> VoteTally:
        """Add a user to the voters of one kind on a post.

        Args:
            post_id: Post ID
            user_id: User ID
            kind: Upvote or downvote

        Returns:
            Tally of the given kind after the call

        Raises:
            NotFoundError: If the post or the user does not exist
            OppositeVoteError: If the user holds the opposite vote on the post
            ServiceUnavailableError: If the store cannot serve the request
        """
        with logfire.span(
            "vote_service.add_vote",
            post_id=str(post_id),
            user_id=str(user_id),
            kind=kind.value,
        ):
            with persistence_guard(f"add_{kind.value}"):
                await self.post_service.ensure_exists(post_id)
                await self.user_service.ensure_exists(user_id)

                existing = await self.vote_repository.find_by_post_and_user(
                    post_id, user_id
                )
                if existing and existing.kind == kind:
                    logfire.info(
                        "Vote already present",
                        post_id=str(post_id),
                        user_id=str(user_id),
                        kind=kind.value,
                    )
                    return await self.get_tally(post_id, kind)

                if existing and existing.kind is kind.opposite:
                    logfire.warn(
                        "Vote conflicts with opposite vote",
                        post_id=str(post_id),
                        user_id=str(user_id),
                        kind=kind.value,
                    )
                    raise OppositeVoteError(
                        str(post_id), str(user_id), existing.kind.value
                    )

                vote = Vote(
                    id=VoteId(uuid4()),
                    post_id=post_id,
                    user_id=user_id,
                    kind=kind,
                    created_at=datetime.now(),
                )

                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    # A concurrent request stored a vote for this user first
                    stored = await self.vote_repository.find_by_post_and_user(
                        post_id, user_id
                    )
                    if stored and stored.kind is not kind:
                        raise OppositeVoteError(
                            str(post_id), str(user_id), stored.kind.value
                        )
                    logfire.warn(
                        "Duplicate vote attempt",
                        post_id=str(post_id),
                        user_id=str(user_id),
                        kind=kind.value,
                    )
                    return await self.get_tally(post_id, kind)

                await self.unit_of_work.commit()
                tally = await self.get_tally(post_id, kind)

            logfire.info(
                "Vote added",
                post_id=str(post_id),
                user_id=str(user_id),
                kind=kind.value,
                count=tally.count,
            )
            await self._publish(tally)
            return tally

    async def remove_vote(
        self, post_id: PostId, user_id: UserId, kind: VoteKind
    ) -> VoteTally:
        """Remove a user from the voters of one kind on a post.

        Args:
            post_id: Post ID
            user_id: User ID
            kind: Upvote or downvote

        Returns:
            Tally of the given kind after the call

        Raises:
            NotFoundError: If the post or the user does not exist
            ServiceUnavailableError: If the store cannot serve the request
        """
        with logfire.span(
            "vote_service.remove_vote",
            post_id=str(post_id),
            user_id=str(user_id),
            kind=kind.value,
        ):
            with persistence_guard(f"remove_{kind.value}"):
                await self.post_service.ensure_exists(post_id)
                await self.user_service.ensure_exists(user_id)

                deleted = await self.vote_repository.delete_by_post_and_user(
                    post_id, user_id, kind
                )
                if not deleted:
                    logfire.info(
                        "No vote to remove",
                        post_id=str(post_id),
                        user_id=str(user_id),
                        kind=kind.value,
                    )
                    return await self.get_tally(post_id, kind)

                await self.unit_of_work.commit()
                tally = await self.get_tally(post_id, kind)

            logfire.info(
                "Vote removed",
                post_id=str(post_id),
                user_id=str(user_id),
                kind=kind.value,
                count=tally.count,
            )
            await self._publish(tally)
            return tally

    async def add_upvote(self, post_id: PostId, user_id: UserId) -> VoteTally:
        """Upvote a post."""
        return await self.add_vote(post_id, user_id, VoteKind.UPVOTE)

    async def remove_upvote(self, post_id: PostId, user_id: UserId) -> VoteTally:
        """Withdraw an upvote."""
        return await self.remove_vote(post_id, user_id, VoteKind.UPVOTE)

    async def add_downvote(self, post_id: PostId, user_id: UserId) -> VoteTally:
        """Downvote a post."""
        return await self.add_vote(post_id, user_id, VoteKind.DOWNVOTE)

    async def remove_downvote(self, post_id: PostId, user_id: UserId) -> VoteTally:
        """Withdraw a downvote."""
        return await self.remove_vote(post_id, user_id, VoteKind.DOWNVOTE)

    async def get_tally(self, post_id: PostId, kind: VoteKind) -> VoteTally:
        """Project the current tally of one kind from vote membership.

        Args:
            post_id: Post ID
            kind: Upvote or downvote

        Returns:
            Voters ordered by vote time, with their count
        """
        votes = await self.vote_repository.find_by_post(post_id, kind)
        return VoteTally(
            post_id=post_id, kind=kind, voters=[vote.user_id for vote in votes]
        )

    async def get_tallies(self, post_id: PostId) -> tuple[VoteTally, VoteTally]:
        """Get upvote and downvote tallies of a post.

        Args:
            post_id: Post ID

        Returns:
            (upvotes, downvotes)

        Raises:
            NotFoundError: If the post does not exist
            ServiceUnavailableError: If the store cannot serve the request
        """
        with logfire.span("vote_service.get_tallies", post_id=str(post_id)):
            with persistence_guard("get_votes"):
                await self.post_service.ensure_exists(post_id)
                upvotes = await self.get_tally(post_id, VoteKind.UPVOTE)
                downvotes = await self.get_tally(post_id, VoteKind.DOWNVOTE)
            return upvotes, downvotes

    async def get_user_votes(self, user_id: UserId, kind: VoteKind) -> list[PostId]:
        """List the posts a user has voted on with the given kind.

        Args:
            user_id: User ID
            kind: Upvote or downvote

        Returns:
            Post IDs, oldest vote first

        Raises:
            NotFoundError: If the user does not exist
            ServiceUnavailableError: If the store cannot serve the request
        """
        with logfire.span(
            "vote_service.get_user_votes", user_id=str(user_id), kind=kind.value
        ):
            with persistence_guard(f"get_user_{kind.value}s"):
                await self.user_service.ensure_exists(user_id)
                votes = await self.vote_repository.find_by_user(user_id, kind)
            return [vote.post_id for vote in votes]

    async def _publish(self, tally: VoteTally) -> None:
        """Publish a committed tally.

        The change is already durable here, so a publish failure is logged
        and never reported to the caller.
        """
        event = VoteEvent(tally=tally)
        try:
            listeners = await self.event_bus.publish(event)
        except Exception as e:
            logfire.error(
                "Vote event publish failed", topic=str(event.topic), error=str(e)
            )
            return
        logfire.debug(
            "Vote event delivered", topic=str(event.topic), listeners=listeners
        )
