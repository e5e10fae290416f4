"""Integration tests for PostgresVoteRepository.

Require a migrated PostgreSQL database at DATABASE__URL.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from dikenang.domain.model import Vote
from dikenang.domain.repository import PostRepository, UserRepository, VoteRepository
from dikenang.domain.service import VoteService
from dikenang.domain.value import VoteId, VoteKind
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def seed(env):
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    user = make_user(f"it_{uuid4().hex[:12]}")
    post = make_post(author_id=user.id)
    await user_repo.save(user)
    await post_repo.save(post)
    return post, user


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_round_trips_kind(self, integration_env):
        """The vote_kind enum is written and read back as VoteKind."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        post, user = await seed(integration_env)
        vote = Vote(
            id=VoteId(uuid4()), post_id=post.id, user_id=user.id, kind=VoteKind.DOWNVOTE
        )

        # Act
        await vote_repo.save(vote)
        found = await vote_repo.find_by_post_and_user(post.id, user.id)

        # Assert
        assert found is not None
        assert found.kind is VoteKind.DOWNVOTE
        assert await vote_repo.count_by_post(post.id, VoteKind.DOWNVOTE) == 1

    @pytest.mark.asyncio
    async def test_second_vote_by_same_user_violates_unique_constraint(
        self, integration_env
    ):
        """A user holds at most one vote per post; the session stays usable."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        post, user = await seed(integration_env)
        await vote_repo.save(
            Vote(id=VoteId(uuid4()), post_id=post.id, user_id=user.id, kind=VoteKind.UPVOTE)
        )

        # Act & Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    post_id=post.id,
                    user_id=user.id,
                    kind=VoteKind.DOWNVOTE,
                )
            )
        assert await vote_repo.count_by_post(post.id, VoteKind.UPVOTE) == 1

    @pytest.mark.asyncio
    async def test_service_round_trip_against_postgres(self, integration_env):
        """Add then remove through the service commits and leaves no voters."""
        # Arrange
        vote_service = await integration_env.get(VoteService)
        post, user = await seed(integration_env)

        # Act
        added = await vote_service.add_upvote(post.id, user.id)
        removed = await vote_service.remove_upvote(post.id, user.id)

        # Assert
        assert added.voters == [user.id]
        assert removed.count == 0
