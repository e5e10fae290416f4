"""Unit tests for GetPostVotesUseCase."""

from uuid import uuid4

import pytest

from dikenang.application.usecase.vote.get_post_votes import (
    GetPostVotesRequest,
    GetPostVotesUseCase,
)
from dikenang.domain.error import NotFoundError
from dikenang.domain.repository import PostRepository, UserRepository
from dikenang.domain.service import VoteService
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostVotesUseCase:
    """Tests for GetPostVotesUseCase."""

    @pytest.mark.asyncio
    async def test_returns_both_tallies(self, unit_env):
        """Upvoters and downvoters are reported side by side."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostVotesUseCase)

        fan = make_user("fan_1")
        critic = make_user("critic_1")
        post = make_post(author_id=fan.id)
        await user_repo.save(fan)
        await user_repo.save(critic)
        await post_repo.save(post)
        await vote_service.add_upvote(post.id, fan.id)
        await vote_service.add_downvote(post.id, critic.id)

        # Act
        response = await use_case.execute(GetPostVotesRequest(post_id=str(post.id)))

        # Assert
        assert response.post_id == str(post.id)
        assert response.upvotes == 1
        assert response.upvoters == [str(fan.id)]
        assert response.downvotes == 1
        assert response.downvoters == [str(critic.id)]

    @pytest.mark.asyncio
    async def test_fresh_post_has_no_votes(self, unit_env):
        """A new post starts with zero upvotes and zero downvotes."""
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostVotesUseCase)
        post = make_post(author_id=make_user().id)
        await post_repo.save(post)

        response = await use_case.execute(GetPostVotesRequest(post_id=str(post.id)))

        assert (response.upvotes, response.downvotes) == (0, 0)

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetPostVotesUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostVotesRequest(post_id=str(uuid4())))
