"""Unit tests for the reach use cases."""

import pytest

from dikenang.application.usecase.reach import (
    AddReachRequest,
    AddReachUseCase,
    GetReachRequest,
    GetReachUseCase,
)
from dikenang.domain.repository import PostRepository, UserRepository
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReachUseCases:
    """Tests for AddReachUseCase and GetReachUseCase."""

    @pytest.mark.asyncio
    async def test_add_reach_then_get_reach(self, unit_env):
        """A recorded view is visible through GetReachUseCase."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        add_reach = await unit_env.get(AddReachUseCase)
        get_reach = await unit_env.get(GetReachUseCase)
        user = make_user()
        post = make_post(author_id=user.id)
        await user_repo.save(user)
        await post_repo.save(post)

        # Act
        added = await add_reach.execute(
            AddReachRequest(post_id=str(post.id), user_id=str(user.id))
        )
        again = await add_reach.execute(
            AddReachRequest(post_id=str(post.id), user_id=str(user.id))
        )
        current = await get_reach.execute(GetReachRequest(post_id=str(post.id)))

        # Assert
        assert added.count == 1
        assert again.count == 1
        assert current.post_id == str(post.id)
        assert current.count == 1

    @pytest.mark.asyncio
    async def test_invalid_post_id_raises_value_error(self, unit_env):
        get_reach = await unit_env.get(GetReachUseCase)

        with pytest.raises(ValueError):
            await get_reach.execute(GetReachRequest(post_id="nope"))
