"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from dikenang.domain.error import NotFoundError
from dikenang.domain.service import UserService
from dikenang.domain.value import UserId
from dikenang.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_ensure_exists_passes_for_stored_user(self):
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        user = make_user()
        await user_repo.save(user)

        # Act / Assert
        await service.ensure_exists(user.id)

    @pytest.mark.asyncio
    async def test_ensure_exists_raises_for_unknown_user(self):
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError) as exc_info:
            await service.ensure_exists(UserId(uuid4()))

        assert exc_info.value.resource == "User"
