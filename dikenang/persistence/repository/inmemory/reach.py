"""In-memory reach repository for testing."""

from sqlalchemy.exc import IntegrityError

from dikenang.domain.model.reach import Reach
from dikenang.domain.repository.reach import ReachRepository
from dikenang.domain.value import PostId, UserId


class InMemoryReachRepository(ReachRepository):
    """In-memory implementation of ReachRepository for testing."""

    def __init__(self) -> None:
        self._reaches: dict[tuple[PostId, UserId], Reach] = {}

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        return (post_id, user_id) in self._reaches

    async def save(self, reach: Reach) -> Reach:
        """Save a reach record.

        Raises:
            IntegrityError: If the user was already counted for the post
        """
        key = (reach.post_id, reach.user_id)
        if key in self._reaches:
            raise IntegrityError("Duplicate reach", None, Exception())
        self._reaches[key] = reach
        return reach

    async def count_by_post(self, post_id: PostId) -> int:
        return sum(1 for p, _ in self._reaches if p == post_id)
