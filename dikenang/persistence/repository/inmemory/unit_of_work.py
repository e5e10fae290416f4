"""In-memory unit of work for testing."""

from dikenang.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Records commits and rollbacks; in-memory writes are immediate."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
