"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request.

    Services commit explicitly when a side effect (such as publishing an
    event) must only happen once the change is durable.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending changes."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard pending changes."""
        pass
