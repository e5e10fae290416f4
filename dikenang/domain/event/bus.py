"""Event bus interface."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from dikenang.domain.event.model import VoteEvent, VoteTopic


class EventSubscription(ABC):
    """A listener attached to one topic.

    Iterating yields events published after the subscription was created.
    Iteration ends once the subscription is closed.
    """

    topic: VoteTopic

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[VoteEvent]:
        pass

    @abstractmethod
    def close(self) -> None:
        """Detach from the bus and stop delivery immediately."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        pass


class EventBus(ABC):
    """Topic-keyed publish point for vote events.

    Delivery is fire-and-forget: only listeners subscribed at publish time
    receive an event, nothing is persisted or replayed, and publishing never
    waits on a listener.
    """

    @abstractmethod
    async def publish(self, event: VoteEvent) -> int:
        """Publish an event to the listeners of its topic.

        Args:
            event: Event to publish

        Returns:
            Number of listeners the event was handed to
        """
        pass

    @abstractmethod
    def subscribe(self, topic: VoteTopic) -> EventSubscription:
        """Attach a new listener to a topic.

        Args:
            topic: Topic to listen on

        Returns:
            Subscription to iterate and eventually close
        """
        pass

    @abstractmethod
    def listener_count(self, topic: VoteTopic) -> int:
        """Number of open listeners on a topic."""
        pass
