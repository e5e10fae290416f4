"""In-process event bus backed by asyncio queues.

Each listener owns a bounded queue. Publishing only ever calls
``put_nowait``, so a slow or stalled listener cannot hold up the publisher
or other listeners; when a listener's queue is full its oldest pending
event is discarded to make room.
"""

import asyncio
from collections import defaultdict
from collections.abc import AsyncIterator, Callable
from typing import Optional

import logfire

from dikenang.domain.event import EventBus, EventSubscription, VoteEvent, VoteTopic


class QueueSubscription(EventSubscription):
    """Listener fed through a bounded asyncio queue."""

    def __init__(
        self,
        topic: VoteTopic,
        maxsize: int,
        on_close: Callable[["QueueSubscription"], None],
    ) -> None:
        self.topic = topic
        self.dropped = 0
        self._queue: asyncio.Queue[Optional[VoteEvent]] = asyncio.Queue(maxsize)
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def offer(self, event: VoteEvent) -> None:
        """Enqueue an event without waiting."""
        if self._closed:
            return
        if self._queue.full():
            self._queue.get_nowait()
            self.dropped += 1
            logfire.warn(
                "Listener queue full, dropped oldest event",
                topic=str(self.topic),
                dropped=self.dropped,
            )
        self._queue.put_nowait(event)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._on_close(self)

        # Pending events are discarded; the sentinel wakes a waiting reader
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

    async def __aiter__(self) -> AsyncIterator[VoteEvent]:
        while not self._closed:
            event = await self._queue.get()
            if event is None or self._closed:
                return
            yield event


class InMemoryEventBus(EventBus):
    """Event bus for a single process."""

    def __init__(self, queue_size: int = 64) -> None:
        if queue_size < 1:
            raise ValueError("queue_size must be at least 1")
        self._queue_size = queue_size
        self._listeners: dict[VoteTopic, set[QueueSubscription]] = defaultdict(set)

    async def publish(self, event: VoteEvent) -> int:
        topic = event.topic
        listeners = list(self._listeners.get(topic, ()))
        for listener in listeners:
            listener.offer(event)

        logfire.debug(
            "Vote event published", topic=str(topic), listeners=len(listeners)
        )
        return len(listeners)

    def subscribe(self, topic: VoteTopic) -> QueueSubscription:
        subscription = QueueSubscription(
            topic=topic, maxsize=self._queue_size, on_close=self._detach
        )
        self._listeners[topic].add(subscription)
        logfire.debug("Listener attached", topic=str(topic))
        return subscription

    def listener_count(self, topic: VoteTopic) -> int:
        return len(self._listeners.get(topic, ()))

    def _detach(self, subscription: QueueSubscription) -> None:
        listeners = self._listeners.get(subscription.topic)
        if listeners is None:
            return
        listeners.discard(subscription)
        if not listeners:
            del self._listeners[subscription.topic]
        logfire.debug("Listener detached", topic=str(subscription.topic))
