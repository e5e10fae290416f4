"""Live vote subscriptions for one client connection.

A gateway owns every subscription opened over a single connection. Each
subscription attaches its own listener to the event bus and drains it in
a dedicated task, so a slow subscription never delays the others.

Subscription lifecycle::

    IDLE --subscribe--> SUBSCRIBED --unsubscribe / close--> TERMINATED
"""

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Optional

from pydantic import ValidationError

from dikenang.domain.event import EventBus, EventSubscription, VoteEvent, VoteTopic
from dikenang.domain.value import PostId
from dikenang.util.logging import get_logger

from .protocol import (
    ClientMessage,
    SubscriptionTopic,
    complete_message,
    error_message,
    next_message,
    subscribed_message,
)

logger = get_logger(__name__)

Send = Callable[[dict[str, Any]], Awaitable[None]]


class SubscriptionState(str, Enum):
    IDLE = "idle"
    SUBSCRIBED = "subscribed"
    TERMINATED = "terminated"


class SubscriptionError(Exception):
    """Protocol violation reported back to the client."""

    pass


class VoteSubscription:
    """One client subscription to the votes of one kind on one post."""

    def __init__(
        self, subscription_id: str, topic: SubscriptionTopic, post_id: PostId
    ) -> None:
        self.id = subscription_id
        self.topic = topic
        self.post_id = post_id
        self.state = SubscriptionState.IDLE
        self._listener: Optional[EventSubscription] = None
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def vote_topic(self) -> VoteTopic:
        return VoteTopic(kind=self.topic.kind, post_id=self.post_id)

    def start(
        self,
        event_bus: EventBus,
        deliver: Callable[["VoteSubscription", VoteEvent], Awaitable[None]],
    ) -> None:
        """Attach to the bus and begin delivering events."""
        if self.state is not SubscriptionState.IDLE:
            raise SubscriptionError(f"Subscription {self.id} already started")

        self._listener = event_bus.subscribe(self.vote_topic)
        self.state = SubscriptionState.SUBSCRIBED
        self._task = asyncio.create_task(
            self._pump(self._listener, deliver), name=f"vote-subscription-{self.id}"
        )

    async def terminate(self) -> None:
        """Stop delivery. Safe to call more than once."""
        if self.state is SubscriptionState.TERMINATED:
            return
        self.state = SubscriptionState.TERMINATED

        if self._listener is not None:
            self._listener.close()

        task = self._task
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()
            await asyncio.wait({task})

    async def _pump(
        self,
        listener: EventSubscription,
        deliver: Callable[["VoteSubscription", VoteEvent], Awaitable[None]],
    ) -> None:
        try:
            async for event in listener:
                if self.state is not SubscriptionState.SUBSCRIBED:
                    break
                await deliver(self, event)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"Delivery failed for subscription {self.id}")
            self.state = SubscriptionState.TERMINATED
            listener.close()


class SubscriptionGateway:
    """Dispatches protocol messages of one connection."""

    def __init__(self, event_bus: EventBus, send: Send) -> None:
        """Initialize the gateway.

        Args:
            event_bus: Bus to attach subscription listeners to
            send: Coroutine writing one JSON message to the client
        """
        self._event_bus = event_bus
        self._send = send
        self._subscriptions: dict[str, VoteSubscription] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, subscription_id: str) -> Optional[VoteSubscription]:
        return self._subscriptions.get(subscription_id)

    async def handle_text(self, raw: str) -> None:
        """Handle one raw client message.

        Malformed or out-of-order messages are answered with an ``error``
        message; the connection stays open.
        """
        try:
            message = ClientMessage.model_validate_json(raw)
        except ValidationError as e:
            logger.info(f"Rejected malformed subscription message: {e.error_count()} errors")
            await self._send(error_message(None, "Malformed message"))
            return

        try:
            if message.type == "subscribe":
                if message.topic is None or message.post_id is None:
                    raise SubscriptionError("subscribe requires topic and postId")
                await self.subscribe(
                    message.id, message.topic, PostId(message.post_id)
                )
            else:
                await self.unsubscribe(message.id)
        except SubscriptionError as e:
            logger.info(f"Subscription {message.id} rejected: {e}")
            await self._send(error_message(message.id, str(e)))

    async def subscribe(
        self, subscription_id: str, topic: SubscriptionTopic, post_id: PostId
    ) -> VoteSubscription:
        """Open a subscription and acknowledge it.

        Args:
            subscription_id: Client-chosen ID, unique among open subscriptions
            topic: Upvote or downvote topic
            post_id: Post to follow

        Returns:
            The started subscription

        Raises:
            SubscriptionError: If the gateway is closed or the ID is in use
        """
        if self._closed:
            raise SubscriptionError("Connection closed")

        existing = self._subscriptions.get(subscription_id)
        if existing is not None and existing.state is SubscriptionState.SUBSCRIBED:
            raise SubscriptionError(f"Subscription id already in use: {subscription_id}")

        subscription = VoteSubscription(subscription_id, topic, post_id)
        self._subscriptions[subscription_id] = subscription
        subscription.start(self._event_bus, self._deliver)

        logger.info(
            f"Subscription {subscription_id} opened: {topic.value} post={post_id}"
        )
        await self._send(subscribed_message(subscription_id))
        return subscription

    async def unsubscribe(self, subscription_id: str) -> None:
        """Terminate a subscription and confirm with ``complete``.

        Raises:
            SubscriptionError: If no such subscription is open
        """
        subscription = self._subscriptions.pop(subscription_id, None)
        if subscription is None or subscription.state is SubscriptionState.TERMINATED:
            raise SubscriptionError(f"Unknown subscription: {subscription_id}")

        await subscription.terminate()
        logger.info(f"Subscription {subscription_id} completed")
        await self._send(complete_message(subscription_id))

    async def close(self) -> None:
        """Terminate every subscription without notifying the client."""
        if self._closed:
            return
        self._closed = True

        subscriptions = list(self._subscriptions.values())
        self._subscriptions.clear()
        await asyncio.gather(*(s.terminate() for s in subscriptions))
        logger.info(f"Gateway closed, {len(subscriptions)} subscriptions terminated")

    async def _deliver(self, subscription: VoteSubscription, event: VoteEvent) -> None:
        if event.topic != subscription.vote_topic:
            return
        await self._send(next_message(subscription.id, event.tally))
