"""Unit tests for SubscriptionGateway."""

import asyncio
import json
from typing import Any
from uuid import uuid4

import pytest

from dikenang.adapter.pubsub.memory import InMemoryEventBus
from dikenang.application.subscription import (
    SubscriptionError,
    SubscriptionGateway,
    SubscriptionState,
    SubscriptionTopic,
)
from dikenang.domain.event import VoteEvent, VoteTopic
from dikenang.domain.model.vote import VoteTally
from dikenang.domain.value import PostId, UserId, VoteKind


class RecordingSender:
    """Collects every message the gateway sends."""

    def __init__(self) -> None:
        self.messages: list[dict[str, Any]] = []

    async def __call__(self, message: dict[str, Any]) -> None:
        self.messages.append(message)

    def of_type(self, message_type: str) -> list[dict[str, Any]]:
        return [m for m in self.messages if m["type"] == message_type]


async def wait_until(predicate, timeout: float = 1.0) -> None:
    """Yield to the event loop until ``predicate`` holds."""

    async def _poll() -> None:
        while not predicate():
            await asyncio.sleep(0.01)

    await asyncio.wait_for(_poll(), timeout)


def tally_event(post_id: PostId, kind: VoteKind, voters: list[UserId]) -> VoteEvent:
    return VoteEvent(tally=VoteTally(post_id=post_id, kind=kind, voters=voters))


@pytest.fixture
def bus():
    return InMemoryEventBus()


@pytest.fixture
def sender():
    return RecordingSender()


class TestSubscribe:
    """Tests for opening subscriptions."""

    @pytest.mark.asyncio
    async def test_subscribe_acknowledges_and_attaches_listener(self, bus, sender):
        """A subscribe is acknowledged and moves the subscription to SUBSCRIBED."""
        # Arrange
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())

        # Act
        subscription = await gateway.subscribe("1", SubscriptionTopic.UPVOTE, post_id)

        # Assert
        assert subscription.state is SubscriptionState.SUBSCRIBED
        assert sender.messages == [{"type": "subscribed", "id": "1"}]
        assert bus.listener_count(VoteTopic(kind=VoteKind.UPVOTE, post_id=post_id)) == 1

        await gateway.close()

    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, bus, sender):
        """An ID already in use by an open subscription cannot be reused."""
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        await gateway.subscribe("dup", SubscriptionTopic.UPVOTE, post_id)

        with pytest.raises(SubscriptionError):
            await gateway.subscribe("dup", SubscriptionTopic.DOWNVOTE, post_id)

        await gateway.close()

    @pytest.mark.asyncio
    async def test_id_can_be_reused_after_unsubscribe(self, bus, sender):
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        await gateway.subscribe("a", SubscriptionTopic.UPVOTE, post_id)
        await gateway.unsubscribe("a")

        subscription = await gateway.subscribe("a", SubscriptionTopic.DOWNVOTE, post_id)

        assert subscription.topic is SubscriptionTopic.DOWNVOTE
        await gateway.close()


class TestDelivery:
    """Tests for pushing vote changes to subscribers."""

    @pytest.mark.asyncio
    async def test_upvote_event_is_sent_as_next_payload(self, bus, sender):
        """An upvote change reaches the subscriber in the upvote payload shape."""
        # Arrange
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        voter = UserId(uuid4())
        await gateway.subscribe("up", SubscriptionTopic.UPVOTE, post_id)

        # Act
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, [voter]))
        await wait_until(lambda: sender.of_type("next"))

        # Assert
        assert sender.of_type("next") == [
            {
                "type": "next",
                "id": "up",
                "payload": {
                    "postId": str(post_id),
                    "upvotes": 1,
                    "upvoters": [{"id": str(voter)}],
                },
            }
        ]
        await gateway.close()

    @pytest.mark.asyncio
    async def test_downvote_payload_uses_downvote_fields(self, bus, sender):
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        await gateway.subscribe("down", SubscriptionTopic.DOWNVOTE, post_id)

        await bus.publish(tally_event(post_id, VoteKind.DOWNVOTE, []))
        await wait_until(lambda: sender.of_type("next"))

        payload = sender.of_type("next")[0]["payload"]
        assert payload == {"postId": str(post_id), "downvotes": 0, "downvoters": []}
        await gateway.close()

    @pytest.mark.asyncio
    async def test_subscription_ignores_other_topics(self, bus, sender):
        """A downvote subscriber sees nothing when only upvotes change."""
        # Arrange
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        await gateway.subscribe("down", SubscriptionTopic.DOWNVOTE, post_id)
        await gateway.subscribe("up", SubscriptionTopic.UPVOTE, post_id)

        # Act
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, [UserId(uuid4())]))
        await wait_until(lambda: sender.of_type("next"))
        await asyncio.sleep(0.05)

        # Assert
        assert [m["id"] for m in sender.of_type("next")] == ["up"]
        await gateway.close()

    @pytest.mark.asyncio
    async def test_blocked_subscription_does_not_delay_others(self, bus):
        """Each subscription is delivered independently."""
        # Arrange
        gate = asyncio.Event()
        messages: list[dict[str, Any]] = []

        async def send(message: dict[str, Any]) -> None:
            if message["type"] == "next" and message["id"] == "slow":
                await gate.wait()
            messages.append(message)

        gateway = SubscriptionGateway(bus, send)
        post_id = PostId(uuid4())
        await gateway.subscribe("slow", SubscriptionTopic.UPVOTE, post_id)
        await gateway.subscribe("fast", SubscriptionTopic.UPVOTE, post_id)

        # Act
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, [UserId(uuid4())]))
        await wait_until(lambda: any(m["type"] == "next" for m in messages))

        # Assert
        assert [m["id"] for m in messages if m["type"] == "next"] == ["fast"]

        gate.set()
        await wait_until(
            lambda: len([m for m in messages if m["type"] == "next"]) == 2
        )
        await gateway.close()

    @pytest.mark.asyncio
    async def test_send_failure_terminates_only_that_subscription(self, bus):
        """A subscription whose delivery fails is terminated; the others continue."""
        # Arrange
        messages: list[dict[str, Any]] = []

        async def send(message: dict[str, Any]) -> None:
            if message["type"] == "next" and message["id"] == "broken":
                raise ConnectionError("client went away")
            messages.append(message)

        gateway = SubscriptionGateway(bus, send)
        post_id = PostId(uuid4())
        broken = await gateway.subscribe("broken", SubscriptionTopic.UPVOTE, post_id)
        healthy = await gateway.subscribe("healthy", SubscriptionTopic.UPVOTE, post_id)

        # Act
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, []))
        await wait_until(lambda: broken.state is SubscriptionState.TERMINATED)
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, [UserId(uuid4())]))
        await wait_until(
            lambda: len([m for m in messages if m["type"] == "next"]) == 2
        )

        # Assert
        assert healthy.state is SubscriptionState.SUBSCRIBED
        assert bus.listener_count(healthy.vote_topic) == 1
        await gateway.close()


class TestUnsubscribe:
    """Tests for ending subscriptions."""

    @pytest.mark.asyncio
    async def test_unsubscribe_completes_and_stops_delivery(self, bus, sender):
        """After unsubscribe the client gets ``complete`` and no further events."""
        # Arrange
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        subscription = await gateway.subscribe("1", SubscriptionTopic.UPVOTE, post_id)

        # Act
        await gateway.unsubscribe("1")
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, [UserId(uuid4())]))
        await asyncio.sleep(0.05)

        # Assert
        assert subscription.state is SubscriptionState.TERMINATED
        assert sender.messages == [
            {"type": "subscribed", "id": "1"},
            {"type": "complete", "id": "1"},
        ]
        assert bus.listener_count(subscription.vote_topic) == 0

    @pytest.mark.asyncio
    async def test_unsubscribe_unknown_id_raises(self, bus, sender):
        gateway = SubscriptionGateway(bus, sender)

        with pytest.raises(SubscriptionError):
            await gateway.unsubscribe("missing")

    @pytest.mark.asyncio
    async def test_close_terminates_everything_silently(self, bus, sender):
        """Closing the gateway ends every subscription without sending anything."""
        # Arrange
        gateway = SubscriptionGateway(bus, sender)
        post_id = PostId(uuid4())
        first = await gateway.subscribe("1", SubscriptionTopic.UPVOTE, post_id)
        second = await gateway.subscribe("2", SubscriptionTopic.DOWNVOTE, post_id)
        sender.messages.clear()

        # Act
        await gateway.close()
        await bus.publish(tally_event(post_id, VoteKind.UPVOTE, []))
        await asyncio.sleep(0.05)

        # Assert
        assert gateway.closed
        assert first.state is SubscriptionState.TERMINATED
        assert second.state is SubscriptionState.TERMINATED
        assert sender.messages == []
        with pytest.raises(SubscriptionError):
            await gateway.subscribe("3", SubscriptionTopic.UPVOTE, post_id)


class TestHandleText:
    """Tests for raw protocol messages."""

    @pytest.mark.asyncio
    async def test_subscribe_message_is_dispatched(self, bus, sender):
        gateway = SubscriptionGateway(bus, sender)
        post_id = uuid4()

        await gateway.handle_text(
            json.dumps(
                {
                    "type": "subscribe",
                    "id": "7",
                    "topic": "downvoteSubscription",
                    "postId": str(post_id),
                }
            )
        )

        assert sender.messages == [{"type": "subscribed", "id": "7"}]
        assert gateway.get("7").topic is SubscriptionTopic.DOWNVOTE
        await gateway.close()

    @pytest.mark.asyncio
    async def test_malformed_message_gets_error_without_id(self, bus, sender):
        """Invalid JSON is answered with an error and the gateway stays open."""
        gateway = SubscriptionGateway(bus, sender)

        await gateway.handle_text("{not json")

        assert sender.messages == [
            {"type": "error", "id": None, "message": "Malformed message"}
        ]
        assert not gateway.closed

    @pytest.mark.asyncio
    async def test_unknown_topic_is_malformed(self, bus, sender):
        gateway = SubscriptionGateway(bus, sender)

        await gateway.handle_text(
            json.dumps(
                {
                    "type": "subscribe",
                    "id": "1",
                    "topic": "commentSubscription",
                    "postId": str(uuid4()),
                }
            )
        )

        assert sender.of_type("error")[0]["id"] is None

    @pytest.mark.asyncio
    async def test_subscribe_without_post_id_is_an_error(self, bus, sender):
        """A well-formed subscribe missing postId is rejected for that ID."""
        gateway = SubscriptionGateway(bus, sender)

        await gateway.handle_text(
            json.dumps({"type": "subscribe", "id": "9", "topic": "upvoteSubscription"})
        )

        [error] = sender.of_type("error")
        assert error["id"] == "9"
        assert gateway.get("9") is None

    @pytest.mark.asyncio
    async def test_unsubscribe_message_for_unknown_id_is_an_error(self, bus, sender):
        gateway = SubscriptionGateway(bus, sender)

        await gateway.handle_text(json.dumps({"type": "unsubscribe", "id": "42"}))

        [error] = sender.of_type("error")
        assert error["id"] == "42"
        assert "Unknown subscription" in error["message"]
