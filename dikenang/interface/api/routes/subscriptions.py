"""Live vote subscription route (WebSocket)."""

import logging

from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from dikenang.application.subscription import SubscriptionGateway
from dikenang.application.subscription.protocol import error_message
from dikenang.domain.event import EventBus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions"])


@router.websocket("/subscriptions")
async def vote_subscriptions(websocket: WebSocket) -> None:
    """Stream upvote and downvote counters of posts to the client.

    The connection carries any number of independent subscriptions. When
    the client disconnects every subscription is terminated and nothing
    further is sent.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    event_bus = await container.get(EventBus)

    await websocket.accept()
    gateway = SubscriptionGateway(event_bus=event_bus, send=websocket.send_json)
    logger.info(f"Subscription connection opened from {websocket.client}")

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            if message.get("text") is not None:
                await gateway.handle_text(message["text"])
            else:
                # Binary frames carry no protocol message
                await websocket.send_json(error_message(None, "Malformed message"))
    except WebSocketDisconnect as e:
        logger.info(f"Subscription connection closed (code={e.code})")
    finally:
        await gateway.close()
