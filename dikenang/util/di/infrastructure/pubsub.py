"""Event bus infrastructure provider."""

from dishka import Scope, provide

from dikenang.adapter.pubsub.memory import InMemoryEventBus
from dikenang.config import SubscriptionSettings
from dikenang.domain.event import EventBus
from dikenang.util.di.base import ProviderBase


class EventBusProvider(ProviderBase):
    """Event bus provider - concrete, one bus per application."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_event_bus(self, subscription_settings: SubscriptionSettings) -> EventBus:
        """Provide the in-process vote event bus."""
        return InMemoryEventBus(queue_size=subscription_settings.queue_size)
