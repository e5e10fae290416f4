"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .pubsub import EventBusProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "EventBusProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
