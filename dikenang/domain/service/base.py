"""Base service class for domain services."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from dikenang.domain.error import ServiceUnavailableError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def persistence_guard(operation: str) -> Iterator[None]:
    """Translate storage failures into ServiceUnavailableError.

    Integrity violations that a service expects (duplicate membership)
    must be caught inside the guarded block; anything else raised by the
    database driver means the store could not serve the request.

    Args:
        operation: Name of the operation, reported to the caller
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logfire.error("Persistence failure", operation=operation, error=str(e))
        raise ServiceUnavailableError(operation, type(e).__name__) from e
