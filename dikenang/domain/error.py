"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class OppositeVoteError(BusinessRuleViolationError):
    """Raised when a user votes one way on a post they already voted the other way.

    Switching sides takes two explicit mutations: remove the old vote,
    then add the new one.
    """

    def __init__(self, post_id: str, user_id: str, existing_kind: str):
        self.post_id = post_id
        self.user_id = user_id
        self.existing_kind = existing_kind
        super().__init__(
            f"User {user_id} already holds a {existing_kind} on post {post_id}"
        )


class ServiceUnavailableError(DomainError):
    """Raised when a backing store cannot serve the request. Safe to retry."""

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        super().__init__(f"{operation} is temporarily unavailable: {cause}")
