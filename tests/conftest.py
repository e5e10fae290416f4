"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from dikenang.domain.model import Post, User
from dikenang.domain.value import PostId, UserId, Username

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "res_phc56FWNRX2w", user_id: UserId | None = None) -> User:
    """Helper function to build a test user.

    Args:
        username: Username (defaults to a generated-style handle)
        user_id: Optional fixed ID

    Returns:
        User domain model
    """
    now = datetime.now()
    return User(
        id=user_id or UserId(uuid4()),
        username=Username(username),
        email=f"{username.lower()}@example.com",
        created_at=now,
        updated_at=now,
    )


def make_post(author_id: UserId, post_id: PostId | None = None) -> Post:
    """Helper function to build a test post.

    Args:
        author_id: Author's user ID
        post_id: Optional fixed ID

    Returns:
        Post domain model
    """
    now = datetime.now()
    return Post(
        id=post_id or PostId(uuid4()),
        caption="First trip together",
        author_id=author_id,
        created_at=now,
        updated_at=now,
    )
