"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dikenang.domain.model.common import DomainModel
from dikenang.domain.value import RelationshipId, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Authored, upvoted and downvoted posts are looked up through their own
    repositories rather than held here.
    """

    id: UserId
    username: Username
    email: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    relationship_id: Optional[RelationshipId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
