"""Reach entity.

A Reach records that a user has seen a post. Each user counts once per
post no matter how many times they view it.
"""

from datetime import datetime

from pydantic import Field

from dikenang.domain.model.common import DomainModel
from dikenang.domain.value import PostId, ReachId, UserId


class Reach(DomainModel):
    """Post view by a user (one per user per post)."""

    id: ReachId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
