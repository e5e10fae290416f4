"""Post aggregate root.

Posts are memories shared by a user, optionally linked to the
relationship (partnership) the author belongs to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dikenang.domain.model.common import DomainModel
from dikenang.domain.value import AttachmentId, PostId, RelationshipId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Upvoters and downvoters are not stored on the post; they are projected
    from vote membership (see VoteTally).
    """

    id: PostId
    caption: str = Field(max_length=5000)
    type: str = Field(default="public", min_length=1, max_length=50)
    author_id: UserId
    attachment_id: Optional[AttachmentId] = None
    relationship_id: Optional[RelationshipId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
