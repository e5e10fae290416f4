"""Domain value objects for dikenang."""

from dikenang.domain.value.identifiers import (
    AttachmentId,
    PostId,
    ReachId,
    RelationshipId,
    UserId,
    VoteId,
)
from dikenang.domain.value.types import Username, VoteKind

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "VoteId",
    "ReachId",
    "AttachmentId",
    "RelationshipId",
    # Types
    "Username",
    "VoteKind",
]
