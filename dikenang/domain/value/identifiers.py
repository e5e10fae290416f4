"""Strongly typed identifiers for dikenang domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
VoteId = NewType("VoteId", UUID)
ReachId = NewType("ReachId", UUID)
AttachmentId = NewType("AttachmentId", UUID)
RelationshipId = NewType("RelationshipId", UUID)
