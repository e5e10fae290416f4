"""Domain value objects for dikenang.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from dikenang.domain.value.common import RootValueObject


class VoteKind(str, Enum):
    """Kind of vote a user can cast on a post."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def opposite(self) -> "VoteKind":
        """The other kind; a user may hold only one of the two on a post."""
        if self is VoteKind.UPVOTE:
            return VoteKind.DOWNVOTE
        return VoteKind.UPVOTE


class Username(RootValueObject[str]):
    """Public username.

    Generated at signup from the provider's given name plus a random suffix
    (e.g. 'res_phc56FWNRX2w'); users may rename later.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.]{1,50}$", v):
            raise ValueError(
                "Username must be 1-50 characters of letters, digits, '_' or '.'"
            )
        return v
