"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from dikenang.domain.model import Post, Reach, User, Vote
from dikenang.domain.value import (
    AttachmentId,
    PostId,
    ReachId,
    RelationshipId,
    UserId,
    Username,
    VoteId,
    VoteKind,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    relationship_id = _optional_uuid(row.get("relationship_id"))
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        relationship_id=RelationshipId(relationship_id) if relationship_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    attachment_id = _optional_uuid(row.get("attachment_id"))
    relationship_id = _optional_uuid(row.get("relationship_id"))
    return Post(
        id=PostId(_uuid(row["id"])),
        caption=row["caption"],
        type=row["type"],
        author_id=UserId(_uuid(row["author_id"])),
        attachment_id=AttachmentId(attachment_id) if attachment_id else None,
        relationship_id=RelationshipId(relationship_id) if relationship_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        kind=VoteKind(row["kind"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["kind"] = vote.kind.value
    return data


def row_to_reach(row: Dict[str, Any]) -> Reach:
    """Convert database row to Reach domain model."""
    return Reach(
        id=ReachId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def reach_to_dict(reach: Reach) -> Dict[str, Any]:
    """Convert Reach domain model to database dict."""
    return reach.model_dump()
