"""Unit tests for row/model mappers."""

from datetime import datetime
from uuid import uuid4

from dikenang.domain.model import Vote
from dikenang.domain.value import PostId, UserId, VoteId, VoteKind
from dikenang.persistence.mappers import row_to_user, row_to_vote, vote_to_dict


class TestVoteMapper:
    def test_vote_to_dict_stores_kind_as_string(self):
        vote = Vote(
            id=VoteId(uuid4()),
            post_id=PostId(uuid4()),
            user_id=UserId(uuid4()),
            kind=VoteKind.DOWNVOTE,
        )

        data = vote_to_dict(vote)

        assert data["kind"] == "downvote"
        assert data["post_id"] == vote.post_id

    def test_row_to_vote_accepts_string_ids(self):
        """asyncpg returns UUID objects, but raw SQL paths may return strings."""
        post_id = uuid4()
        row = {
            "id": str(uuid4()),
            "post_id": str(post_id),
            "user_id": uuid4(),
            "kind": "upvote",
            "created_at": datetime.now(),
        }

        vote = row_to_vote(row)

        assert vote.post_id == post_id
        assert vote.kind is VoteKind.UPVOTE


class TestUserMapper:
    def test_row_to_user_without_optional_fields(self):
        now = datetime.now()
        row = {
            "id": uuid4(),
            "username": "res_phc56FWNRX2w",
            "email": "res@example.com",
            "bio": None,
            "avatar_url": None,
            "relationship_id": None,
            "created_at": now,
            "updated_at": now,
        }

        user = row_to_user(row)

        assert user.username.root == "res_phc56FWNRX2w"
        assert user.relationship_id is None
