"""Unit tests for the Vote entity."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from forum.domain.model import Vote
from forum.domain.value import UserId, VotableId, VotableType, VoteType


def _make_vote(**overrides) -> Vote:
    values = {
        "user_id": UserId(uuid4()),
        "votable_id": VotableId(uuid4()),
        "votable_type": VotableType("post"),
    }
    values.update(overrides)
    return Vote(**values)


class TestVote:
    """Tests for Vote entity."""

    def test_defaults_to_upvote(self):
        """Vote type should default to up."""
        vote = _make_vote()

        assert vote.type == VoteType.UP

    def test_create_time_defaults_to_now(self):
        """Create time should be filled in automatically."""
        before = datetime.now()
        vote = _make_vote()
        after = datetime.now()

        assert before <= vote.create_time <= after

    def test_supports_downvote(self):
        """Down votes should be representable."""
        vote = _make_vote(type=VoteType.DOWN)

        assert vote.type.value == "down"

    def test_is_immutable(self):
        """Votes should not be mutated after creation."""
        vote = _make_vote()

        with pytest.raises(ValidationError):
            vote.type = VoteType.DOWN

    def test_has_no_update_time(self):
        """Votes only track their creation time."""
        assert "update_time" not in Vote.model_fields
        assert set(Vote.model_fields) == {
            "user_id",
            "votable_id",
            "votable_type",
            "type",
            "create_time",
        }


class TestVotableType:
    """Tests for VotableType value object."""

    @pytest.mark.parametrize("value", ["post", "comment", "forum_thread"])
    def test_accepts_lowercase_identifiers(self, value):
        """Lowercase identifiers should be accepted."""
        assert str(VotableType(value)) == value

    @pytest.mark.parametrize("value", ["", "Post", "1post", "post-type", "a" * 51])
    def test_rejects_invalid_values(self, value):
        """Invalid discriminators should be rejected."""
        with pytest.raises(ValidationError):
            VotableType(value)
