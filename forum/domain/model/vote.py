"""Vote entity.

A vote records that a user voted on some votable entity (post, comment, ...).
Votes are written once and never updated, so only the creation time is kept.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, VotableId, VotableType, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Immutable once created (no update timestamp)
    - No identity of its own; one vote per user per votable is up to callers
    - Polymorphic reference to the votable via ``votable_type``
    """

    user_id: UserId
    votable_id: VotableId
    votable_type: VotableType
    type: VoteType = VoteType.UP
    create_time: datetime = Field(default_factory=datetime.now)
