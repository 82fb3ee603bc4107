"""Domain value objects for the forum."""

from forum.domain.value.identifiers import UserId, VotableId
from forum.domain.value.types import TokenString, VotableType, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "VotableId",
    # Types
    "TokenString",
    "VotableType",
    "VoteType",
]
