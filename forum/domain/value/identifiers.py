"""Strongly typed identifiers for forum domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)

# Id of any votable entity (post, comment, ...); the kind is carried separately
VotableId = NewType("VotableId", UUID)
