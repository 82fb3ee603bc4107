"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Kind of vote."""

    UP = "up"
    DOWN = "down"


class VotableType(RootValueObject[str]):
    """Discriminator naming the kind of entity a vote targets.

    Lowercase identifier, 1-50 characters.
    Examples: 'post', 'comment', 'answer'
    """

    @field_validator("root")
    @classmethod
    def validate_votable_type(cls, v: str) -> str:
        """Validate discriminator format."""
        if not re.match(r"^[a-z][a-z0-9_]{0,49}$", v):
            raise ValueError(
                "Votable type must be 1-50 characters, lowercase, "
                "starting with a letter"
            )
        return v


class TokenString(RootValueObject[str]):
    """Opaque authentication token string."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v
