"""Domain model entities for the forum."""

from forum.domain.model.auth_token import AuthToken
from forum.domain.model.vote import Vote

__all__ = [
    "AuthToken",
    "Vote",
]
