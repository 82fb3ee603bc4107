"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import AuthToken, Vote
from forum.domain.value import (
    TokenString,
    UserId,
    VotableId,
    VotableType,
    VoteType,
)


def _as_uuid(value: UUID | str) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        user_id=UserId(_as_uuid(row["user_id"])),
        votable_id=VotableId(_as_uuid(row["votable_id"])),
        votable_type=VotableType(row["votable_type"]),
        type=VoteType(row["type"]),
        create_time=row["create_time"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "user_id": vote.user_id,
        "votable_id": vote.votable_id,
        "votable_type": vote.votable_type.root,
        "type": vote.type.value,
        "create_time": vote.create_time,
    }


def row_to_auth_token(row: Dict[str, Any]) -> AuthToken:
    """Convert database row to AuthToken domain model.

    Args:
        row: Database row as dict

    Returns:
        AuthToken domain model
    """
    return AuthToken(
        token=TokenString(row["token"]),
        user_id=UserId(_as_uuid(row["user_id"])),
        device=row["device"],
        create_time=row["create_time"],
        expire_time=row["expire_time"],
    )


def auth_token_to_dict(auth_token: AuthToken) -> Dict[str, Any]:
    """Convert AuthToken domain model to database dict."""
    return auth_token.model_dump()
