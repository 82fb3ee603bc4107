"""Authentication token entity."""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import TokenString, UserId


class AuthToken(DomainModel):
    """Authentication token issued to a user on a device.

    The token string is the identity. Tokens are never updated after
    issue; expired ones are removed by housekeeping outside this model.
    """

    token: TokenString
    user_id: UserId
    device: str
    create_time: datetime = Field(default_factory=datetime.now)
    expire_time: datetime

    @model_validator(mode="before")
    @classmethod
    def default_create_time_to_expiry_timezone(cls, data: Any) -> Any:
        """Fill a missing create time in the timezone of ``expire_time``.

        Rows from the token table carry timezone-aware timestamps, so a
        naive default would not be comparable with them.
        """
        if isinstance(data, dict) and data.get("create_time") is None:
            expire_time = data.get("expire_time")
            if isinstance(expire_time, datetime):
                data = {**data, "create_time": datetime.now(expire_time.tzinfo)}
        return data

    @model_validator(mode="after")
    def check_expiry_after_creation(self) -> "AuthToken":
        """Ensure the token expires strictly after it was created."""
        if self.expire_time <= self.create_time:
            raise ValueError("expire_time must be later than create_time")
        return self

    def is_expired(self, at: datetime | None = None) -> bool:
        """Check whether the token has expired.

        Args:
            at: Point in time to check against (defaults to now, in the
                timezone of ``expire_time``)

        Returns:
            True once ``at`` is past ``expire_time``
        """
        return (at or datetime.now(self.expire_time.tzinfo)) > self.expire_time
