"""Unit tests for the AuthToken entity."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from forum.domain.model import AuthToken
from forum.domain.value import TokenString, UserId


def _make_token(**overrides) -> AuthToken:
    now = datetime.now()
    values = {
        "token": TokenString("tok-abc123"),
        "user_id": UserId(uuid4()),
        "device": "ios",
        "create_time": now,
        "expire_time": now + timedelta(days=30),
    }
    values.update(overrides)
    return AuthToken(**values)


class TestAuthToken:
    """Tests for AuthToken entity."""

    def test_creates_token_with_required_fields(self):
        """Should create token with all fields."""
        user_id = UserId(uuid4())
        token = _make_token(user_id=user_id, device="android")

        assert str(token.token) == "tok-abc123"
        assert token.user_id == user_id
        assert token.device == "android"

    def test_create_time_defaults_to_now(self):
        """Create time should be filled in automatically."""
        token = AuthToken(
            token=TokenString("tok"),
            user_id=UserId(uuid4()),
            device="web",
            expire_time=datetime.now() + timedelta(hours=1),
        )

        assert token.create_time <= datetime.now()

    def test_expire_time_must_follow_create_time(self):
        """Expire time equal to or before create time should be rejected."""
        now = datetime.now()

        with pytest.raises(ValidationError, match="expire_time must be later"):
            _make_token(create_time=now, expire_time=now)

        with pytest.raises(ValidationError, match="expire_time must be later"):
            _make_token(create_time=now, expire_time=now - timedelta(seconds=1))

    def test_empty_token_rejected(self):
        """Token string must not be empty."""
        with pytest.raises(ValidationError):
            TokenString("")

    def test_is_immutable(self):
        """Tokens should not be mutated after issue."""
        token = _make_token()

        with pytest.raises(ValidationError):
            token.device = "other"

    def test_has_no_update_time(self):
        """Tokens only track creation and expiry."""
        assert set(AuthToken.model_fields) == {
            "token",
            "user_id",
            "device",
            "create_time",
            "expire_time",
        }


class TestIsExpired:
    """Tests for AuthToken.is_expired."""

    def test_not_expired_before_expire_time(self):
        """Token should be valid until its expire time."""
        token = _make_token()

        assert token.is_expired(token.expire_time - timedelta(seconds=1)) is False
        assert token.is_expired(token.expire_time) is False

    def test_expired_after_expire_time(self):
        """Token should be expired once the expire time has passed."""
        token = _make_token()

        assert token.is_expired(token.expire_time + timedelta(seconds=1)) is True

    def test_defaults_to_current_time(self):
        """Without an explicit time, the current time is used."""
        now = datetime.now()
        fresh = _make_token()
        stale = _make_token(
            create_time=now - timedelta(days=2),
            expire_time=now - timedelta(days=1),
        )

        assert fresh.is_expired() is False
        assert stale.is_expired() is True


class TestTimezoneAwareTimes:
    """Tests for tokens built from timezone-aware timestamps."""

    def test_default_create_time_follows_expiry_timezone(self):
        """Default create time should be comparable with an aware expiry."""
        token = AuthToken(
            token=TokenString("tok"),
            user_id=UserId(uuid4()),
            device="web",
            expire_time=datetime.now(timezone.utc) + timedelta(hours=1),
        )

        assert token.create_time.tzinfo is not None
        assert token.create_time < token.expire_time

    def test_is_expired_with_aware_expiry(self):
        """Expiry check should use the current time in the expiry timezone."""
        now = datetime.now(timezone.utc)
        fresh = _make_token(create_time=now, expire_time=now + timedelta(days=1))
        stale = _make_token(
            create_time=now - timedelta(days=2),
            expire_time=now - timedelta(days=1),
        )

        assert fresh.is_expired() is False
        assert stale.is_expired() is True
