"""Tests for bearer token issuing and verification."""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.errors import InvalidToken
from app.services.token_service import TokenService

SECRET = "test-secret"


@pytest.fixture
def tokens():
    return TokenService(secret=SECRET)


class TestTokenService:

    def test_round_trip(self, tokens):
        token = tokens.issue("user-123")
        assert tokens.verify(token) == "user-123"

    def test_expiry_is_24_hours(self, tokens):
        claims = jwt.decode(tokens.issue("user-123"), SECRET, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

    def test_valid_just_before_expiry(self, tokens):
        issued = datetime.now(timezone.utc) - timedelta(hours=23, minutes=59)
        assert tokens.verify(tokens.issue("user-123", now=issued)) == "user-123"

    def test_expired_after_24_hours(self, tokens):
        issued = datetime.now(timezone.utc) - timedelta(hours=24, seconds=1)
        with pytest.raises(InvalidToken):
            tokens.verify(tokens.issue("user-123", now=issued))

    def test_wrong_secret_rejected(self, tokens):
        forged = TokenService(secret="other-secret").issue("user-123")
        with pytest.raises(InvalidToken):
            tokens.verify(forged)

    def test_tampered_payload_rejected(self, tokens):
        header, _, signature = tokens.issue("user-123").split(".")
        _, payload, _ = TokenService(secret="other-secret").issue("admin").split(".")
        with pytest.raises(InvalidToken):
            tokens.verify(f"{header}.{payload}.{signature}")

    def test_malformed_token_rejected(self, tokens):
        with pytest.raises(InvalidToken):
            tokens.verify("not-a-jwt")

    def test_unsigned_token_rejected(self, tokens):
        unsigned = jwt.encode(
            {"userId": "user-123", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            key=None,
            algorithm="none",
        )
        with pytest.raises(InvalidToken):
            tokens.verify(unsigned)

    def test_missing_user_claim_rejected(self, tokens):
        token = jwt.encode({"exp": datetime.now(timezone.utc) + timedelta(hours=1)}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            tokens.verify(token)

    def test_invalid_token_message(self, tokens):
        with pytest.raises(InvalidToken, match="Invalid or expired token"):
            tokens.verify("not-a-jwt")
