"""Tests for access token verification."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from conftest import make_token
from portal.core.config import get_settings
from portal.infrastructure.security.jwt import verify_token


def _encode(payload: dict, secret: str | None = None) -> str:
    settings = get_settings()
    return jwt.encode(
        payload,
        secret or settings.backend_jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def test_valid_token() -> None:
    payload = verify_token(make_token("u1", email="u1@example.com"))
    assert payload["sub"] == "u1"
    assert payload["email"] == "u1@example.com"


def test_wrong_secret_rejected() -> None:
    token = _encode(
        {"sub": "u1", "aud": "authenticated", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        secret="other-secret",
    )
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_expired_token_rejected() -> None:
    token = _encode(
        {"sub": "u1", "aud": "authenticated", "exp": datetime.now(UTC) - timedelta(minutes=5)}
    )
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_wrong_audience_rejected() -> None:
    token = _encode(
        {"sub": "u1", "aud": "anon", "exp": datetime.now(UTC) + timedelta(minutes=5)}
    )
    with pytest.raises(ValueError):
        verify_token(token)


def test_missing_sub_rejected() -> None:
    token = _encode({"aud": "authenticated", "exp": datetime.now(UTC) + timedelta(minutes=5)})
    with pytest.raises(ValueError):
        verify_token(token)


def test_missing_exp_rejected() -> None:
    token = _encode({"sub": "u1", "aud": "authenticated"})
    with pytest.raises(ValueError):
        verify_token(token)
