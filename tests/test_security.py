"""Tests for password hashing and token helpers."""

from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from app.infrastructure.security import (
    access_token_lifetime,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_verifies_only_the_original_password() -> None:
    hashed = get_password_hash("S3cret!")

    assert hashed != "S3cret!"
    assert verify_password("S3cret!", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_token_round_trip_keeps_claims() -> None:
    token = create_access_token({"sub": "taskly-001", "email": "ada@example.com"})

    claims = decode_access_token(token)

    assert claims["sub"] == "taskly-001"
    assert claims["email"] == "ada@example.com"
    assert "exp" in claims


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "taskly-001"}, expires_delta=timedelta(seconds=-10))

    with pytest.raises(ValueError):
        decode_access_token(token)


def test_token_signed_with_another_key_is_rejected() -> None:
    token = jwt.encode({"sub": "taskly-001"}, "another-secret", algorithm="HS256")

    with pytest.raises(ValueError):
        decode_access_token(token)


@pytest.mark.parametrize(
    ("remember_me", "expected"),
    [(True, timedelta(days=7)), (False, timedelta(hours=1))],
)
def test_access_token_lifetime(data_file, remember_me: bool, expected: timedelta) -> None:
    assert access_token_lifetime(remember_me) == expected
