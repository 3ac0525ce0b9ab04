from __future__ import annotations

import jwt
import pytest

from shelter_functions.auth import AuthSettings, decode_id_token, issue_id_token
from shelter_functions.exceptions import UnauthenticatedError


@pytest.fixture
def settings() -> AuthSettings:
    return AuthSettings(jwt_secret="unit-secret")


def test_roundtrip_keeps_trusted_claims_only(settings):
    token = issue_id_token("u1", {"admin": True, "role": "superuser"}, settings=settings)
    caller = decode_id_token(token, settings=settings)

    assert caller.uid == "u1"
    assert caller.is_admin
    assert "role" not in caller.claims


def test_wrong_secret_rejected(settings):
    token = issue_id_token("u1", settings=AuthSettings(jwt_secret="other"))
    with pytest.raises(UnauthenticatedError):
        decode_id_token(token, settings=settings)


def test_expired_token_rejected(settings):
    token = issue_id_token("u1", settings=settings, lifetime_seconds=-10)
    with pytest.raises(UnauthenticatedError):
        decode_id_token(token, settings=settings)


def test_token_without_subject_rejected(settings):
    token = jwt.encode({"exp": 9999999999}, "unit-secret", algorithm="HS256")
    with pytest.raises(UnauthenticatedError):
        decode_id_token(token, settings=settings)


def test_garbage_token_rejected(settings):
    with pytest.raises(UnauthenticatedError):
        decode_id_token("not-a-jwt", settings=settings)
