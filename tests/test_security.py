from __future__ import annotations

import jwt
import pytest

from app.core.security import (
    AuthSecurityError,
    build_access_token,
    decode_access_token,
    token_roles,
)
from app.core.settings import get_settings


def test_token_round_trip_carries_roles():
    payload = decode_access_token(build_access_token(subject="alice", roles=["Admin"]))

    assert payload["sub"] == "alice"
    assert token_roles(payload) == {"Admin"}


def test_expired_token_is_rejected():
    token = build_access_token(subject="alice", roles=["Admin"], expires_in_minutes=-1)

    with pytest.raises(AuthSecurityError):
        decode_access_token(token)


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode(
        {"sub": "mallory", "roles": ["Admin"], "type": "access"},
        "not-the-secret",
        algorithm=get_settings().jwt_algorithm,
    )

    with pytest.raises(AuthSecurityError):
        decode_access_token(token)


def test_non_access_token_is_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "alice", "roles": ["Admin"], "type": "refresh"},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(AuthSecurityError):
        decode_access_token(token)


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"role": "User"}, {"User"}),
        ({"role": ["Admin", "User"]}, {"Admin", "User"}),
        ({"roles": ["Admin"], "role": "User"}, {"Admin", "User"}),
        ({}, set()),
    ],
)
def test_token_roles_reads_both_claim_names(payload, expected):
    assert token_roles(payload) == expected
