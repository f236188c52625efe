"""
Bearer token helpers and role checks.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Any

import jwt
from fastapi import Header, HTTPException, status

from app.core.settings import get_settings

ROLE_ADMIN = "Admin"
ROLE_USER = "User"


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def build_access_token(
    *,
    subject: str,
    roles: Iterable[str],
    expires_in_minutes: int | None = None,
) -> str:
    settings = get_settings()
    minutes = (
        expires_in_minutes
        if expires_in_minutes is not None
        else settings.access_token_expire_minutes
    )
    issued_at = now_epoch_s()

    payload = {
        "sub": subject,
        "roles": list(roles),
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + minutes * 60,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    settings = get_settings()
    try:
        payload = jwt.decode(
            raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != "access":
        raise AuthSecurityError("Token is not an access token.")

    return payload


def token_roles(payload: dict[str, Any]) -> set[str]:
    """Collect role claims from either ``roles`` or ``role``."""
    roles: set[str] = set()
    for key in ("roles", "role"):
        value = payload.get(key)
        if isinstance(value, str):
            roles.add(value)
        elif isinstance(value, list):
            roles.update(str(item) for item in value)
    return roles


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


def require_roles(*allowed: str) -> Callable[..., dict[str, Any]]:
    """Build a dependency that admits callers holding any of ``allowed``."""

    allowed_roles = set(allowed)

    def dependency(authorization: str | None = Header(default=None)) -> dict[str, Any]:
        token = _extract_bearer_token(authorization)
        try:
            payload = decode_access_token(token)
        except AuthSecurityError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
            ) from exc

        if not token_roles(payload) & allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role.",
            )
        return payload

    return dependency
