from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.core.config import settings
from jose import JWTError, jwt  # type: ignore[import-untyped]
from passlib.context import CryptContext  # type: ignore[import-untyped]

ADMIN_SCOPE = "admin"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Issue a signed admin session token for ``subject`` (the admin id)."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.auth_access_token_ttl_minutes)

    expire = datetime.now(timezone.utc) + expires_delta
    claims = {"sub": subject, "scope": ADMIN_SCOPE, "exp": expire}
    return jwt.encode(claims, settings.auth_secret_key, algorithm=settings.auth_algorithm)


def decode_admin_token(token: str) -> str:
    """Return the admin id carried by ``token``.

    Raises JWTError for bad signatures, expired tokens and tokens that were
    not issued for the admin scope.
    """
    payload = jwt.decode(
        token, settings.auth_secret_key, algorithms=[settings.auth_algorithm]
    )
    subject = payload.get("sub")
    if not subject or payload.get("scope") != ADMIN_SCOPE:
        raise JWTError("not an admin session token")
    return str(subject)
