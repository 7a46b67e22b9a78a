# -*- coding: utf-8 -*-
"""
Session token codec and password hashing.

Tokens are HS256 JWTs signed with SECRET_KEY. Rotating the key invalidates
every outstanding session.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from fintrack.config import settings
from fintrack.errors import ConfigurationError
from fintrack.schemas.account import SessionClaims

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def dummy_verify_password():
    """Burn one hash check so a missing account costs the same as a wrong password."""
    pwd_context.dummy_verify()


def require_secret_key() -> str:
    if not settings.SECRET_KEY:
        raise ConfigurationError("SECRET_KEY is not defined in the environment variables.")
    return settings.SECRET_KEY


def session_ttl() -> timedelta:
    return timedelta(days=settings.SESSION_TTL_DAYS)


# --- TOKEN CODEC ---

def issue(claims: SessionClaims, ttl: Optional[timedelta] = None, now: Optional[datetime] = None) -> str:
    """
    Sign `claims` into a compact token that expires `ttl` after `now`.
    """
    secret = require_secret_key()
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + (ttl if ttl is not None else session_ttl())
    payload = {
        "sub": str(claims.account_id),
        "email": claims.email,
        "fullName": claims.full_name,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, secret, algorithm=settings.ALGORITHM)


def verify(token: Optional[str]) -> Optional[SessionClaims]:
    """
    Decode a token issued by `issue`.

    Returns None for a missing, malformed, tampered or expired token; callers
    treat that exactly like an anonymous request.
    """
    if not token:
        return None
    secret = require_secret_key()
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.ALGORITHM])
        return SessionClaims(
            account_id=int(payload["sub"]),
            email=payload["email"],
            full_name=payload["fullName"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (JWTError, KeyError, TypeError, ValueError):
        logger.debug("Failed to verify session")
        return None
