# -*- coding: utf-8 -*-
"""
Cookie transport for the session token.

Nothing is stored server side: the signed token in the `session` cookie is
the whole session.
"""
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, Response

from fintrack import auth
from fintrack.config import settings
from fintrack.schemas.account import SessionClaims


def _set_cookie(response: Response, token: str, expires_at: datetime):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(auth.session_ttl().total_seconds()),
        expires=expires_at,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )


def create_session(response: Response, account) -> str:
    """Issue a token for `account` and attach it to `response` as the session cookie."""
    now = datetime.now(timezone.utc)
    expires_at = now + auth.session_ttl()
    claims = SessionClaims(account_id=account.id, email=account.email, full_name=account.full_name)
    token = auth.issue(claims, ttl=auth.session_ttl(), now=now)
    _set_cookie(response, token, expires_at)
    return token


def read_session(request: Request) -> Optional[SessionClaims]:
    return auth.verify(request.cookies.get(settings.SESSION_COOKIE_NAME))


def refresh(request: Request, response: Response) -> Optional[SessionClaims]:
    """
    Sliding expiration: re-set the current (unchanged) token with a fresh
    cookie lifetime. Claims are not re-signed.
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    claims = auth.verify(token)
    if claims is None:
        return None
    _set_cookie(response, token, datetime.now(timezone.utc) + auth.session_ttl())
    return claims


def destroy_session(response: Response):
    # delete_cookie with no cookie present is harmless
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
