# -*- coding: utf-8 -*-
"""
Request-time route gating.

Every request is classified as protected, auth-only, public or other before any page
logic runs. Anonymous users are sent away from protected pages and signed-in
users away from login/signup. The guard only decides; it never refreshes or
deletes the session.
"""
import enum
from typing import Optional

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from fintrack.config import settings as default_settings
from fintrack.schemas.account import SessionClaims
from fintrack.session import read_session


class RouteClass(enum.Enum):
    PROTECTED = "protected"
    AUTH_ONLY = "auth_only"
    PUBLIC = "public"
    OTHER = "other"


def classify_path(path: str, settings=default_settings) -> RouteClass:
    if any(path == prefix or path.startswith(prefix + "/") for prefix in settings.UNGUARDED_PREFIXES):
        return RouteClass.OTHER
    # Prefix match, so /dashboard/anything is protected too
    if any(path.startswith(route) for route in settings.PROTECTED_ROUTES):
        return RouteClass.PROTECTED
    if path in settings.AUTH_ROUTES:
        return RouteClass.AUTH_ONLY
    if path in settings.PUBLIC_ROUTES:
        return RouteClass.PUBLIC
    return RouteClass.OTHER


def decide(route_class: RouteClass, claims: Optional[SessionClaims], settings=default_settings) -> Optional[str]:
    """Return the path to redirect to, or None to let the request through."""
    # PUBLIC and OTHER always pass
    if route_class is RouteClass.PROTECTED and claims is None:
        return settings.LOGIN_PATH
    if route_class is RouteClass.AUTH_ONLY and claims is not None:
        return settings.DEFAULT_AUTHENTICATED_PATH
    return None


class RouteGuardMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, settings=default_settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next):
        route_class = classify_path(request.url.path, self.settings)
        if route_class in (RouteClass.PROTECTED, RouteClass.AUTH_ONLY):
            target = decide(route_class, read_session(request), self.settings)
            if target is not None:
                return RedirectResponse(url=str(request.url.replace(path=target, query="")))
        return await call_next(request)
