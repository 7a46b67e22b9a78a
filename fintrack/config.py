# -*- coding: utf-8 -*-
"""
Application settings read from environment variables (and a .env file, when present).
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _split_routes(value, default):
    if not value:
        return list(default)
    return [route.strip() for route in value.split(",") if route.strip()]


class Settings:
    # --- Core / Security ---
    SECRET_KEY = os.environ.get("SECRET_KEY", "")
    ALGORITHM = "HS256"
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- Database ---
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./finance.db")

    # --- Session cookie ---
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")
    SESSION_TTL_DAYS = int(os.getenv("SESSION_TTL_DAYS", "7"))

    # --- Route classification (path prefixes / exact paths) ---
    PROTECTED_ROUTES = _split_routes(
        os.getenv("PROTECTED_ROUTES"),
        ["/dashboard", "/income", "/expenses", "/budget", "/reports", "/profile"],
    )
    PUBLIC_ROUTES = _split_routes(os.getenv("PUBLIC_ROUTES"), ["/login", "/signup", "/"])
    AUTH_ROUTES = _split_routes(os.getenv("AUTH_ROUTES"), ["/login", "/signup"])
    # Paths the guard never looks at (API, docs, assets)
    UNGUARDED_PREFIXES = ["/api", "/docs", "/redoc", "/openapi.json", "/static"]

    LOGIN_PATH = os.getenv("LOGIN_PATH", "/login")
    DEFAULT_AUTHENTICATED_PATH = os.getenv("DEFAULT_AUTHENTICATED_PATH", "/dashboard")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
