from types import SimpleNamespace
from urllib.parse import urlparse

import pytest

from fintrack.guard import RouteClass, classify_path, decide
from fintrack.schemas.account import SessionClaims
from tests.helpers import signup

CLAIMS = SessionClaims(account_id=1, email="ana@example.com", full_name="Ana Souza")


@pytest.mark.parametrize("path, expected", [
    ("/dashboard", RouteClass.PROTECTED),
    ("/dashboard/settings", RouteClass.PROTECTED),
    ("/income", RouteClass.PROTECTED),
    ("/expenses", RouteClass.PROTECTED),
    ("/budget", RouteClass.PROTECTED),
    ("/reports", RouteClass.PROTECTED),
    ("/profile", RouteClass.PROTECTED),
    ("/login", RouteClass.AUTH_ONLY),
    ("/signup", RouteClass.AUTH_ONLY),
    ("/login/help", RouteClass.OTHER),
    ("/", RouteClass.PUBLIC),
    ("/about", RouteClass.OTHER),
    ("/api/login", RouteClass.OTHER),
    ("/api/reports/totals", RouteClass.OTHER),
    ("/docs", RouteClass.OTHER),
])
def test_classify_path(path, expected):
    assert classify_path(path) is expected


@pytest.mark.parametrize("route_class, claims, target", [
    (RouteClass.PROTECTED, None, "/login"),
    (RouteClass.PROTECTED, CLAIMS, None),
    (RouteClass.AUTH_ONLY, CLAIMS, "/dashboard"),
    (RouteClass.AUTH_ONLY, None, None),
    (RouteClass.PUBLIC, None, None),
    (RouteClass.PUBLIC, CLAIMS, None),
    (RouteClass.OTHER, None, None),
    (RouteClass.OTHER, CLAIMS, None),
])
def test_transition_table(route_class, claims, target):
    assert decide(route_class, claims) == target


def test_classification_lists_come_from_settings():
    custom = SimpleNamespace(
        UNGUARDED_PREFIXES=["/api"],
        PROTECTED_ROUTES=["/vault"],
        AUTH_ROUTES=["/enter"],
        PUBLIC_ROUTES=["/welcome"],
    )

    assert classify_path("/vault/1", custom) is RouteClass.PROTECTED
    assert classify_path("/enter", custom) is RouteClass.AUTH_ONLY
    assert classify_path("/welcome", custom) is RouteClass.PUBLIC
    assert classify_path("/dashboard", custom) is RouteClass.OTHER


def test_anonymous_dashboard_redirects_to_login(client):
    response = client.get("/dashboard", follow_redirects=False)

    assert response.status_code == 307
    assert urlparse(response.headers["location"]).path == "/login"


def test_signed_in_login_redirects_to_dashboard(client):
    signup(client)

    response = client.get("/login", follow_redirects=False)

    assert response.status_code == 307
    assert urlparse(response.headers["location"]).path == "/dashboard"


def test_anonymous_login_page_is_allowed(client):
    response = client.get("/login", follow_redirects=False)

    assert response.status_code == 200
    assert response.json() == {"page": "login"}


def test_signed_in_dashboard_is_allowed(client):
    signup(client)

    response = client.get("/dashboard", follow_redirects=False)

    assert response.status_code == 200
    assert response.json()["page"] == "dashboard"


def test_home_is_open_to_everyone(client):
    assert client.get("/", follow_redirects=False).status_code == 200
    signup(client)
    assert client.get("/", follow_redirects=False).status_code == 200


def test_forged_cookie_counts_as_logged_out(client):
    response = client.get(
        "/reports", headers={"cookie": "session=forged.token.value"}, follow_redirects=False
    )

    assert response.status_code == 307
    assert urlparse(response.headers["location"]).path == "/login"


def test_guard_does_not_touch_the_session_cookie(client):
    signup(client)

    response = client.get("/login", follow_redirects=False)

    assert "set-cookie" not in response.headers


def test_api_routes_are_not_redirected(client):
    response = client.get("/api/reports/totals", follow_redirects=False)

    assert response.status_code == 401
