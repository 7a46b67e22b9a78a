from datetime import datetime, timedelta, timezone

import pytest

from fintrack import auth
from fintrack.config import settings
from fintrack.errors import ConfigurationError
from fintrack.schemas.account import SessionClaims


@pytest.fixture
def claims():
    return SessionClaims(account_id=42, email="ana@example.com", full_name="Ana Souza")


def test_issue_then_verify_returns_same_claims(claims):
    token = auth.issue(claims, ttl=timedelta(days=7))

    decoded = auth.verify(token)

    assert decoded is not None
    assert decoded.account_id == claims.account_id
    assert decoded.email == claims.email
    assert decoded.full_name == claims.full_name
    assert decoded.expires_at - decoded.issued_at == timedelta(days=7)


def test_verify_rejects_expired_token(claims):
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = auth.issue(claims, ttl=timedelta(days=7), now=issued)

    assert auth.verify(token) is None


def test_default_ttl_is_seven_days(claims):
    now = datetime.now(timezone.utc)
    decoded = auth.verify(auth.issue(claims, now=now))

    assert decoded.expires_at - decoded.issued_at == timedelta(days=7)


@pytest.mark.parametrize("segment", [0, 1, 2])
def test_verify_rejects_any_tampered_character(claims, segment):
    token = auth.issue(claims)
    parts = token.split(".")
    segment_text = parts[segment]

    # The final base64 character may only carry padding bits, so leave it alone
    for index in range(len(segment_text) - 1):
        replacement = "A" if segment_text[index] != "A" else "B"
        tampered_parts = list(parts)
        tampered_parts[segment] = segment_text[:index] + replacement + segment_text[index + 1:]
        assert auth.verify(".".join(tampered_parts)) is None, f"segment {segment} index {index}"


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b", "a.b.c", "ünïcode.tøken.x"])
def test_verify_treats_malformed_input_as_no_session(token):
    assert auth.verify(token) is None


def test_token_signed_with_another_secret_is_rejected(claims, monkeypatch):
    token = auth.issue(claims)

    monkeypatch.setattr(settings, "SECRET_KEY", "rotated-secret")

    assert auth.verify(token) is None


def test_issue_without_secret_is_a_configuration_error(claims, monkeypatch):
    monkeypatch.setattr(settings, "SECRET_KEY", "")

    with pytest.raises(ConfigurationError):
        auth.issue(claims)


def test_password_hash_is_salted_and_verifiable():
    first = auth.get_password_hash("secret123")
    second = auth.get_password_hash("secret123")

    assert first != "secret123"
    assert first != second
    assert auth.verify_password("secret123", first)
    assert not auth.verify_password("wrong", first)
