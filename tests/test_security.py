from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from tripbook.config import settings
from tripbook.core.exceptions import (
    IllegalArgumentError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from tripbook.core.permissions import is_public_path
from tripbook.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    get_roles_from_token,
    get_username_from_token,
    is_token_expired,
    validate_token,
    verify_password,
)
from tripbook.models import Role


def test_password_hash_is_salted_and_verifiable():
    first = get_password_hash("pw12345")
    second = get_password_hash("pw12345")

    assert first != second
    assert "pw12345" not in first
    assert verify_password("pw12345", first)
    assert verify_password("pw12345", second)
    assert not verify_password("wrong", first)


def test_token_carries_subject_roles_and_timestamps():
    token = create_access_token("alice", ["ROLE_USER", "ROLE_ADMIN"])
    claims = decode_access_token(token)

    assert claims["sub"] == "alice"
    assert claims["roles"] == ["ROLE_ADMIN", "ROLE_USER"]
    assert claims["exp"] - claims["iat"] == settings.access_token_expire_minutes * 60
    assert get_username_from_token(token) == "alice"
    assert get_roles_from_token(token) == ["ROLE_ADMIN", "ROLE_USER"]


def test_token_for_one_account_never_validates_for_another():
    token = create_access_token("alice", ["ROLE_USER"])

    assert validate_token(token, "alice")
    assert not validate_token(token, "bob")
    assert not validate_token(token, "Alice")


def test_token_valid_before_expiry_and_rejected_after():
    fresh = create_access_token("alice", ["ROLE_USER"], expires_delta=timedelta(minutes=5))
    stale = create_access_token("alice", ["ROLE_USER"], expires_delta=timedelta(seconds=-5))

    assert validate_token(fresh, "alice")
    assert not validate_token(stale, "alice")
    with pytest.raises(TokenExpiredError):
        decode_access_token(stale)


def test_expiry_boundary_is_exclusive():
    now = datetime.now(timezone.utc).timestamp()

    assert not is_token_expired({"exp": now + 60})
    assert is_token_expired({"exp": now})
    assert is_token_expired({"exp": now - 1})


def test_malformed_token_is_reported_as_malformed():
    with pytest.raises(MalformedTokenError):
        decode_access_token("not-a-jwt")
    assert not validate_token("not-a-jwt", "alice")


def test_token_signed_with_another_key_is_rejected():
    forged = jwt.encode(
        {"sub": "alice", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        "some-other-secret",
        algorithm="HS256",
    )

    with pytest.raises(InvalidSignatureError):
        decode_access_token(forged)
    assert not validate_token(forged, "alice")


def test_token_without_subject_is_malformed():
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.secret_key,
        algorithm=settings.algorithm,
    )

    with pytest.raises(MalformedTokenError):
        decode_access_token(token)


@pytest.mark.parametrize("path,public", [
    ("/api/auth/login", True),
    ("/api/auth", True),
    ("/api/auth/me", True),
    ("/public/logo.png", True),
    ("/openapi.json", True),
    ("/docs", True),
    ("/api/authors", False),
    ("/api/trips", False),
    ("/api/employees/1", False),
])
def test_public_path_allow_list(path, public):
    assert is_public_path(path) is public


def test_public_path_custom_patterns():
    patterns = ["/static/*.css", "/reports/**"]

    assert is_public_path("/static/site.css", patterns)
    assert is_public_path("/reports/2024/q1", patterns)
    assert not is_public_path("/static/site.js", patterns)


@pytest.mark.parametrize("value,expected", [
    ("ADMIN", Role.ROLE_ADMIN),
    ("role_user", Role.ROLE_USER),
    ("Seller", Role.ROLE_SELLER),
    ("buyer", Role.ROLE_BUYER),
    ("Administrator", Role.ROLE_ADMIN),
])
def test_role_parsing(value, expected):
    assert Role.parse(value) is expected


def test_unknown_role_is_rejected():
    with pytest.raises(IllegalArgumentError):
        Role.parse("superuser")
