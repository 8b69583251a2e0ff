import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional
from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from werkzeug.security import check_password_hash, generate_password_hash
from ..config import settings
from .exceptions import (
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
)

logger = logging.getLogger(__name__)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return check_password_hash(hashed_password, plain_password)


def get_password_hash(password: str) -> str:
    """Hash a password with a random per-password salt"""
    return generate_password_hash(password)


def create_access_token(subject: str, roles: Iterable[str], expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT carrying the subject and its roles"""
    issued_at = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": subject,
        "roles": sorted(roles),
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry, and return the claims.

    Raises TokenExpiredError, MalformedTokenError or InvalidSignatureError.
    """
    try:
        jwt.get_unverified_claims(token)
    except JWTError as e:
        raise MalformedTokenError("Unable to parse JWT token") from e

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpiredError("JWT token has expired") from e
    except JWTClaimsError as e:
        raise MalformedTokenError(f"Invalid JWT claims: {e}") from e
    except JWTError as e:
        raise InvalidSignatureError("JWT signature validation failed") from e

    if not isinstance(payload.get("sub"), str):
        raise MalformedTokenError("JWT token has no subject")
    if not isinstance(payload.get("exp"), (int, float)):
        raise MalformedTokenError("JWT token has no expiration")
    return payload


def get_username_from_token(token: str) -> str:
    return decode_access_token(token)["sub"]


def get_roles_from_token(token: str) -> List[str]:
    return list(decode_access_token(token).get("roles") or [])


def is_token_expired(claims: dict) -> bool:
    # valid strictly before exp
    return datetime.now(timezone.utc).timestamp() >= claims["exp"]


def validate_token(token: str, username: str) -> bool:
    """Return True when the token is authentic, unexpired and issued to username"""
    try:
        claims = decode_access_token(token)
    except InvalidTokenError as e:
        logger.warning("Rejected JWT token: %s", e.message)
        return False
    return claims["sub"] == username and not is_token_expired(claims)
