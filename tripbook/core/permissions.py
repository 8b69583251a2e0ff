import fnmatch
import logging
from typing import Iterable, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from ..config import settings
from ..crud import account as account_repo
from ..database import get_db
from ..models.account import Account, Role
from .exceptions import AccessDeniedError, AuthenticationError, InvalidTokenError
from .security import decode_access_token, validate_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def is_public_path(path: str, patterns: Optional[Iterable[str]] = None) -> bool:
    """Match a request path against Ant-style patterns ("/api/auth/**")"""
    if patterns is None:
        patterns = settings.public_paths
    for pattern in patterns:
        if pattern.endswith("/**"):
            prefix = pattern[:-3]
            if path == prefix or path.startswith(prefix + "/"):
                return True
        elif fnmatch.fnmatchcase(path, pattern):
            return True
    return False


def resolve_account(token: str, db: Session) -> Optional[Account]:
    """Return the account the token was issued to, or None if it does not check out"""
    try:
        username = decode_access_token(token)["sub"]
    except InvalidTokenError as e:
        logger.warning("Invalid bearer token: %s", e.message)
        return None

    account = account_repo.get_by_username(db, username)
    if account is None:
        logger.warning("Bearer token for unknown account: %s", username)
        return None
    if not validate_token(token, account.username):
        logger.warning("Bearer token not valid for account: %s", username)
        return None
    if not account.is_usable:
        logger.warning("Bearer token for disabled account: %s", username)
        return None
    return account


def authenticate_request(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[Account]:
    """Resolve the caller once per request.

    Registered as an application-wide dependency; FastAPI caches the result
    so handlers asking for the current account reuse it.
    """
    account = None
    if credentials:
        account = resolve_account(credentials.credentials, db)

    if account is None and not is_public_path(request.url.path):
        raise AuthenticationError("Unauthorized access")
    return account


def get_current_account(account: Optional[Account] = Depends(authenticate_request)) -> Account:
    """Get the authenticated account or fail with 401"""
    if account is None:
        raise AuthenticationError("Not authenticated")
    return account


def require_role(required_role: Role):
    """Dependency factory: the caller needs required_role (admins always pass)"""
    def role_checker(current_account: Account = Depends(get_current_account)) -> Account:
        if not (current_account.has_role(required_role) or current_account.has_role(Role.ROLE_ADMIN)):
            raise AccessDeniedError("Not enough permissions")
        return current_account
    return role_checker


def require_admin(current_account: Account = Depends(get_current_account)) -> Account:
    """Require admin role"""
    if not current_account.has_role(Role.ROLE_ADMIN):
        raise AccessDeniedError("Admin access required")
    return current_account


require_user = require_role(Role.ROLE_USER)
