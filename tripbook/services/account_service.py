import logging
from typing import Iterable, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..config import settings
from ..core.exceptions import AuthenticationError, EntityExistsError, EntityNotFoundError
from ..core.security import create_access_token
from ..crud import account as account_repo
from ..models.account import Account, Role

logger = logging.getLogger(__name__)


def parse_roles(values: Optional[Iterable[str]]) -> set:
    roles = {Role.parse(v) for v in (values or [])}
    return roles or {Role.ROLE_USER}


def register(
    db: Session,
    username: str,
    email: str,
    password: str,
    roles: Optional[Iterable[Role]] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
) -> Account:
    """Create an account; Conflict when the username or email is taken"""
    if account_repo.identity_taken(db, username, email):
        raise EntityExistsError("Username or email already exists")

    account = Account(
        username=username,
        email=email,
        first_name=first_name,
        last_name=last_name,
    )
    account.set_password(password)
    account.roles = set(roles) if roles else {Role.ROLE_USER}

    try:
        account = account_repo.save(db, account)
    except IntegrityError as e:
        db.rollback()
        raise EntityExistsError("Username or email already exists") from e

    logger.info("Registered account %s with roles %s", account.username, account.role_names)
    return account


def authenticate(db: Session, username: str, password: str) -> str:
    """Check credentials and return a bearer token carrying the current roles"""
    account = account_repo.get_by_username_or_email(db, username)
    if account is None or not account.check_password(password):
        logger.warning("Failed login for %s", username)
        raise AuthenticationError("Invalid credentials")
    if not account.enabled:
        raise AuthenticationError("Account is disabled")
    if account.locked:
        raise AuthenticationError("Account is locked")
    if account.expired or account.credentials_expired:
        raise AuthenticationError("Account has expired")

    logger.info("Issued token for %s", account.username)
    return create_access_token(account.username, account.role_names)


def get_by_username_or_email(db: Session, value: str) -> Account:
    account = account_repo.get_by_username_or_email(db, value)
    if account is None:
        raise EntityNotFoundError(f"Account not found with username or email: {value}")
    return account


def list_accounts(db: Session, skip: int = 0, limit: int = 100) -> List[Account]:
    return account_repo.list_accounts(db, skip=skip, limit=limit)


def change_password(db: Session, account: Account, current_password: str, new_password: str) -> Account:
    if not account.check_password(current_password):
        raise AuthenticationError("Current password is incorrect")
    account.set_password(new_password)
    logger.info("Password changed for %s", account.username)
    return account_repo.save(db, account)


def update_roles(db: Session, username: str, roles: Iterable[Role]) -> Account:
    account = get_by_username_or_email(db, username)
    account.roles = set(roles)
    account = account_repo.save(db, account)
    logger.info("Roles of %s set to %s", account.username, account.role_names)
    return account


def set_enabled(db: Session, username: str, enabled: bool) -> Account:
    account = get_by_username_or_email(db, username)
    account.enabled = enabled
    return account_repo.save(db, account)


def to_details(account: Account) -> dict:
    return {
        "id": account.id,
        "username": account.username,
        "email": account.email,
        "first_name": account.first_name,
        "last_name": account.last_name,
        "roles": account.role_names,
        "enabled": account.enabled,
    }


def ensure_default_accounts(db: Session) -> int:
    """Create the configured admin, user, seller and buyer accounts when missing"""
    defaults = [
        (settings.default_admin_username, settings.default_admin_email,
         settings.default_admin_password, Role.ROLE_ADMIN),
        (settings.default_user_username, settings.default_user_email,
         settings.default_user_password, Role.ROLE_USER),
        (settings.default_seller_username, settings.default_seller_email,
         settings.default_seller_password, Role.ROLE_SELLER),
        (settings.default_buyer_username, settings.default_buyer_email,
         settings.default_buyer_password, Role.ROLE_BUYER),
    ]
    created = 0
    for username, email, password, role in defaults:
        if account_repo.identity_taken(db, username, email):
            continue
        register(db, username, email, password, {role})
        created += 1
    return created
