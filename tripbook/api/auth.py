from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..models.account import Account
from ..schemas.account import (
    AccountDetails, AccountRegistration, EnabledUpdate,
    LoginRequest, PasswordChange, RolesUpdate, Token
)
from ..schemas.common import IdResponse
from ..services import account_service
from ..core.permissions import get_current_account, require_admin, require_user

router = APIRouter(prefix="/api/auth", tags=["authentication"])


@router.post("/register", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def register(
    registration: AccountRegistration,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Register a new account (admin only)"""
    roles = account_service.parse_roles([registration.role] if registration.role else None)
    account = account_service.register(
        db,
        username=registration.username,
        email=registration.email,
        password=registration.password,
        roles=roles,
        first_name=registration.first_name,
        last_name=registration.last_name,
    )
    return {"id": account.id}


@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Login and get access token"""
    access_token = account_service.authenticate(db, credentials.username, credentials.password)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=AccountDetails)
def get_current_account_info(current_account: Account = Depends(require_user)):
    """Get current account information"""
    return account_service.to_details(current_account)


@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def change_password(
    change: PasswordChange,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    account_service.change_password(db, current_account, change.current_password, change.new_password)


# Admin account management endpoints
@router.get("/accounts", response_model=List[AccountDetails])
def list_accounts(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    accounts = account_service.list_accounts(db, skip=skip, limit=limit)
    return [account_service.to_details(a) for a in accounts]


@router.get("/accounts/{username_or_email}", response_model=AccountDetails)
def get_account(
    username_or_email: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    account = account_service.get_by_username_or_email(db, username_or_email)
    return account_service.to_details(account)


@router.put("/accounts/{username}/roles", response_model=AccountDetails)
def update_roles(
    username: str,
    update: RolesUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    account = account_service.update_roles(db, username, account_service.parse_roles(update.roles))
    return account_service.to_details(account)


@router.put("/accounts/{username}/enabled", response_model=AccountDetails)
def set_account_enabled(
    username: str,
    update: EnabledUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    account = account_service.set_enabled(db, username, update.enabled)
    return account_service.to_details(account)
