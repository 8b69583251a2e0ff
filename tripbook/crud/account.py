from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from ..models.account import Account


def get_by_username(db: Session, username: str) -> Optional[Account]:
    return db.query(Account).filter(Account.username == username).first()


def get_by_email(db: Session, email: str) -> Optional[Account]:
    return db.query(Account).filter(Account.email == email.lower()).first()


def get_by_username_or_email(db: Session, value: str) -> Optional[Account]:
    """Exact username match wins over an email match"""
    return get_by_username(db, value) or get_by_email(db, value)


def identity_taken(db: Session, username: str, email: str) -> bool:
    # usernames and emails share one namespace since login accepts either
    identities = {username, email.lower()}
    return db.query(Account.id).filter(
        or_(Account.username.in_(identities), Account.email.in_(identities))
    ).first() is not None


def list_accounts(db: Session, skip: int = 0, limit: int = 100) -> List[Account]:
    return db.query(Account).order_by(Account.id.asc()).offset(skip).limit(limit).all()


def save(db: Session, account: Account) -> Account:
    db.add(account)
    db.commit()
    db.refresh(account)
    return account
