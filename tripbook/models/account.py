import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func
from ..database import Base
from ..core.exceptions import IllegalArgumentError
from ..core.security import get_password_hash, verify_password


class Role(str, enum.Enum):
    ROLE_ADMIN = "ROLE_ADMIN"
    ROLE_USER = "ROLE_USER"
    ROLE_SELLER = "ROLE_SELLER"
    ROLE_BUYER = "ROLE_BUYER"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Accept ROLE_ADMIN, ADMIN or the display label, in any case"""
        key = (value or "").strip().upper()
        if not key.startswith("ROLE_"):
            key = "ROLE_" + key
        if key in cls.__members__:
            return cls[key]
        for role, label in _ROLE_LABELS.items():
            if label.lower() == (value or "").strip().lower():
                return role
        raise IllegalArgumentError(f"Unknown role: {value}")


_ROLE_LABELS = {
    Role.ROLE_ADMIN: "Administrator",
    Role.ROLE_USER: "User",
    Role.ROLE_SELLER: "Seller",
    Role.ROLE_BUYER: "Buyer",
}


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50))
    last_name = Column(String(50))
    enabled = Column(Boolean, default=True, nullable=False)
    locked = Column(Boolean, default=False, nullable=False)
    expired = Column(Boolean, default=False, nullable=False)
    credentials_expired = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    password_updated_at = Column(DateTime, nullable=False)

    role_entries = relationship(
        "AccountRole",
        back_populates="account",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @validates("email")
    def _normalize_email(self, key, value):
        return value.lower() if value is not None else value

    @property
    def roles(self) -> set:
        return {entry.role for entry in self.role_entries}

    @roles.setter
    def roles(self, roles):
        wanted = set(roles)
        # keep unchanged rows so the unique (account, role) index is never hit mid-flush
        self.role_entries = [e for e in self.role_entries if e.role in wanted] + [
            AccountRole(role=role) for role in wanted - self.roles
        ]

    @property
    def role_names(self) -> list:
        return sorted(role.value for role in self.roles)

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def set_password(self, password: str) -> None:
        self.password_hash = get_password_hash(password)
        self.password_updated_at = datetime.now(timezone.utc).replace(tzinfo=None)

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    @property
    def is_usable(self) -> bool:
        return self.enabled and not self.locked and not self.expired and not self.credentials_expired


class AccountRole(Base):
    __tablename__ = "account_roles"
    __table_args__ = (UniqueConstraint("account_id", "role", name="uq_account_role"),)

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(Enum(Role, name="account_role", native_enum=False, length=20), nullable=False)

    account = relationship("Account", back_populates="role_entries")
