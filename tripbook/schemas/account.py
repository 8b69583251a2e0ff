from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List


class AccountRegistration(BaseModel):
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    username: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=4, max_length=128)
    # ADMIN, USER, SELLER, BUYER; defaults to USER
    role: Optional[str] = None


class LoginRequest(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=4, max_length=128)


class RolesUpdate(BaseModel):
    roles: List[str] = Field(..., min_length=1)


class EnabledUpdate(BaseModel):
    enabled: bool


class AccountDetails(BaseModel):
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: List[str]
    enabled: bool = True
